#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Instantiation of generic reactions

A generic reaction has metabolite classes among its participants, e.g., 'an alcohol + NAD+ -> an aldehyde +
NADH'. It is replaced by all elementally balanced reactions obtained by substituting each class with one of
its instances. Each class is substituted by the same instance wherever it occurs in the reaction.
"""

import logging
from collections import namedtuple
from dataclasses import dataclass, field
from itertools import product
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
from cycmodel.names import *
from cycmodel.database import PathwayDatabase
from cycmodel.errors import DatabaseError
from cycmodel.metabolite import MetaboliteInstance
from cycmodel.reaction import ReactionInstance, ReactionKind, is_balanced
from cycmodel.parameters import ModelParameters

LOG = logging.getLogger(__name__)

NamedList = namedtuple('NamedList', ['name', 'items'])


def list_combinations(named_lists: Sequence[NamedList]) -> Tuple[List[str], Iterator[Tuple[str, ...]]]:
    """Cartesian product of named lists

    Args:
        named_lists (list of NamedList):
            Lists to combine. The lists are not modified.

    Returns:
        (tuple):
        The names of the lists in input order and a generator over all tuples that pick one item from each
        list (in the same order). Without any list the generator yields one empty tuple. The number of
        tuples is the product of the list lengths.
    """
    names = [nl.name for nl in named_lists]
    items = [tuple(nl.items) for nl in named_lists]
    return names, product(*items)


@dataclass
class InstantiationResult:
    """Outcome of the instantiation of one generic reaction

    children: balanced instantiated reactions, candidates: number of combinations that were tried,
    rejected: number of combinations that were discarded, failed: the class lookup failed.
    """
    children: List[ReactionInstance] = field(default_factory=list)
    candidates: int = 0
    rejected: int = 0
    failed: bool = False


def class_instances(database: PathwayDatabase, class_id: str, cache: Optional[Dict[str, List[str]]] = None) -> List[str]:
    """Instances of a metabolite class, or [class_id] if the class has none. Raises DatabaseError.

    With the fallback the child of a reaction on an empty class still refers to that class, so it is an
    instantiated reaction that is generic. Only plain reactions are guaranteed to be specific.
    """
    if cache is not None and class_id in cache:
        return cache[class_id]
    instances = [str(i) for i in database.get_class_all_instances(class_id)]
    if not instances:
        LOG.debug('Class ' + class_id + ' has no instances.')
        instances = [class_id]
    if cache is not None:
        cache[class_id] = instances
    return instances


def instantiate_generic_reaction(database: PathwayDatabase,
                                 reaction: ReactionInstance,
                                 params: ModelParameters,
                                 cache: Optional[Dict[str, List[str]]] = None) -> Optional[InstantiationResult]:
    """
    Replace a generic plain reaction by its balanced instantiations

    Example:
        result = instantiate_generic_reaction(db, reaction, params)
        if result is not None:
            network.add_reactions(result.children)

    Args:
        database (PathwayDatabase):
            Database providing class members and metabolite frames.

        reaction (ReactionInstance):
            A plain reaction.

        params (ModelParameters):
            Model parameters.

        cache (optional (dict)):
            Class id -> instances. Shared between calls to avoid repeated lookups of the same class.

    Returns:
        (InstantiationResult):
        None if the reaction cannot be instantiated: it is not a plain reaction, has no metabolite classes,
        is flagged as impossible to balance or the database already lists specific forms of it.

    Reaction sides are sets: when two classes of one side resolve to the same metabolite, the child holds
    that metabolite once with the coefficient of a single class term.
    """
    if reaction.kind != ReactionKind.PLAIN:
        return None
    generic_reactants = [m for m in reaction.sorted_reactants() if m.is_class]
    generic_products = [m for m in reaction.sorted_products() if m.is_class]
    if not generic_reactants and not generic_products:
        return None
    if reaction.cannot_balance:
        return None
    try:
        if database.specific_forms_of_reaction(reaction.frame_id):
            return None
    except DatabaseError as e:
        LOG.error('Failed to look up specific forms of ' + reaction.frame_id + '. ' + e.log_message())
        return InstantiationResult(failed=True)

    concrete_reactants = [m for m in reaction.reactants if not m.is_class]
    concrete_products = [m for m in reaction.products if not m.is_class]

    named_lists = []
    try:
        for term in generic_reactants + generic_products:
            if term.metabolite_id not in [nl.name for nl in named_lists]:
                named_lists.append(NamedList(term.metabolite_id, class_instances(database, term.metabolite_id, cache)))
    except DatabaseError as e:
        LOG.error('Failed to look up the instances of a class in ' + reaction.frame_id + '. ' + e.log_message())
        return InstantiationResult(failed=True)

    names, combinations = list_combinations(named_lists)
    result = InstantiationResult()
    frames = {}
    for combination in combinations:
        result.candidates += 1
        choice = dict(zip(names, combination))
        try:
            reactants = concrete_reactants + [_substitute(database, frames, t, choice) for t in generic_reactants]
            products = concrete_products + [_substitute(database, frames, t, choice) for t in generic_products]
        except DatabaseError as e:
            LOG.warning('Rejected instantiation ' + str(combination) + ' of ' + reaction.frame_id + '. ' +
                        e.log_message())
            result.rejected += 1
            continue
        child = ReactionInstance(kind=ReactionKind.INSTANTIATED,
                                 name=reaction.name + '_' + '_'.join(combination),
                                 reversible=reaction.reversible,
                                 reactants=frozenset(reactants),
                                 products=frozenset(products),
                                 location=reaction.location,
                                 parent_id=reaction.frame_id,
                                 instance_ids=tuple(combination),
                                 multi_location=reaction.multi_location,
                                 gene_rule=reaction.gene_rule)
        if is_balanced(child):
            result.children.append(child)
        else:
            result.rejected += 1
    LOG.debug('Instantiated ' + str(len(result.children)) + ' of ' + str(result.candidates) + ' candidates of ' +
              reaction.frame_id + '.')
    return result


def _substitute(database: PathwayDatabase, frames: Dict, term: MetaboliteInstance, choice: Dict[str, str]):
    # the chosen metabolite takes the compartment and coefficient of the class it replaces
    metabolite_id = choice[term.metabolite_id]
    if metabolite_id not in frames:
        frames[metabolite_id] = database.load_frame(metabolite_id)
    return MetaboliteInstance.from_frame(frames[metabolite_id], term.compartment, term.coefficient)
