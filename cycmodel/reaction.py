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
"""Reaction instances of a network and functions that operate on them

A ReactionInstance is one of four kinds (ReactionKind). Plain reactions are read from the database,
instantiated reactions are created from generic reactions by substituting class members, exchange and
diffusion reactions are synthesized. All kinds share the same fields; the kind decides which of the optional
fields (parent_id, instance_ids, secondary_compartment) are set, and the functions below dispatch on it.
Two reactions are the same if they have the same reactants, products and location.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple
from cycmodel.names import *
from cycmodel.metabolite import MetaboliteInstance
from cycmodel.identifiers import reaction_id
from cycmodel.parameters import ModelParameters

LOG = logging.getLogger(__name__)


class ReactionKind(Enum):
    PLAIN = PLAIN
    INSTANTIATED = INSTANTIATED
    EXCHANGE = EXCHANGE
    DIFFUSION = DIFFUSION


@dataclass(frozen=True)
class ReactionInstance:
    """
    One reaction of the network

    Only reactants, products and location take part in comparisons and hashing.

    Args:
        kind (ReactionKind):
            PLAIN, INSTANTIATED, EXCHANGE or DIFFUSION.

        name (str):
            Display name of the reaction.

        reversible (bool):
            Whether the reaction can carry flux in both directions.

        reactants, products (frozenset of MetaboliteInstance):
            Left and right hand side of the reaction.

        location (optional (str)):
            Location of the reaction if the database lists one. Distinguishes copies of a reaction that
            takes place in several locations.

        frame_id (optional (str)):
            Database frame of a plain reaction.

        parent_id, instance_ids (optional (str), (tuple of str)):
            Generic reaction and chosen class members of an instantiated reaction.

        secondary_compartment (optional (str)):
            Compartment that a diffusion reaction leads into.

        multi_location (optional (bool)):
            True if the database reaction was split by location (the location becomes part of the id).

        cannot_balance (optional (bool)):
            True if the database flags the reaction as impossible to balance.

        gene_rule (optional (str)):
            Gene-protein-reaction rule, e.g., '(b0001 and b0002) or (b0003)'.
    """
    kind: ReactionKind = field(compare=False)
    name: str = field(compare=False)
    reversible: bool = field(compare=False)
    reactants: FrozenSet[MetaboliteInstance]
    products: FrozenSet[MetaboliteInstance]
    location: Optional[str] = None
    frame_id: Optional[str] = field(default=None, compare=False)
    parent_id: Optional[str] = field(default=None, compare=False)
    instance_ids: Tuple[str, ...] = field(default=(), compare=False)
    secondary_compartment: Optional[str] = field(default=None, compare=False)
    multi_location: bool = field(default=False, compare=False)
    cannot_balance: bool = field(default=False, compare=False)
    gene_rule: str = field(default='', compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'reactants', frozenset(self.reactants))
        object.__setattr__(self, 'products', frozenset(self.products))
        object.__setattr__(self, 'instance_ids', tuple(self.instance_ids))
        if self.kind == ReactionKind.PLAIN and not self.frame_id:
            raise ValueError('Plain reaction ' + str(self.name) + ' requires a frame id.')
        if self.kind == ReactionKind.INSTANTIATED and not self.parent_id:
            raise ValueError('Instantiated reaction ' + str(self.name) + ' requires a parent reaction id.')
        if self.kind == ReactionKind.DIFFUSION and not self.secondary_compartment:
            raise ValueError('Diffusion reaction ' + str(self.name) + ' requires a secondary compartment.')
        if self.multi_location and not self.location:
            raise ValueError('Reaction ' + str(self.name) + ' was split by location but has no location.')

    @property
    def fingerprint(self) -> Tuple[FrozenSet[MetaboliteInstance], FrozenSet[MetaboliteInstance], Optional[str]]:
        return (self.reactants, self.products, self.location)

    @property
    def metabolites(self) -> FrozenSet[MetaboliteInstance]:
        return self.reactants | self.products

    def sorted_reactants(self) -> List[MetaboliteInstance]:
        return sort_metabolites(self.reactants)

    def sorted_products(self) -> List[MetaboliteInstance]:
        return sort_metabolites(self.products)


def sort_metabolites(metabolites: Iterable[MetaboliteInstance]) -> List[MetaboliteInstance]:
    return sorted(metabolites, key=lambda m: (m.metabolite_id, m.compartment, m.coefficient))


def _side_counts(metabolites: Iterable[MetaboliteInstance]) -> Optional[Dict[str, int]]:
    counts = defaultdict(int)
    for met in metabolites:
        if met.metabolite_id == ACCEPTOR:
            counts['A'] += met.coefficient
        elif met.metabolite_id == DONOR_H2:
            counts['A'] += met.coefficient
            counts['H'] += 2 * met.coefficient
        else:
            elements = met.element_counts
            if elements is None:
                return None
            for element, number in elements.items():
                counts[element] += number * met.coefficient
    return dict(counts)


def element_counts(reaction: ReactionInstance) -> Optional[Tuple[Dict[str, int], Dict[str, int]]]:
    """Atoms per element on the reactant and on the product side

    The placeholders '|Acceptor|' and '|Donor-H2|' count as one pseudo atom 'A' (plus two hydrogen atoms
    for the donor). Returns None if the formula of any participant could not be read.
    """
    left = _side_counts(reaction.reactants)
    right = _side_counts(reaction.products)
    if left is None or right is None:
        return None
    return left, right


def is_balanced(reaction: ReactionInstance) -> bool:
    """True if every element occurs equally often on both sides. A reaction without any formula data is balanced."""
    counts = element_counts(reaction)
    if counts is None:
        return False
    left, right = counts
    return left == right


def is_generic(reaction: ReactionInstance) -> bool:
    """True if any reactant or product is a metabolite class."""
    return any(met.is_class for met in reaction.metabolites)


def generate_reaction_id(reaction: ReactionInstance, params: ModelParameters) -> str:
    """SBML reaction id, e.g., 'R_RXN__45__12' or 'R_GLC_Exchange_LPAREN_e_RPAREN_'"""
    suffix = ''
    if reaction.kind == ReactionKind.PLAIN:
        base = reaction.frame_id
    elif reaction.kind == ReactionKind.INSTANTIATED:
        base = reaction.parent_id + ''.join('_' + i for i in reaction.instance_ids)
    else:
        base = reaction.name
        suffix = BOUNDARY_SUFFIX
    if reaction.multi_location and reaction.kind in (ReactionKind.PLAIN, ReactionKind.INSTANTIATED):
        base += '_' + reaction.location
    return reaction_id(params[REACTION_PREFIX], base, suffix)


def exchange_reaction(metabolite: MetaboliteInstance,
                      params: ModelParameters,
                      compartment: Optional[str] = None) -> ReactionInstance:
    """Reversible exchange of a metabolite between an open compartment (Default: external compartment) and the
    boundary compartment"""
    if compartment is None:
        compartment = params[EXTERNAL_COMPARTMENT]
    return ReactionInstance(kind=ReactionKind.EXCHANGE,
                            name=metabolite.metabolite_id + '_' + params[EXCHANGE_SUFFIX],
                            reversible=True,
                            reactants=frozenset([metabolite.relocated(compartment, 1)]),
                            products=frozenset([metabolite.relocated(params[BOUNDARY_COMPARTMENT], 1)]))


def diffusion_reaction(metabolite: MetaboliteInstance, from_compartment: str, to_compartment: str) -> ReactionInstance:
    """Reversible passive diffusion of a metabolite from one compartment into an adjoining one"""
    return ReactionInstance(kind=ReactionKind.DIFFUSION,
                            name=metabolite.metabolite_id + '_' + DIFFUSION_NAME_SUFFIX,
                            reversible=True,
                            reactants=frozenset([metabolite.relocated(from_compartment, 1)]),
                            products=frozenset([metabolite.relocated(to_compartment, 1)]),
                            secondary_compartment=to_compartment)


def _side_string(metabolites: Iterable[MetaboliteInstance]) -> str:
    terms = []
    for met in sort_metabolites(metabolites):
        coefficient = '' if met.coefficient == 1 else str(met.coefficient) + ' '
        terms.append(coefficient + met.metabolite_id + '[' + met.compartment + ']')
    return ' + '.join(terms)


def describe(reaction: ReactionInstance) -> str:
    """Tab separated one-line description: kind, source, name, location and equation"""
    source = reaction.frame_id or reaction.parent_id or ''
    arrow = ' <=> ' if reaction.reversible else ' --> '
    return '\t'.join([reaction.kind.value, source, reaction.name, reaction.location or '',
                      _side_string(reaction.reactants) + arrow + _side_string(reaction.products)])
