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
"""Class: reaction network (ReactionNetwork)

The network is built in stages that each transform the whole network: import of the database reactions,
filtering, removal of unbalanced reactions, instantiation of generic reactions and the synthesis of diffusion
and exchange reactions. Reactions are indexed by their fingerprint (reactants, products, location), so the
network never holds two reactions that are structurally the same. A rejected duplicate is logged and kept in
ReactionNetwork.duplicates together with the reaction it duplicates.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple
from cycmodel.names import *
from cycmodel.database import PathwayDatabase
from cycmodel.errors import DatabaseError
from cycmodel.metabolite import MetaboliteInstance
from cycmodel.reaction import ReactionInstance, ReactionKind, is_balanced, is_generic, generate_reaction_id, \
    exchange_reaction, diffusion_reaction, describe, sort_metabolites
from cycmodel.compartments import CompartmentResolver
from cycmodel.importer import reactions_from_database
from cycmodel.instantiation import instantiate_generic_reaction
from cycmodel.parameters import ModelParameters
from cycmodel.report import NetworkReport

LOG = logging.getLogger(__name__)


def parse_molecular_weight(value) -> Optional[float]:
    """Molecular weight as float. Lisp double notation ('180.16d0') is accepted. None if missing or unreadable."""
    if value is None:
        return None
    try:
        return float(str(value).strip().lower().replace('d', 'e'))
    except ValueError:
        return None


class ReactionNetwork:
    """
    A set of structurally distinct reactions assembled from a pathway database

    Example:
        network = ReactionNetwork.from_database(db, ModelParameters())
        model = to_cobra_model(network)

    Args:
        database (PathwayDatabase):
            The database that reactions, metabolites and classes are read from.

        params (optional (ModelParameters)):
            Model parameters. (Default: ModelParameters())
    """

    def __init__(self, database: PathwayDatabase, params: Optional[ModelParameters] = None):
        self.database = database
        self.params = params if params is not None else ModelParameters()
        self.report = NetworkReport()
        self.resolver = CompartmentResolver(database, self.params)
        self.duplicates: List[Tuple[ReactionInstance, ReactionInstance]] = []
        self._reactions: Dict[Tuple, ReactionInstance] = {}
        self._class_cache = {} if self.params[CACHE_CATEGORY_LOOKUPS] else None

    @property
    def reactions(self) -> List[ReactionInstance]:
        return list(self._reactions.values())

    def __len__(self):
        return len(self._reactions)

    def __iter__(self):
        return iter(list(self._reactions.values()))

    def __contains__(self, reaction: ReactionInstance):
        return reaction.fingerprint in self._reactions

    def get(self, reaction: ReactionInstance) -> Optional[ReactionInstance]:
        """The network member that is structurally equal to 'reaction', if any"""
        return self._reactions.get(reaction.fingerprint)

    def get_by_id(self, reaction_id: str) -> Optional[ReactionInstance]:
        """Network member with the SBML id 'reaction_id', e.g., 'R_RXN__45__1'"""
        for reaction in self._reactions.values():
            if generate_reaction_id(reaction, self.params) == reaction_id:
                return reaction
        return None

    def metabolites(self) -> List[MetaboliteInstance]:
        """Distinct participants (by metabolite id and compartment) of all reactions, sorted"""
        found = {}
        for reaction in self._reactions.values():
            for met in sort_metabolites(reaction.metabolites):
                found.setdefault((met.metabolite_id, met.compartment), met.relocated(met.compartment, 1))
        return [found[key] for key in sorted(found)]

    def add_reaction(self, reaction: ReactionInstance) -> bool:
        """Insert a reaction unless a structurally equal one is already present

        Returns:
            (bool): True if the reaction was inserted.
        """
        existing = self._reactions.get(reaction.fingerprint)
        if existing is not None:
            self.duplicates.append((existing, reaction))
            self.report.inc_duplicates_rejected()
            LOG.debug('Rejected duplicate reaction.\n  kept:     ' + describe(existing) + '\n  rejected: ' +
                      describe(reaction))
            return False
        self._reactions[reaction.fingerprint] = reaction
        return True

    def add_reactions(self, reactions: Iterable[ReactionInstance]) -> List[ReactionInstance]:
        """Insert reactions. Returns the reactions that were inserted."""
        return [r for r in reactions if self.add_reaction(r)]

    def _keep(self, keep: List[ReactionInstance]) -> None:
        self._reactions = {r.fingerprint: r for r in keep}

    # Stage 1
    def import_reactions(self, reaction_ids: Optional[List[str]] = None) -> List[ReactionInstance]:
        """Read reactions from the database (all reactions if reaction_ids is None)

        A reaction that fails to load is logged and skipped.
        """
        if reaction_ids is None:
            reaction_ids = self.database.all_reactions()
        imported = []
        for reaction_id in reaction_ids:
            self.report.inc_starting_reactions()
            try:
                instances = reactions_from_database(self.database, reaction_id, self.params, self.resolver,
                                                    self.report)
            except DatabaseError as e:
                LOG.error('Failed to import reaction ' + str(reaction_id) + '. ' + e.log_message())
                self.report.inc_import_failures()
                continue
            if len(instances) > 1:
                self.report.inc_location_splits(len(instances) - 1)
            imported += self.add_reactions(instances)
        LOG.info('Imported ' + str(len(imported)) + ' reactions from ' + str(len(reaction_ids)) + ' database reactions.')
        return imported

    # Stage 2
    def _class_members(self, class_ids: Iterable[str]) -> Set[str]:
        members = set()
        for class_id in class_ids:
            members.add(class_id)
            try:
                members.update(str(i) for i in self.database.get_class_all_instances(class_id))
            except DatabaseError as e:
                LOG.warning('Cannot filter by class ' + str(class_id) + '. ' + e.log_message())
        return members

    def filter_reactions(self,
                         reaction_classes: Optional[List[str]] = None,
                         metabolite_classes: Optional[List[str]] = None,
                         reaction_ids: Optional[List[str]] = None) -> List[ReactionInstance]:
        """
        Remove reactions by reaction class, by metabolite class and by id

        Args:
            reaction_classes (optional (list of str)):
                Remove reactions that are instances of these classes. (Default: params['excluded_reaction_classes'])

            metabolite_classes (optional (list of str)):
                Remove reactions with a participant that is an instance of (or is) one of these classes.
                (Default: params['excluded_metabolite_classes'])

            reaction_ids (optional (list of str)):
                Remove reactions with these database frame ids. (Default: params['excluded_reactions'])

        Returns:
            (list of ReactionInstance): The removed reactions.
        """
        if reaction_classes is None:
            reaction_classes = self.params[EXCLUDED_REACTION_CLASSES]
        if metabolite_classes is None:
            metabolite_classes = self.params[EXCLUDED_METABOLITE_CLASSES]
        if reaction_ids is None:
            reaction_ids = self.params[EXCLUDED_REACTIONS]
        excluded_reactions = self._class_members(reaction_classes) | set(reaction_ids)
        excluded_metabolites = self._class_members(metabolite_classes)

        keep, removed = [], []
        for reaction in self._reactions.values():
            source = reaction.frame_id or reaction.parent_id
            if source in excluded_reactions or any(m.metabolite_id in excluded_metabolites
                                                   for m in reaction.metabolites):
                removed.append(reaction)
            else:
                keep.append(reaction)
        self._keep(keep)
        self.report.inc_filtered_reactions(len(removed))
        LOG.info('Removed ' + str(len(removed)) + ' reactions by filtering.')
        return removed

    # Stage 3
    def remove_unbalanced_reactions(self) -> List[ReactionInstance]:
        """Remove plain, non-generic reactions that are not elementally balanced

        Generic reactions are handled by the instantiation, synthesized reactions are balanced by construction
        and reactions flagged as impossible to balance are left to remove_cannot_balance_reactions.
        """
        keep, removed = [], []
        for reaction in self._reactions.values():
            if reaction.kind == ReactionKind.PLAIN and not reaction.cannot_balance and not is_generic(reaction) \
                    and not is_balanced(reaction):
                LOG.debug('Removed unbalanced reaction ' + reaction.frame_id + '.')
                removed.append(reaction)
            else:
                keep.append(reaction)
        self._keep(keep)
        self.report.inc_unbalanced_removed(len(removed))
        LOG.info('Removed ' + str(len(removed)) + ' unbalanced reactions.')
        return removed

    def remove_cannot_balance_reactions(self) -> List[ReactionInstance]:
        """Remove plain reactions that the database flags with CANNOT-BALANCE?"""
        keep, removed = [], []
        for reaction in self._reactions.values():
            if reaction.kind == ReactionKind.PLAIN and reaction.cannot_balance:
                LOG.debug('Removed reaction with cannot-balance set: ' + reaction.frame_id + '.')
                removed.append(reaction)
            else:
                keep.append(reaction)
        self._keep(keep)
        self.report.inc_cannot_balance_removed(len(removed))
        return removed

    # Stage 4
    def instantiate_generic_reactions(self) -> List[ReactionInstance]:
        """
        Replace every generic plain reaction by its balanced instantiations

        Generic reactions that yield no balanced instantiation (or cannot be instantiated) are dropped.

        Returns:
            (list of ReactionInstance): The instantiated reactions that were added.
        """
        keep, children = [], []
        for reaction in self._reactions.values():
            if reaction.kind != ReactionKind.PLAIN or not is_generic(reaction):
                keep.append(reaction)
                continue
            self.report.inc_generic_found()
            result = instantiate_generic_reaction(self.database, reaction, self.params, self._class_cache)
            if result is None or not result.children:
                self.report.inc_generic_failed()
                LOG.debug('Generic reaction ' + reaction.frame_id + ' was not instantiated.')
            else:
                self.report.inc_generic_instantiated()
                children += result.children
            if result is not None:
                self.report.inc_candidates(result.candidates, result.rejected)
        self._keep(keep)
        added = self.add_reactions(children)
        self.report.inc_instantiated_reactions(len(added))
        LOG.info('Instantiated ' + str(self.report.generic_instantiated) + ' of ' + str(self.report.generic_found) +
                 ' generic reactions into ' + str(len(added)) + ' reactions.')
        return added

    # Stage 5
    def add_passive_diffusion_reactions(self,
                                        from_compartment: Optional[str] = None,
                                        to_compartment: Optional[str] = None,
                                        max_weight: Optional[float] = None) -> List[ReactionInstance]:
        """
        Let small metabolites diffuse from one compartment into another

        Every distinct metabolite in 'from_compartment' with a molecular weight of at most 'max_weight' gets a
        reversible diffusion reaction into 'to_compartment'. A metabolite with a missing or unreadable weight
        is treated as having weight -1. Compartments are matched ignoring case, the reactant keeps the
        compartment spelling of the network.

        Args:
            from_compartment, to_compartment (optional (str)):
                (Default: params['diffusion_compartment'], params['diffusion_target'])

            max_weight (optional (float)):
                Maximum molecular weight in Dalton. (Default: params['diffusion_size'])

        Returns:
            (list of ReactionInstance): The diffusion reactions that were added.
        """
        if from_compartment is None:
            from_compartment = self.params[DIFFUSION_COMPARTMENT]
        if to_compartment is None:
            to_compartment = self.params[DIFFUSION_TARGET]
        if max_weight is None:
            max_weight = self.params[DIFFUSION_SIZE]
        seen = set()
        new_reactions = []
        for reaction in self.reactions:
            for met in sort_metabolites(reaction.metabolites):
                if met.compartment.lower() != from_compartment.lower() or met.metabolite_id in seen:
                    continue
                seen.add(met.metabolite_id)
                weight = parse_molecular_weight(met.molecular_weight)
                if weight is None:
                    LOG.warning('Unreadable molecular weight of ' + met.metabolite_id + ': ' + str(met.molecular_weight))
                    self.report.inc_unparsable_weights()
                    weight = -1.0
                if weight <= max_weight:
                    self.report.inc_diffusion_metabolites()
                    new_reactions.append(diffusion_reaction(met, met.compartment, to_compartment))
        added = self.add_reactions(new_reactions)
        self.report.inc_diffusion_reactions(len(added))
        LOG.info('Added ' + str(len(added)) + ' diffusion reactions.')
        return added

    # Stage 6
    def add_boundary_reactions(self, compartment: Optional[str] = None) -> List[ReactionInstance]:
        """Add an exchange reaction for every distinct metabolite in 'compartment' (matched ignoring case)

        Args:
            compartment (optional (str)):
                (Default: params['external_compartment'])

        Returns:
            (list of ReactionInstance): The exchange reactions that were added.
        """
        if compartment is None:
            compartment = self.params[EXTERNAL_COMPARTMENT]
        seen = set()
        new_reactions = []
        for reaction in self.reactions:
            for met in sort_metabolites(reaction.metabolites):
                if met.compartment.lower() == compartment.lower() and met.metabolite_id not in seen:
                    seen.add(met.metabolite_id)
                    new_reactions.append(exchange_reaction(met, self.params, met.compartment))
        self.report.inc_boundary_metabolites(len(seen))
        added = self.add_reactions(new_reactions)
        self.report.inc_boundary_reactions(len(added))
        LOG.info('Added ' + str(len(added)) + ' exchange reactions.')
        return added

    # Stage 7
    def count_transport_reactions(self) -> int:
        """Number of plain and instantiated reactions that belong to the transport reaction class"""
        try:
            transport = set(str(i) for i in self.database.get_class_all_instances(self.params[TRANSPORT_CLASS]))
        except DatabaseError as e:
            LOG.warning('Cannot count transport reactions. ' + e.log_message())
            transport = set()
        count = 0
        for reaction in self._reactions.values():
            if reaction.kind == ReactionKind.PLAIN and reaction.frame_id in transport:
                count += 1
            elif reaction.kind == ReactionKind.INSTANTIATED and reaction.parent_id in transport:
                count += 1
        self.report.transport_reactions = count
        return count

    def update_report(self) -> NetworkReport:
        self.report.location_fallbacks = self.resolver.location_fallbacks
        self.report.default_compartments = self.resolver.default_compartments
        self.report.total_reactions = len(self._reactions)
        return self.report

    @classmethod
    def from_database(cls,
                      database: PathwayDatabase,
                      params: Optional[ModelParameters] = None,
                      reaction_ids: Optional[List[str]] = None) -> "ReactionNetwork":
        """
        Build a network with all stages

        Import, filtering, removal of unbalanced (and optionally of cannot-balance) reactions, instantiation
        of generic reactions, passive diffusion, exchange reactions and the transport reaction count.

        Args:
            database (PathwayDatabase):
                Source database.

            params (optional (ModelParameters)):
                Model parameters. (Default: ModelParameters())

            reaction_ids (optional (list of str)):
                Database reactions to import. (Default: all reactions)

        Returns:
            (ReactionNetwork)
        """
        network = cls(database, params)
        LOG.info('Importing reactions ...')
        network.import_reactions(reaction_ids)
        LOG.info('Filtering unwanted reactions ...')
        network.filter_reactions()
        if network.params[REMOVE_UNBALANCED]:
            network.remove_unbalanced_reactions()
        if network.params[REMOVE_CANNOT_BALANCE]:
            network.remove_cannot_balance_reactions()
        LOG.info('Instantiating generic reactions ...')
        network.instantiate_generic_reactions()
        LOG.info('Adding diffusion and exchange reactions ...')
        network.add_passive_diffusion_reactions()
        network.add_boundary_reactions()
        network.count_transport_reactions()
        network.update_report().write_to_log()
        return network
