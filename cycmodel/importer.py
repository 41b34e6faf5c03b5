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
"""Read reaction records of the database into reaction instances"""

import logging
from typing import Dict, List, Optional
from cycmodel.names import *
from cycmodel.database import PathwayDatabase
from cycmodel.errors import DatabaseError
from cycmodel.metabolite import MetaboliteInstance
from cycmodel.reaction import ReactionInstance, ReactionKind
from cycmodel.compartments import CompartmentResolver
from cycmodel.parameters import ModelParameters

LOG = logging.getLogger(__name__)


def reaction_slots(direction: Optional[str]):
    """Return the slots holding reactants and products. Reactions running right-to-left (RIGHT-TO-LEFT,
    PHYSIOL-RIGHT-TO-LEFT, IRREVERSIBLE-RIGHT-TO-LEFT) are read backwards."""
    if direction is not None and str(direction).upper().endswith(RIGHT_TO_LEFT):
        return RIGHT, LEFT
    return LEFT, RIGHT


def is_reversible(direction: Optional[str]) -> bool:
    return direction is None or str(direction).upper() == REVERSIBLE


def coefficient_of(database: PathwayDatabase, reaction_id: str, slot: str, metabolite_id: str, report=None) -> int:
    """Stoichiometric coefficient from the COEFFICIENT annotation (1 if missing or unreadable)"""
    annotation = database.get_value_annot(reaction_id, slot, metabolite_id, COEFFICIENT)
    if annotation is None:
        return 1
    try:
        return int(str(annotation).strip())
    except ValueError:
        LOG.warning('Unreadable coefficient "' + str(annotation) + '" of ' + metabolite_id + ' in ' + reaction_id +
                    ', using 1.')
        if report is not None:
            report.inc_unparsable_coefficients()
        return 1


def gene_rule(database: PathwayDatabase, reaction_id: str, accessions: bool = False) -> str:
    """
    Gene-protein-reaction rule of a reaction, e.g., '(b0001 and b0002) or (b0003)'

    Each enzyme contributes the conjunction of the genes encoding it, the enzymes are joined by 'or'.
    Enzymes without genes are skipped.

    Args:
        accessions (optional (bool)): (Default: False)
            Use the ACCESSION-1 slot of the genes (e.g., b-numbers) instead of gene frame ids. Genes without
            an accession keep their frame id.
    """
    enzyme_rules = []
    for enzyme in database.enzymes_of_reaction(reaction_id):
        genes = []
        for gene in database.genes_of_protein(str(enzyme)):
            gene_id = str(gene)
            if accessions:
                try:
                    accession = database.get_slot_value(gene_id, ACCESSION_1)
                except DatabaseError as e:
                    LOG.debug('No accession for gene ' + gene_id + '. ' + e.log_message())
                    accession = None
                if accession:
                    gene_id = str(accession).replace('"', '')
            genes.append(gene_id)
        if genes:
            enzyme_rules.append('(' + ' and '.join(genes) + ')')
    return ' or '.join(enzyme_rules)


def reactions_from_database(database: PathwayDatabase,
                            reaction_id: str,
                            params: ModelParameters,
                            resolver: Optional[CompartmentResolver] = None,
                            report=None) -> List[ReactionInstance]:
    """
    Build the plain reaction instances of a database reaction

    A reaction that lists several distinct RXN-LOCATIONS yields one instance per location, named
    '<name>_<location>'. Otherwise a single instance is returned.

    Args:
        database (PathwayDatabase):
            Database to read from.

        reaction_id (str):
            Frame id of the reaction.

        params (ModelParameters):
            Model parameters.

        resolver (optional (CompartmentResolver)):
            Compartment resolver. Pass one resolver for all reactions of a network to collect its counters.

        report (optional (NetworkReport)):
            Receives the count of unreadable coefficients.

    Returns:
        (list of ReactionInstance)

    Raises DatabaseError if the reaction or one of its participants cannot be loaded.
    """
    if resolver is None:
        resolver = CompartmentResolver(database, params)
    frame = database.load_frame(reaction_id)
    direction = frame.slot_value(REACTION_DIRECTION)
    reactant_slot, product_slot = reaction_slots(direction)
    name = str(frame.slot_value(COMMON_NAME) or reaction_id)
    locations = list(dict.fromkeys(str(loc) for loc in frame.slot_values(RXN_LOCATIONS)))
    rule = gene_rule(database, reaction_id, params[GENE_RULE_ACCESSIONS])

    # each participant is loaded once per record, even when the record is split by location
    metabolite_frames = {}
    participants: Dict[str, List] = {}
    for slot in (reactant_slot, product_slot):
        participants[slot] = []
        for metabolite_id in frame.slot_values(slot):
            metabolite_id = str(metabolite_id)
            if metabolite_id not in metabolite_frames:
                metabolite_frames[metabolite_id] = database.load_frame(metabolite_id)
            coefficient = coefficient_of(database, reaction_id, slot, metabolite_id, report)
            participants[slot].append((metabolite_id, coefficient))

    def build(location: Optional[str], multi_location: bool) -> ReactionInstance:
        sides = []
        for slot in (reactant_slot, product_slot):
            side = []
            for metabolite_id, coefficient in participants[slot]:
                compartment = resolver.compartment_of(reaction_id, metabolite_id, slot, locations, location)
                side.append(MetaboliteInstance.from_frame(metabolite_frames[metabolite_id], compartment, coefficient))
            sides.append(frozenset(side))
        return ReactionInstance(kind=ReactionKind.PLAIN,
                                name=name + '_' + location if multi_location else name,
                                reversible=is_reversible(direction),
                                reactants=sides[0],
                                products=sides[1],
                                location=location,
                                frame_id=reaction_id,
                                multi_location=multi_location,
                                cannot_balance=frame.has_slot(CANNOT_BALANCE),
                                gene_rule=rule)

    if len(locations) > 1:
        return [build(location, True) for location in locations]
    return [build(locations[0] if locations else None, False)]
