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
"""Class: metabolite instance (MetaboliteInstance)"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple
from cycmodel.names import *
from cycmodel.database import Frame, PathwayDatabase
from cycmodel.identifiers import species_id
from cycmodel.parameters import ModelParameters

LOG = logging.getLogger(__name__)

# Element codes of the database that differ from the symbols of the periodic table. Two-letter
# elements are stored in upper case and some are spelled out, so 'CO' (carbon, oxygen) and
# 'COBALT' must not be confused. ACP (acyl carrier protein) is kept as a pseudo element.
ELEMENT_CODES = {
    'ACP': 'ACP',
    'COBALT': 'Co',
    'FE': 'Fe',
    'ZN': 'Zn',
    'SE': 'Se',
    'NI': 'Ni',
    'NA': 'Na',
    'MN': 'Mn',
    'MG': 'Mg',
    'HG': 'Hg',
    'CU': 'Cu',
    'CD': 'Cd',
    'CA': 'Ca',
    'AS': 'As',
    'CL': 'Cl',
    'AG': 'Ag',
}


def standard_element(code: str) -> str:
    """Translate a database element code into the standard element symbol, e.g., 'COBALT' -> 'Co'."""
    return ELEMENT_CODES.get(str(code).upper(), str(code))


def _split_formula_entry(entry: Any) -> Tuple[str, str]:
    if isinstance(entry, (list, tuple)):
        parts = [str(p) for p in entry]
    else:
        parts = str(entry).strip().strip('()[]').replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError('Malformed chemical formula entry: ' + str(entry))
    return parts[0].strip(), parts[1].strip()


def parse_formula(entries: List[Any]) -> Optional[Dict[str, int]]:
    """Count atoms per element symbol from CHEMICAL-FORMULA slot values

    Each entry is an (element, count) pair such as ('C', 6) or the string '(C 6)'.

    Returns:
        (dict):
        Element symbol -> number of atoms, or None if any entry cannot be read.
    """
    counts = defaultdict(int)
    try:
        for entry in entries:
            element, quantity = _split_formula_entry(entry)
            counts[standard_element(element)] += int(quantity)
    except (TypeError, ValueError):
        return None
    return dict(counts)


def formula_string(entries: List[Any]) -> str:
    """Display formula, e.g., 'C6H12O6'. Counts of 1 are omitted, unreadable counts are taken as 1."""
    formula = ''
    for entry in entries:
        try:
            element, quantity = _split_formula_entry(entry)
        except ValueError:
            LOG.warning('Error parsing chemical formula: ' + str(entry))
            continue
        try:
            count = int(quantity)
        except ValueError:
            LOG.warning('Error parsing chemical formula: ' + str(entry))
            count = 1
        element = standard_element(element)
        formula += element if count == 1 else element + str(count)
    return formula


def kegg_id_of(frame: Frame) -> str:
    """First KEGG compound id among the DBLINKS of a frame (the database often lists it twice)."""
    for dblink in frame.slot_values(DBLINKS):
        if isinstance(dblink, (list, tuple)) and len(dblink) > 1 and LIGAND_CPD in str(dblink[0]):
            return str(dblink[1]).replace('"', '')
    return ''


@dataclass(frozen=True)
class MetaboliteInstance:
    """
    A metabolite in the context of one reaction: pinned to a compartment and a stoichiometric coefficient

    Identity is (metabolite_id, compartment, coefficient). The chemical formula, element counts and cross
    references are derived once from the database frame when the instance is built and do not take part
    in comparisons. Instances are never modified, use relocated() to obtain a copy in another compartment.

    Args:
        metabolite_id (str):
            Frame id of the metabolite or of a metabolite class.

        compartment (str):
            Resolved compartment, must not be empty.

        coefficient (int): (Default: 1)
            Stoichiometric coefficient of the metabolite in its reaction.
    """
    metabolite_id: str
    compartment: str
    coefficient: int = 1
    chemical_formula: str = field(default='', compare=False)
    elements: Optional[Tuple[Tuple[str, int], ...]] = field(default=(), compare=False)
    kegg_id: str = field(default='', compare=False)
    common_name: str = field(default='', compare=False)
    molecular_weight: Optional[str] = field(default=None, compare=False)
    is_class: bool = field(default=False, compare=False)

    def __post_init__(self):
        if not self.compartment:
            raise ValueError('Metabolite ' + str(self.metabolite_id) + ' has no compartment.')

    @classmethod
    def from_frame(cls, frame: Frame, compartment: str, coefficient: int = 1) -> "MetaboliteInstance":
        entries = frame.slot_values(CHEMICAL_FORMULA)
        counts = parse_formula(entries)
        weight = frame.slot_value(MOLECULAR_WEIGHT)
        return cls(metabolite_id=frame.frame_id,
                   compartment=compartment,
                   coefficient=int(coefficient),
                   chemical_formula=formula_string(entries),
                   elements=None if counts is None else tuple(sorted(counts.items())),
                   kegg_id=kegg_id_of(frame),
                   common_name=str(frame.slot_value(COMMON_NAME) or frame.frame_id),
                   molecular_weight=None if weight is None else str(weight),
                   is_class=frame.is_class)

    @classmethod
    def from_database(cls, database: PathwayDatabase, metabolite_id: str, compartment: str,
                      coefficient: int = 1) -> "MetaboliteInstance":
        """Load the metabolite frame (one request) and build the instance. Raises DatabaseError."""
        return cls.from_frame(database.load_frame(metabolite_id), compartment, coefficient)

    def relocated(self, compartment: str, coefficient: Optional[int] = None) -> "MetaboliteInstance":
        """Copy of this instance in another compartment (and optionally with another coefficient)."""
        if coefficient is None:
            coefficient = self.coefficient
        return replace(self, compartment=compartment, coefficient=int(coefficient))

    @property
    def element_counts(self) -> Optional[Dict[str, int]]:
        if self.elements is None:
            return None
        return dict(self.elements)


def generate_species_id(metabolite: MetaboliteInstance, params: ModelParameters) -> str:
    """SBML species id: species prefix, metabolite id and compartment abbreviation, e.g., 'M_WATER_c'

    Raises UnresolvedAbbreviationError if the compartment has no configured abbreviation.
    """
    return species_id(params[SPECIES_PREFIX], metabolite.metabolite_id, params.abbreviation(metabolite.compartment))
