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
"""Class: model parameters (ModelParameters)"""

from copy import deepcopy
from typing import Dict
from cycmodel.names import *
from cycmodel.errors import ConfigurationError, UnresolvedAbbreviationError

DEFAULT_PARAMETERS = {
    DEFAULT_COMPARTMENT: 'CCO-CYTOSOL',
    COMPARTMENT_ABBREVS: {
        'CCO-CYTOSOL': 'c',
        'CCO-CYTOPLASM': 'c',
        'CCO-PERI-BAC': 'p',
        'CCO-PERIPLASM': 'p',
        'CCO-EXTRACELLULAR': 'e',
        'CCO-PM-BAC-NEG': 'im',
        'CCO-OUTER-MEM': 'om',
        'CCO-UNKNOWN-SPACE': 'u',
        'Boundary': 'b',
    },
    SPECIES_PREFIX: 'M',
    REACTION_PREFIX: 'R',
    BOUNDARY_COMPARTMENT: 'Boundary',
    EXCHANGE_SUFFIX: 'Exchange',
    EXTERNAL_COMPARTMENT: 'CCO-EXTRACELLULAR',
    DIFFUSION_COMPARTMENT: 'CCO-PERI-BAC',
    DIFFUSION_TARGET: 'CCO-EXTRACELLULAR',
    DIFFUSION_SIZE: 610.0,
    EXCLUDED_REACTION_CLASSES: ['|Polynucleotide-Reactions|', '|Protein-Reactions|'],
    EXCLUDED_METABOLITE_CLASSES: [],
    EXCLUDED_REACTIONS: [],
    LOWER_BOUND: -1000.0,
    UPPER_BOUND: 1000.0,
    MODEL_ID: 'cycmodel',
    MODEL_NAME: 'Generated from BioCyc Pathway/Genome Database',
    REMOVE_UNBALANCED: True,
    REMOVE_CANNOT_BALANCE: False,
    CACHE_CATEGORY_LOOKUPS: True,
    GENE_RULE_ACCESSIONS: False,
    TRANSPORT_CLASS: '|Transport-Reactions|',
}


class ModelParameters(Dict):
    """
    Settings that control how a reaction network is assembled from a pathway database

    A ModelParameters object is passed explicitly to every operation that needs a setting (species and
    reaction identifiers, compartment resolution, diffusion and exchange synthesis, filtering, export).
    There is no process-wide configuration, so several networks with different settings can be built
    side by side. All keys are defined in cycmodel.names, unspecified keys take the defaults listed in
    DEFAULT_PARAMETERS.

    Example:
        params = ModelParameters(default_compartment='CCO-CYTOSOL', diffusion_size=500.0)

    Args:
        default_compartment (optional (str)): (Default: 'CCO-CYTOSOL')

            Compartment assigned to every metabolite whose location cannot be resolved from the
            database.

        compartment_abbrevs (optional (dict)):

            Map of compartment name to the short abbreviation appended to species identifiers,
            e.g., {'CCO-CYTOSOL': 'c', 'CCO-EXTRACELLULAR': 'e'}. The abbreviations provided here are
            merged into the defaults. A compartment that is used in the network but missing from this
            table is a configuration error, reported when identifiers are generated.

        species_prefix, reaction_prefix (optional (str)): (Default: 'M', 'R')

            Prefixes of species and reaction identifiers.

        boundary_compartment (optional (str)): (Default: 'Boundary')

            Virtual compartment that exchange reactions connect to.

        exchange_suffix (optional (str)): (Default: 'Exchange')

            Appended to the metabolite id to name exchange reactions.

        external_compartment (optional (str)): (Default: 'CCO-EXTRACELLULAR')

            Open compartment in which exchange reactions are created.

        diffusion_compartment, diffusion_target (optional (str)): (Default: 'CCO-PERI-BAC', 'CCO-EXTRACELLULAR')

            Permeable compartment and the adjoining compartment that small metabolites diffuse into.

        diffusion_size (optional (float)): (Default: 610.0)

            Maximum molecular weight (Dalton) of metabolites that diffuse passively.

        excluded_reaction_classes, excluded_metabolite_classes, excluded_reactions (optional (list of str)):

            Reaction classes, metabolite classes and explicit reaction ids removed from the network
            before generic reactions are instantiated.

        lower_bound, upper_bound (optional (float)): (Default: -1000.0, 1000.0)

            Flux bounds of exported reversible reactions. Irreversible reactions get a lower bound of 0.

        remove_unbalanced (optional (bool)): (Default: True)

            Remove non-generic reactions that are not elementally balanced (unless the database flags
            them as impossible to balance).

        remove_cannot_balance (optional (bool)): (Default: False)

            Remove reactions that the database flags as impossible to balance.

        cache_category_lookups (optional (bool)): (Default: True)

            Look up the instances of each metabolite class only once per network.

        gene_rule_accessions (optional (bool)): (Default: False)

            Use gene accessions (e.g., b-numbers) instead of gene frame ids in gene rules.
    """

    def __init__(self, **kwargs):
        allowed_keys = set(DEFAULT_PARAMETERS.keys())
        for key in kwargs:
            if key not in allowed_keys:
                raise ConfigurationError("Key " + key + " is not supported.", {'key': key})
        self.update(deepcopy(DEFAULT_PARAMETERS))
        for key, value in kwargs.items():
            if key == COMPARTMENT_ABBREVS:
                self[COMPARTMENT_ABBREVS].update(value)
            else:
                self[key] = value

        for key in (DEFAULT_COMPARTMENT, BOUNDARY_COMPARTMENT, EXTERNAL_COMPARTMENT, SPECIES_PREFIX, REACTION_PREFIX,
                    EXCHANGE_SUFFIX):
            if not isinstance(self[key], str) or not self[key]:
                raise ConfigurationError('"' + key + '" must be a non-empty string.', {'key': key})
        try:
            self[DIFFUSION_SIZE] = float(self[DIFFUSION_SIZE])
            self[LOWER_BOUND] = float(self[LOWER_BOUND])
            self[UPPER_BOUND] = float(self[UPPER_BOUND])
        except (TypeError, ValueError) as exc:
            raise ConfigurationError('Diffusion size and flux bounds must be numbers.') from exc
        if self[DIFFUSION_SIZE] < 0:
            raise ConfigurationError('"' + DIFFUSION_SIZE + '" must not be negative.')
        if self[LOWER_BOUND] > self[UPPER_BOUND]:
            raise ConfigurationError('"' + LOWER_BOUND + '" must not exceed "' + UPPER_BOUND + '".')
        for key in (EXCLUDED_REACTION_CLASSES, EXCLUDED_METABOLITE_CLASSES, EXCLUDED_REACTIONS):
            if isinstance(self[key], str):
                self[key] = [self[key]]
            self[key] = list(self[key] or [])

    def abbreviation(self, compartment: str) -> str:
        """Return the configured abbreviation of a compartment

        Raises UnresolvedAbbreviationError if the compartment is not listed in compartment_abbrevs."""
        abbrev = self[COMPARTMENT_ABBREVS].get(compartment)
        if not abbrev:
            raise UnresolvedAbbreviationError('No abbreviation configured for compartment ' + str(compartment) + '.',
                                              {'compartment': compartment})
        return abbrev
