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
"""Static strings used in the cycmodel package

    Database slots and annotation labels

        LEFT = 'LEFT'

        RIGHT = 'RIGHT'

        REACTION_DIRECTION = 'REACTION-DIRECTION'

        RXN_LOCATIONS = 'RXN-LOCATIONS'

        CHEMICAL_FORMULA = 'CHEMICAL-FORMULA'

        DBLINKS = 'DBLINKS'

        COMMON_NAME = 'COMMON-NAME'

        MOLECULAR_WEIGHT = 'MOLECULAR-WEIGHT'

        CANNOT_BALANCE = 'CANNOT-BALANCE?'

        ACCESSION_1 = 'ACCESSION-1'

        COEFFICIENT = 'COEFFICIENT'

        COMPARTMENT = 'COMPARTMENT'

    Frame types, classes and placeholders

        CLASS_FRAME = ':CLASS'

        CCO_SPACE = 'CCO-SPACE'

        ACCEPTOR = '|Acceptor|'

        DONOR_H2 = '|Donor-H2|'

    Model parameters

        DEFAULT_COMPARTMENT = 'default_compartment'

        COMPARTMENT_ABBREVS = 'compartment_abbrevs'

        SPECIES_PREFIX = 'species_prefix'

        REACTION_PREFIX = 'reaction_prefix'

        BOUNDARY_COMPARTMENT = 'boundary_compartment'

        EXCHANGE_SUFFIX = 'exchange_suffix'

        EXTERNAL_COMPARTMENT = 'external_compartment'

        DIFFUSION_COMPARTMENT = 'diffusion_compartment'

        DIFFUSION_TARGET = 'diffusion_target'

        DIFFUSION_SIZE = 'diffusion_size'

        EXCLUDED_REACTION_CLASSES = 'excluded_reaction_classes'

        EXCLUDED_METABOLITE_CLASSES = 'excluded_metabolite_classes'

        EXCLUDED_REACTIONS = 'excluded_reactions'

        LOWER_BOUND = 'lower_bound'

        UPPER_BOUND = 'upper_bound'

        MODEL_ID = 'model_id'

        MODEL_NAME = 'model_name'

        REMOVE_UNBALANCED = 'remove_unbalanced'

        REMOVE_CANNOT_BALANCE = 'remove_cannot_balance'

        CACHE_CATEGORY_LOOKUPS = 'cache_category_lookups'

        GENE_RULE_ACCESSIONS = 'gene_rule_accessions'

        TRANSPORT_CLASS = 'transport_class'

    Reaction kinds

        PLAIN = 'plain'

        INSTANTIATED = 'instantiated'

        EXCHANGE = 'exchange'

        DIFFUSION = 'diffusion'

    Identifiers

        BOUNDARY_SUFFIX = '_LPAREN_e_RPAREN_'

        DIFFUSION_NAME_SUFFIX = 'passiveDiffusionReaction'
"""

# Database slots and annotation labels
LEFT = 'LEFT'
RIGHT = 'RIGHT'
REACTION_DIRECTION = 'REACTION-DIRECTION'
RIGHT_TO_LEFT = 'RIGHT-TO-LEFT'
REVERSIBLE = 'REVERSIBLE'
RXN_LOCATIONS = 'RXN-LOCATIONS'
CHEMICAL_FORMULA = 'CHEMICAL-FORMULA'
DBLINKS = 'DBLINKS'
LIGAND_CPD = 'LIGAND-CPD'
COMMON_NAME = 'COMMON-NAME'
MOLECULAR_WEIGHT = 'MOLECULAR-WEIGHT'
CANNOT_BALANCE = 'CANNOT-BALANCE?'
ACCESSION_1 = 'ACCESSION-1'
COEFFICIENT = 'COEFFICIENT'
COMPARTMENT = 'COMPARTMENT'

# Frame types, classes and placeholders
CLASS_FRAME = ':CLASS'
INSTANCE_FRAME = ':INSTANCE'
CCO_SPACE = 'CCO-SPACE'
ACCEPTOR = '|Acceptor|'
DONOR_H2 = '|Donor-H2|'

# Model parameters
DEFAULT_COMPARTMENT = 'default_compartment'
COMPARTMENT_ABBREVS = 'compartment_abbrevs'
SPECIES_PREFIX = 'species_prefix'
REACTION_PREFIX = 'reaction_prefix'
BOUNDARY_COMPARTMENT = 'boundary_compartment'
EXCHANGE_SUFFIX = 'exchange_suffix'
EXTERNAL_COMPARTMENT = 'external_compartment'
DIFFUSION_COMPARTMENT = 'diffusion_compartment'
DIFFUSION_TARGET = 'diffusion_target'
DIFFUSION_SIZE = 'diffusion_size'
EXCLUDED_REACTION_CLASSES = 'excluded_reaction_classes'
EXCLUDED_METABOLITE_CLASSES = 'excluded_metabolite_classes'
EXCLUDED_REACTIONS = 'excluded_reactions'
LOWER_BOUND = 'lower_bound'
UPPER_BOUND = 'upper_bound'
MODEL_ID = 'model_id'
MODEL_NAME = 'model_name'
REMOVE_UNBALANCED = 'remove_unbalanced'
REMOVE_CANNOT_BALANCE = 'remove_cannot_balance'
CACHE_CATEGORY_LOOKUPS = 'cache_category_lookups'
GENE_RULE_ACCESSIONS = 'gene_rule_accessions'
TRANSPORT_CLASS = 'transport_class'

# Reaction kinds
PLAIN = 'plain'
INSTANTIATED = 'instantiated'
EXCHANGE = 'exchange'
DIFFUSION = 'diffusion'

# Identifiers
BOUNDARY_SUFFIX = '_LPAREN_e_RPAREN_'
DIFFUSION_NAME_SUFFIX = 'passiveDiffusionReaction'
SBML_ESCAPES = (
    ('-', '__45__'),
    ('+', '__43__'),
    (' ', '__32__'),
    ('(', '__40__'),
    (')', '__41__'),
    ('.', '__46__'),
)
