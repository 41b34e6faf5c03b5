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
"""Conversion of reaction networks into COBRApy models, SBML files and stoichiometric matrices"""

import logging
from typing import List, Optional, Tuple
import numpy as np
from scipy import sparse
from cobra import Model, Metabolite, Reaction
from cobra.io import write_sbml_model as cobra_write_sbml_model
from cycmodel.names import *
from cycmodel.metabolite import MetaboliteInstance, generate_species_id
from cycmodel.reaction import generate_reaction_id
from cycmodel.parameters import ModelParameters

LOG = logging.getLogger(__name__)


def _cobra_metabolite(met: MetaboliteInstance, params: ModelParameters) -> Metabolite:
    m = Metabolite(generate_species_id(met, params),
                   formula=met.chemical_formula or None,
                   name=met.common_name or met.metabolite_id,
                   compartment=params.abbreviation(met.compartment))
    if met.kegg_id:
        m.annotation['kegg.compound'] = met.kegg_id
    return m


def to_cobra_model(network, params: Optional[ModelParameters] = None) -> Model:
    """
    Build a COBRApy model from a reaction network

    Compartments are named by their abbreviation, species and reactions by their SBML ids. Reversible
    reactions get the bounds params['lower_bound'] and params['upper_bound'], irreversible reactions a lower
    bound of 0.

    Example:
        model = to_cobra_model(network)
        model.optimize()

    Args:
        network (ReactionNetwork):
            A reaction network.

        params (optional (ModelParameters)):
            Model parameters. (Default: network.params)

    Returns:
        (cobra.Model)

    Raises UnresolvedAbbreviationError if a compartment of the network has no abbreviation.
    """
    if params is None:
        params = network.params
    model = Model(params[MODEL_ID], name=params[MODEL_NAME])

    compartments = {}
    metabolites = {}
    for met in network.metabolites():
        abbrev = params.abbreviation(met.compartment)
        compartments.setdefault(abbrev, met.compartment)
        m = _cobra_metabolite(met, params)
        metabolites[m.id] = m
    model.compartments = compartments
    model.add_metabolites(list(metabolites.values()))

    reactions = []
    reaction_ids = set()
    for reaction in network.reactions:
        rid = generate_reaction_id(reaction, params)
        if rid in reaction_ids:
            LOG.warning('Reaction id ' + rid + ' is not unique, skipping ' + reaction.name + '.')
            continue
        reaction_ids.add(rid)
        r = Reaction(rid,
                     name=reaction.name,
                     lower_bound=params[LOWER_BOUND] if reaction.reversible else 0.0,
                     upper_bound=params[UPPER_BOUND])
        stoichiometry = {}
        for met in reaction.reactants:
            sid = generate_species_id(met, params)
            stoichiometry[sid] = stoichiometry.get(sid, 0.0) - met.coefficient
        for met in reaction.products:
            sid = generate_species_id(met, params)
            stoichiometry[sid] = stoichiometry.get(sid, 0.0) + met.coefficient
        r.add_metabolites({metabolites[sid]: coeff for sid, coeff in stoichiometry.items() if coeff != 0})
        if reaction.gene_rule:
            r.gene_reaction_rule = reaction.gene_rule
        reactions.append(r)
    model.add_reactions(reactions)
    LOG.info('Created model ' + model.id + ' with ' + str(len(model.metabolites)) + ' metabolites and ' +
             str(len(model.reactions)) + ' reactions.')
    return model


def write_sbml_model(network, filename: str, params: Optional[ModelParameters] = None) -> Model:
    """Write a reaction network to an SBML file. Returns the COBRApy model that was written."""
    model = to_cobra_model(network, params)
    cobra_write_sbml_model(model, filename)
    return model


def stoichiometric_matrix(network,
                          params: Optional[ModelParameters] = None,
                          dense: bool = False) -> Tuple[sparse.csr_matrix, List[str], List[str]]:
    """
    Stoichiometric matrix of a reaction network

    Returns:
        (tuple):
        The matrix (species x reactions, sparse CSR or a numpy array if dense=True), the species ids (rows)
        and the reaction ids (columns).
    """
    if params is None:
        params = network.params
    species_ids = sorted({generate_species_id(m, params) for m in network.metabolites()})
    row = {sid: i for i, sid in enumerate(species_ids)}
    reactions = network.reactions
    reaction_ids = [generate_reaction_id(r, params) for r in reactions]
    S = sparse.lil_matrix((len(species_ids), len(reactions)), dtype=np.float64)
    for j, reaction in enumerate(reactions):
        for met in reaction.reactants:
            S[row[generate_species_id(met, params)], j] -= met.coefficient
        for met in reaction.products:
            S[row[generate_species_id(met, params)], j] += met.coefficient
    S = S.tocsr()
    if dense:
        return S.toarray(), species_ids, reaction_ids
    return S, species_ids, reaction_ids
