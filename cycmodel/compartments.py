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
"""Class: compartment resolver (CompartmentResolver)"""

import logging
from typing import List, Optional
from cycmodel.names import *
from cycmodel.database import PathwayDatabase
from cycmodel.errors import DatabaseError
from cycmodel.parameters import ModelParameters

LOG = logging.getLogger(__name__)


class CompartmentResolver:
    """
    Determine the compartment of a reaction participant from the RXN-LOCATIONS of its reaction

    A location that is a cellular space (an instance of CCO-SPACE) holds all participants of the reaction.
    Any other location (a membrane or a symbol unique to the reaction) is a transport location: its annotation
    labels map to compartments and the COMPARTMENT annotation of each participant picks one of these labels.
    Participants that cannot be placed end up in the default compartment.

    Args:
        database (PathwayDatabase):
            Database the reactions are read from.

        params (ModelParameters):
            Provides the default compartment.
    """

    def __init__(self, database: PathwayDatabase, params: ModelParameters):
        self.database = database
        self.params = params
        self.location_fallbacks = 0
        self.default_compartments = 0

    def is_space(self, location: str) -> bool:
        try:
            return self.database.instance_all_instance_of_p(CCO_SPACE, location)
        except DatabaseError as e:
            LOG.warning('Cannot tell whether ' + location + ' is a cellular space. ' + e.log_message())
            return False

    def compartment_of(self,
                       reaction_id: str,
                       metabolite_id: str,
                       slot: str,
                       locations: List[str],
                       specific_location: Optional[str] = None) -> str:
        """Compartment of metabolite 'metabolite_id' in slot 'slot' (LEFT or RIGHT) of reaction 'reaction_id'

        Args:
            locations (list of str):
                RXN-LOCATIONS of the reaction.

            specific_location (optional (str)):
                Location to use when the reaction lists several of them.
        """
        if not locations:
            return self.params[DEFAULT_COMPARTMENT]
        if len(locations) == 1:
            location = locations[0]
        elif specific_location in locations:
            location = specific_location
        else:
            location = locations[0]
            self.location_fallbacks += 1
            LOG.warning('Reaction ' + reaction_id + ' has several locations but none was selected, using ' + location +
                        '.')
        try:
            compartment = self._resolve_location(reaction_id, metabolite_id, slot, location)
        except DatabaseError as e:
            LOG.error('Failed to resolve the compartment of ' + metabolite_id + ' in ' + reaction_id + '. ' +
                      e.log_message())
            compartment = None
        if not compartment:
            self.default_compartments += 1
            LOG.debug('No compartment for ' + metabolite_id + ' in ' + reaction_id + ', using the default compartment.')
            compartment = self.params[DEFAULT_COMPARTMENT]
        return compartment

    def _resolve_location(self, reaction_id: str, metabolite_id: str, slot: str, location: str) -> Optional[str]:
        if self.is_space(location):
            return location
        label_map = {}
        for label in self.database.get_all_annot_labels(reaction_id, RXN_LOCATIONS, location):
            label_map[label] = self.database.get_value_annot(reaction_id, RXN_LOCATIONS, location, label)
        label = self.database.get_value_annot(reaction_id, slot, metabolite_id, COMPARTMENT)
        return label_map.get(label)
