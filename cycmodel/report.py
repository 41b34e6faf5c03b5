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
"""Class: statistics of a network build (NetworkReport)"""

import logging

LOG = logging.getLogger(__name__)


class NetworkReport:
    """Counts what each stage of the network build did. The counts are only reported, never used for decisions."""

    def __init__(self):
        self.starting_reactions = 0
        self.location_splits = 0
        self.import_failures = 0
        self.unparsable_coefficients = 0
        self.filtered_reactions = 0
        self.unbalanced_removed = 0
        self.cannot_balance_removed = 0
        self.generic_found = 0
        self.generic_instantiated = 0
        self.generic_failed = 0
        self.instantiated_reactions = 0
        self.candidates_tried = 0
        self.candidates_rejected = 0
        self.diffusion_metabolites = 0
        self.diffusion_reactions = 0
        self.unparsable_weights = 0
        self.boundary_metabolites = 0
        self.boundary_reactions = 0
        self.duplicates_rejected = 0
        self.location_fallbacks = 0
        self.default_compartments = 0
        self.transport_reactions = 0
        self.total_reactions = 0

    def inc_starting_reactions(self, count: int = 1):
        self.starting_reactions += count

    def inc_location_splits(self, count: int = 1):
        self.location_splits += count

    def inc_import_failures(self, count: int = 1):
        self.import_failures += count

    def inc_unparsable_coefficients(self, count: int = 1):
        self.unparsable_coefficients += count

    def inc_filtered_reactions(self, count: int = 1):
        self.filtered_reactions += count

    def inc_unbalanced_removed(self, count: int = 1):
        self.unbalanced_removed += count

    def inc_cannot_balance_removed(self, count: int = 1):
        self.cannot_balance_removed += count

    def inc_generic_found(self, count: int = 1):
        self.generic_found += count

    def inc_generic_instantiated(self, count: int = 1):
        self.generic_instantiated += count

    def inc_generic_failed(self, count: int = 1):
        self.generic_failed += count

    def inc_instantiated_reactions(self, count: int = 1):
        self.instantiated_reactions += count

    def inc_candidates(self, tried: int, rejected: int):
        self.candidates_tried += tried
        self.candidates_rejected += rejected

    def inc_diffusion_metabolites(self, count: int = 1):
        self.diffusion_metabolites += count

    def inc_diffusion_reactions(self, count: int = 1):
        self.diffusion_reactions += count

    def inc_unparsable_weights(self, count: int = 1):
        self.unparsable_weights += count

    def inc_boundary_metabolites(self, count: int = 1):
        self.boundary_metabolites += count

    def inc_boundary_reactions(self, count: int = 1):
        self.boundary_reactions += count

    def inc_duplicates_rejected(self, count: int = 1):
        self.duplicates_rejected += count

    def report(self) -> str:
        lines = [
            "All reactions : " + str(self.starting_reactions),
            "New reactions from reactions split by location : " + str(self.location_splits),
            "Reactions that failed to load : " + str(self.import_failures),
            "Unreadable coefficients : " + str(self.unparsable_coefficients),
            "Removed reactions due to filtering : " + str(self.filtered_reactions),
            "Removed unbalanced reactions : " + str(self.unbalanced_removed),
            "Removed reactions that cannot be balanced : " + str(self.cannot_balance_removed),
            "Generic reactions found : " + str(self.generic_found),
            "Generic reactions instantiated : " + str(self.generic_instantiated),
            "Generic reactions that failed to instantiate : " + str(self.generic_failed),
            "New reactions from generic reaction instantiations : " + str(self.instantiated_reactions),
            "Instantiation candidates tried / rejected : " + str(self.candidates_tried) + " / " +
            str(self.candidates_rejected),
            "Diffusion metabolites found : " + str(self.diffusion_metabolites),
            "Diffusion reactions added : " + str(self.diffusion_reactions),
            "Unreadable molecular weights : " + str(self.unparsable_weights),
            "Boundary metabolites found : " + str(self.boundary_metabolites),
            "Exchange reactions added : " + str(self.boundary_reactions),
            "Duplicate reactions rejected : " + str(self.duplicates_rejected),
            "Reactions with ambiguous locations : " + str(self.location_fallbacks),
            "Metabolites placed in the default compartment : " + str(self.default_compartments),
            "Total transport reactions in network (excluding exchange and diffusion) : " +
            str(self.transport_reactions),
            "Total reactions in network : " + str(self.total_reactions),
        ]
        return "\n".join(lines)

    def write_to_log(self) -> None:
        LOG.info("Network statistics:\n" + self.report())

    def __repr__(self):
        return (f"NetworkReport(starting={self.starting_reactions}, filtered={self.filtered_reactions}, "
                f"instantiated={self.instantiated_reactions}, diffusion={self.diffusion_reactions}, "
                f"exchange={self.boundary_reactions}, total={self.total_reactions})")
