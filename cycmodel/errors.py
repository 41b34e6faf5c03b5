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
"""Exceptions raised by cycmodel"""

from typing import Any, Dict, Optional


class CycModelError(Exception):
    """Base class for all errors raised by cycmodel.

    Args:
        message (str):
            Human readable description of the error.

        context (optional (dict)):
            Frame ids, slot names or parameter keys that identify the failing unit of work.
            They are appended to the log message.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = dict(context) if context else {}

    def log_message(self) -> str:
        if not self.context:
            return str(self)
        return f"{self}: {self.context}"


class ConfigurationError(CycModelError):
    """Missing, unknown or inconsistent model parameter."""


class UnresolvedAbbreviationError(ConfigurationError):
    """A compartment has no configured abbreviation, so no species id can be generated."""


class DatabaseError(CycModelError):
    """A request to the pathway database failed or referenced an unknown frame."""
