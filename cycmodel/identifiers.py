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
"""SBML-safe identifiers for species and reactions"""

from cycmodel.names import *


def sbml_safe(text: str) -> str:
    """Replace characters that are common in database frame ids but not allowed in SBML ids

    '-', '+', ' ', '(', ')' and '.' are replaced by '__45__', '__43__', '__32__', '__40__', '__41__'
    and '__46__', '|' characters are removed and a leading digit is prefixed with '_'.

    Example:
        sbml_safe('CCO-CYTOSOL') returns 'CCO__45__CYTOSOL'
    """
    output = text
    for char, token in SBML_ESCAPES:
        output = output.replace(char, token)
    output = output.replace('|', '')
    if output[:1].isdigit():
        output = '_' + output
    return output


def from_sbml_safe(text: str) -> str:
    """Reverse the character replacements of sbml_safe

    One leading underscore is dropped. This is not a true inverse: ids that started with an underscore
    lose it, and '|' characters stripped by sbml_safe cannot be restored.
    """
    output = text
    for char, token in SBML_ESCAPES:
        output = output.replace(token, char)
    if output.startswith('_'):
        output = output[1:]
    return output


def prefixed_id(prefix: str, base_id: str) -> str:
    # ids starting with '_' are not separated from the prefix a second time
    if base_id.startswith('_'):
        return prefix + base_id
    return prefix + '_' + base_id


def species_id(prefix: str, metabolite_id: str, abbreviation: str) -> str:
    return sbml_safe(prefixed_id(prefix, metabolite_id) + '_' + abbreviation)


def reaction_id(prefix: str, base_id: str, suffix: str = '') -> str:
    return sbml_safe(prefixed_id(prefix, base_id) + suffix)
