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
"""Access to the pathway/genome database that reaction networks are read from

The network builder only needs read access to a handful of keyed lookups. PathwayDatabase lists them;
any client (a Pathway Tools socket connection, a web service wrapper, a flat file reader) can be used as
long as it implements these methods and raises DatabaseError when a request fails. InMemoryDatabase keeps
all frames in dictionaries and is used for tests and small curated networks.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple
from cycmodel.names import *
from cycmodel.errors import DatabaseError

LOG = logging.getLogger(__name__)


def _as_list(value) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)) and not _is_pair(value):
        return list(value)
    return [value]


def _is_pair(value) -> bool:
    # a single (element, count) or (database, id) entry rather than a list of entries
    return isinstance(value, tuple) and len(value) == 2 and not any(isinstance(v, (list, tuple)) for v in value)


@dataclass(frozen=True)
class Frame:
    """A named record of the database (metabolite, reaction, class, ...) with its slot values"""
    frame_id: str
    slots: Dict[str, List[Any]] = field(default_factory=dict)
    frame_type: str = INSTANCE_FRAME

    @property
    def is_class(self) -> bool:
        return self.frame_type.upper() == CLASS_FRAME

    def has_slot(self, slot: str) -> bool:
        return bool(self.slots.get(slot))

    def slot_values(self, slot: str) -> List[Any]:
        return list(self.slots.get(slot, []))

    def slot_value(self, slot: str) -> Optional[Any]:
        values = self.slots.get(slot)
        return values[0] if values else None


class PathwayDatabase(ABC):
    """Read-only interface to a pathway/genome database

    Every method is a blocking request. Implementations raise DatabaseError when a request fails or refers
    to an unknown frame. There are no retries; callers skip the affected unit of work.
    """

    @abstractmethod
    def load_frame(self, frame_id: str) -> Frame:
        """Load a frame with all its slots."""

    @abstractmethod
    def get_slot_values(self, frame_id: str, slot: str) -> List[Any]:
        """Return all values of a slot (empty list if the slot is not set)."""

    def get_slot_value(self, frame_id: str, slot: str) -> Optional[Any]:
        values = self.get_slot_values(frame_id, slot)
        return values[0] if values else None

    @abstractmethod
    def get_class_all_instances(self, class_id: str) -> List[str]:
        """Return all (non-class) instances of a class and its subclasses."""

    @abstractmethod
    def get_frame_type(self, frame_id: str) -> str:
        """Return ':CLASS' for class frames and ':INSTANCE' otherwise."""

    def is_class_frame(self, frame_id: str) -> bool:
        return self.get_frame_type(frame_id).upper() == CLASS_FRAME

    @abstractmethod
    def get_value_annot(self, frame_id: str, slot: str, value: str, label: str) -> Optional[str]:
        """Return the annotation 'label' of 'value' in slot 'slot' of a frame."""

    @abstractmethod
    def get_all_annot_labels(self, frame_id: str, slot: str, value: str) -> List[str]:
        """Return all annotation labels of 'value' in slot 'slot' of a frame."""

    @abstractmethod
    def instance_all_instance_of_p(self, class_id: str, frame_id: str) -> bool:
        """Test if a frame is an instance of a class or of any of its subclasses."""

    @abstractmethod
    def specific_forms_of_reaction(self, reaction_id: str) -> List[str]:
        """Return the reactions that are specific (instantiated) forms of a generic reaction."""

    @abstractmethod
    def all_reactions(self) -> List[str]:
        """Return the ids of all reaction frames."""

    @abstractmethod
    def enzymes_of_reaction(self, reaction_id: str) -> List[str]:
        """Return the enzymes catalyzing a reaction."""

    @abstractmethod
    def genes_of_protein(self, protein_id: str) -> List[str]:
        """Return the genes encoding a protein (complex)."""


class InMemoryDatabase(PathwayDatabase):
    """
    Pathway database held in dictionaries

    Example:
        db = InMemoryDatabase()
        db.add_frame('WATER', {'CHEMICAL-FORMULA': [('H', 2), ('O', 1)]})
        db.add_class('|Sugar|', ['GLC', 'FRU'])
        db.annotate('RXN-1', 'LEFT', 'WATER', 'COEFFICIENT', '2')

    Args:
        frames (optional (dict)):
            Map of frame id to a dict of slot values. Single values are wrapped in a list.

        classes (optional (dict)):
            Map of class id to its members. Members may be instances or other classes (subclasses).

        annotations (optional (list of tuples)):
            Entries of the form (frame_id, slot, value, label, annotation).

        specific_forms, enzymes, genes (optional (dict)):
            Map of reaction id to its specific forms, of reaction id to its enzymes and of protein id to
            its genes.
    """

    def __init__(self, frames=None, classes=None, annotations=None, specific_forms=None, enzymes=None, genes=None):
        self._frames: Dict[str, Dict[str, List[Any]]] = {}
        self._classes: Dict[str, List[str]] = {}
        self._annotations: Dict[Tuple[str, str, str], Dict[str, str]] = {}
        self._specific_forms: Dict[str, List[str]] = {}
        self._enzymes: Dict[str, List[str]] = {}
        self._genes: Dict[str, List[str]] = {}
        for frame_id, slots in (frames or {}).items():
            self.add_frame(frame_id, slots)
        for class_id, members in (classes or {}).items():
            self.add_class(class_id, members)
        for entry in (annotations or []):
            self.annotate(*entry)
        for reaction_id, forms in (specific_forms or {}).items():
            self._specific_forms[reaction_id] = list(forms)
        for reaction_id, proteins in (enzymes or {}).items():
            self._enzymes[reaction_id] = list(proteins)
        for protein_id, gene_ids in (genes or {}).items():
            self._genes[protein_id] = list(gene_ids)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "InMemoryDatabase":
        """Build a database from a JSON compatible payload with the keys of the constructor."""
        return cls(frames=payload.get('frames'),
                   classes=payload.get('classes'),
                   annotations=payload.get('annotations'),
                   specific_forms=payload.get('specific_forms'),
                   enzymes=payload.get('enzymes'),
                   genes=payload.get('genes'))

    # Population
    def add_frame(self, frame_id: str, slots: Optional[Dict[str, Any]] = None) -> None:
        self._frames[frame_id] = {slot: _as_list(value) for slot, value in (slots or {}).items()}

    def add_class(self, class_id: str, members: Iterable[str]) -> None:
        self._classes.setdefault(class_id, [])
        for member in members:
            if member not in self._classes[class_id]:
                self._classes[class_id].append(member)

    def annotate(self, frame_id: str, slot: str, value: str, label: str, annotation: Any) -> None:
        self._annotations.setdefault((frame_id, slot, value), {})[label] = str(annotation)

    # PathwayDatabase
    def load_frame(self, frame_id: str) -> Frame:
        if frame_id in self._frames:
            frame_type = CLASS_FRAME if frame_id in self._classes else INSTANCE_FRAME
            return Frame(frame_id, {k: list(v) for k, v in self._frames[frame_id].items()}, frame_type)
        if frame_id in self._classes:
            return Frame(frame_id, {}, CLASS_FRAME)
        raise DatabaseError('Unknown frame ' + str(frame_id) + '.', {'frame': frame_id})

    def get_slot_values(self, frame_id: str, slot: str) -> List[Any]:
        return self.load_frame(frame_id).slot_values(slot)

    def get_class_all_instances(self, class_id: str) -> List[str]:
        if class_id not in self._classes:
            raise DatabaseError('Unknown class ' + str(class_id) + '.', {'class': class_id})
        instances = []
        visited = set()
        stack = [class_id]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            for member in self._classes.get(current, []):
                if member in self._classes:
                    stack.append(member)
                elif member not in instances:
                    instances.append(member)
        return instances

    def get_frame_type(self, frame_id: str) -> str:
        if frame_id in self._classes:
            return CLASS_FRAME
        if frame_id in self._frames:
            return INSTANCE_FRAME
        raise DatabaseError('Unknown frame ' + str(frame_id) + '.', {'frame': frame_id})

    def get_value_annot(self, frame_id: str, slot: str, value: str, label: str) -> Optional[str]:
        return self._annotations.get((frame_id, slot, value), {}).get(label)

    def get_all_annot_labels(self, frame_id: str, slot: str, value: str) -> List[str]:
        return list(self._annotations.get((frame_id, slot, value), {}).keys())

    def instance_all_instance_of_p(self, class_id: str, frame_id: str) -> bool:
        return frame_id in self.get_class_all_instances(class_id)

    def specific_forms_of_reaction(self, reaction_id: str) -> List[str]:
        return list(self._specific_forms.get(reaction_id, []))

    def all_reactions(self) -> List[str]:
        return [frame_id for frame_id, slots in self._frames.items() if slots.get(LEFT) or slots.get(RIGHT)]

    def enzymes_of_reaction(self, reaction_id: str) -> List[str]:
        return list(self._enzymes.get(reaction_id, []))

    def genes_of_protein(self, protein_id: str) -> List[str]:
        return list(self._genes.get(protein_id, []))
