"""
Schema node definitions.

A SchemaEntry represents one declared interface; a FieldEntry one of its
properties. Entries are built by the extractor and rewritten once by the
merger.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from ..errors import MissingNameError

RECORD_KIND = "Record"


class TypeKind(Enum):
    """Shape of a field type."""

    PRIMITIVE = "primitive"  # "number", "Date", or a bare identifier
    UNION = "union"  # ["string", "null"]
    RECORD = "record"  # Inlined SchemaEntry (after merge)


@dataclass
class FieldEntry:
    """A property of a record."""

    name: str = ""
    type: FieldType = ""

    @property
    def type_kind(self) -> TypeKind:
        if isinstance(self.type, SchemaEntry):
            return TypeKind.RECORD
        if isinstance(self.type, list):
            return TypeKind.UNION
        return TypeKind.PRIMITIVE

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.type, SchemaEntry):
            type_value: Any = self.type.to_dict()
        elif isinstance(self.type, list):
            type_value = list(self.type)
        else:
            type_value = self.type
        return {"name": self.name, "type": type_value}


@dataclass
class SchemaEntry:
    """A declared interface."""

    name: str | None = None
    fields: list[FieldEntry | SchemaEntry] = field(default_factory=list)
    kind: str = RECORD_KIND

    def to_dict(self) -> dict[str, Any]:
        """Convert to the output shape.

        Raises:
            MissingNameError: If the declaration never supplied a name
        """
        if self.name is None:
            raise MissingNameError("Interface declaration has no name")
        return {
            "type": self.kind,
            "name": self.name,
            "fields": [f.to_dict() for f in self.fields],
        }


FieldType = Union[str, list[str], SchemaEntry]
