"""
Extractor module.

Contains the schema node definitions, the field type parser and the
declaration extractor.
"""

from __future__ import annotations

from .declaration_extractor import DeclarationExtractor
from .field_parser import FieldTypeParser
from .schema_nodes import RECORD_KIND, FieldEntry, SchemaEntry, TypeKind

__all__ = [
    "DeclarationExtractor",
    "FieldTypeParser",
    "FieldEntry",
    "SchemaEntry",
    "TypeKind",
    "RECORD_KIND",
]
