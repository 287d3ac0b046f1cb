"""
Exceptions raised by the schema generator pipeline.
"""

from __future__ import annotations


class SchemaGenerationError(Exception):
    """Base class for schema generation failures."""

    pass


class GrammarLoadError(SchemaGenerationError):
    """Raised when the tree-sitter grammar cannot be loaded."""

    pass


class EmptySchemaError(SchemaGenerationError):
    """Raised when the source declares no interface to use as the root."""

    pass


class MissingNameError(SchemaGenerationError):
    """Raised when a record without a name is serialized."""

    pass


class SchemaOutputError(SchemaGenerationError):
    """Raised when generated output fails validation before it is written."""

    pass
