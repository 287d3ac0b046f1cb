"""TypeScript Interface to Schema

Converts TypeScript interface declarations into a JSON Record schema,
inlining references between interfaces declared in the same file.
"""

__version__ = "0.1.0"

from .pipeline import (
    EmptySchemaError,
    PipelineGenerator,
    SchemaEntry,
    SchemaGenerationError,
    SchemaGeneratorConfig,
)

__all__ = [
    "PipelineGenerator",
    "SchemaGeneratorConfig",
    "SchemaEntry",
    "SchemaGenerationError",
    "EmptySchemaError",
]
