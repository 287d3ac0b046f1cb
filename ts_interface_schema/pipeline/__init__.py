"""
Pipeline - tree-sitter based TypeScript interface to schema generator.

1. Phase 1 (Syntax): Parse TypeScript source with tree-sitter
2. Phase 2 (Extractor): Build one entry per interface declaration
3. Phase 3 (Merger): Inline the root's references to other interfaces
4. Phase 4 (Output): Serialize to JSON, optionally written atomically
"""

from __future__ import annotations

from .config import Grammar, InlineStyle, OutputConfig, OutputMode, SchemaGeneratorConfig
from .errors import (
    EmptySchemaError,
    GrammarLoadError,
    MissingNameError,
    SchemaGenerationError,
    SchemaOutputError,
)
from .extractor import DeclarationExtractor, FieldEntry, FieldTypeParser, SchemaEntry
from .generator import PipelineGenerator
from .merger import AtomicWriter, SchemaMerger
from .syntax import SyntaxProvider

__all__ = [
    "PipelineGenerator",
    "SchemaGeneratorConfig",
    "Grammar",
    "InlineStyle",
    "OutputConfig",
    "OutputMode",
    "SyntaxProvider",
    "DeclarationExtractor",
    "FieldTypeParser",
    "SchemaMerger",
    "AtomicWriter",
    "SchemaEntry",
    "FieldEntry",
    "SchemaGenerationError",
    "GrammarLoadError",
    "EmptySchemaError",
    "MissingNameError",
    "SchemaOutputError",
]
