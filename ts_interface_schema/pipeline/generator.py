"""
Pipeline generator.

Runs extraction and merging over TypeScript source text and serializes
the merged schema to JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .config import OutputMode, SchemaGeneratorConfig
from .extractor import DeclarationExtractor, SchemaEntry
from .merger import AtomicWriter, SchemaMerger
from .syntax import SyntaxProvider

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """TypeScript interface to Record schema generator.

    Phases:
    1. Parse source text with tree-sitter
    2. Extract one entry per interface declaration
    3. Merge entries into the root schema
    4. Serialize to JSON
    """

    def __init__(self, config: SchemaGeneratorConfig | None = None):
        self.config = config or SchemaGeneratorConfig()
        self.provider = SyntaxProvider(self.config.grammar)
        self.extractor = DeclarationExtractor(self.config, self.provider)
        self.merger = SchemaMerger(self.config)

    def extract(self, code: str) -> list[SchemaEntry]:
        """Extract unresolved entries, one per interface declaration."""
        return self.extractor.extract(code)

    def build(self, code: str) -> SchemaEntry:
        """Extract and merge, returning the root schema."""
        return self.merger.merge(self.extract(code))

    def generate(self, code: str) -> str:
        """Generate the merged schema as JSON text."""
        schema = self.build(code)
        return self.to_json(schema)

    def to_json(self, schema: SchemaEntry) -> str:
        if self.config.indent is None:
            return json.dumps(schema.to_dict(), separators=(",", ":"))
        return json.dumps(schema.to_dict(), indent=self.config.indent)

    def write(self, content: str, path: Path) -> None:
        """Write generated content according to the output configuration."""
        output = self.config.output
        overwrite = output.mode is OutputMode.FORCE

        if output.atomic_write:
            writer = AtomicWriter()
            if overwrite:
                writer.write(path, content, validate=output.validate_before_write)
            else:
                writer.write_if_not_exists(path, content, validate=output.validate_before_write)
        else:
            if not overwrite and path.exists():
                raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")
            path.write_text(content, encoding="utf-8")
        logger.debug("Wrote schema to %s", path)
