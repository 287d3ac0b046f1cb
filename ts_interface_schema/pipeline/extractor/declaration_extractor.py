"""
Declaration extractor.

Walks the top level of a parsed TypeScript file and builds one
SchemaEntry per interface declaration, in source order. References
between interfaces are left unresolved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from ..config import SchemaGeneratorConfig
from ..syntax import NodeKind, SourceTree, SyntaxProvider
from .field_parser import FieldTypeParser
from .schema_nodes import FieldEntry, SchemaEntry

logger = logging.getLogger(__name__)


class DeclarationExtractor:
    """Extracts SchemaEntry values from TypeScript interface declarations."""

    def __init__(
        self,
        config: SchemaGeneratorConfig | None = None,
        provider: SyntaxProvider | None = None,
        field_parser: FieldTypeParser | None = None,
    ):
        """
        Initialize the extractor.

        Args:
            config: Generator configuration (grammar, export handling)
            provider: Syntax provider; built from config.grammar when omitted
            field_parser: Parser used for each body member
        """
        self.config = config or SchemaGeneratorConfig()
        self.provider = provider or SyntaxProvider(self.config.grammar)
        self.field_parser = field_parser or FieldTypeParser()

    def extract(self, code: str) -> list[SchemaEntry]:
        """Parse source code and extract its interface declarations."""
        return self.extract_tree(self.provider.parse(code))

    def extract_tree(self, tree: SourceTree) -> list[SchemaEntry]:
        """Extract interface declarations from an already parsed tree."""
        entries = [self._extract_declaration(node, tree) for node in self._declarations(tree.root_node)]
        logger.debug("Extracted %d interface declaration(s): %s", len(entries), [e.name for e in entries])
        return entries

    def _declarations(self, root: Any) -> Iterator[Any]:
        for node in root.children:
            kind = NodeKind.of(node)
            if kind is NodeKind.INTERFACE_DECLARATION:
                yield node
            elif kind is NodeKind.EXPORT_STATEMENT and self.config.unwrap_exports:
                for child in node.children:
                    if NodeKind.of(child) is NodeKind.INTERFACE_DECLARATION:
                        yield child

    def _extract_declaration(self, node: Any, tree: SourceTree) -> SchemaEntry:
        entry = SchemaEntry()
        for child in node.children:
            kind = NodeKind.of(child)
            if kind is NodeKind.TYPE_IDENTIFIER:
                if entry.name is None:
                    entry.name = tree.text(child)
            elif kind.is_record_body:
                entry.fields.extend(self._extract_fields(child, tree))
        if entry.name is None:
            logger.debug("Interface declaration at byte %d has no name", node.start_byte)
        return entry

    def _extract_fields(self, body: Any, tree: SourceTree) -> list[FieldEntry]:
        parsed = (self.field_parser.parse(child, tree) for child in body.children)
        return [f for f in parsed if f is not None]
