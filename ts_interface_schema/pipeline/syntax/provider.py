"""
tree-sitter syntax provider for TypeScript sources.

Uses tree-sitter and tree-sitter-typescript to parse source text into a
tree of typed nodes with byte-range text extraction.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Parser

from ..config import Grammar
from ..errors import GrammarLoadError

logger = logging.getLogger(__name__)

_GRAMMARS: dict[Grammar, Callable[[], Any]] = {
    Grammar.TYPESCRIPT: ts_typescript.language_typescript,
    Grammar.TSX: ts_typescript.language_tsx,
}


class NodeKind(str, Enum):
    """Node kinds of the TypeScript grammar used by the extractor."""

    PROGRAM = "program"
    EXPORT_STATEMENT = "export_statement"
    INTERFACE_DECLARATION = "interface_declaration"
    TYPE_IDENTIFIER = "type_identifier"
    OBJECT_TYPE = "object_type"
    INTERFACE_BODY = "interface_body"  # object_type alias in newer grammar releases
    PROPERTY_SIGNATURE = "property_signature"
    TYPE_ANNOTATION = "type_annotation"
    OTHER = "other"

    @classmethod
    def of(cls, node: Any) -> NodeKind:
        """Classify a tree-sitter node, mapping unknown kinds to OTHER."""
        try:
            return cls(node.type)
        except ValueError:
            return cls.OTHER

    @property
    def is_record_body(self) -> bool:
        return self in (NodeKind.OBJECT_TYPE, NodeKind.INTERFACE_BODY)


@dataclass
class SourceTree:
    """A parsed source file: the tree-sitter tree plus the encoded source."""

    tree: Any
    source: bytes

    @property
    def root_node(self) -> Any:
        return self.tree.root_node

    @property
    def has_error(self) -> bool:
        return self.tree.root_node.has_error

    def text(self, node: Any) -> str:
        """Get the source text for a node."""
        return self.source[node.start_byte : node.end_byte].decode("utf8")


class SyntaxProvider:
    """Parses TypeScript source text with tree-sitter."""

    def __init__(self, grammar: Grammar = Grammar.TYPESCRIPT):
        """Initialize the parser for the given grammar.

        Args:
            grammar: Which tree-sitter-typescript grammar to load

        Raises:
            GrammarLoadError: If the grammar cannot be loaded into tree-sitter
        """
        self.grammar = grammar
        try:
            self._parser = Parser(Language(_GRAMMARS[grammar]()))
        except (ValueError, TypeError) as e:
            raise GrammarLoadError(f"Error loading {grammar.value} grammar: {e}") from e

    def parse(self, code: str) -> SourceTree:
        """Parse source code into a SourceTree.

        Syntax errors do not abort parsing; tree-sitter keeps the valid parts
        of the tree and extraction continues on a best-effort basis.
        """
        source = bytes(code, "utf8")
        tree = SourceTree(tree=self._parser.parse(source), source=source)
        if tree.has_error:
            error = self._find_first_error(tree.root_node)
            if error is not None:
                line = error.start_point[0] + 1
                logger.warning("Source has syntax errors (first at line %d); extracting what parsed", line)
        return tree

    def _find_first_error(self, root: Any) -> Any | None:
        """Find the first ERROR or missing node in source order."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                return node
            # Only subtrees that contain an error are worth descending into
            stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
        return None
