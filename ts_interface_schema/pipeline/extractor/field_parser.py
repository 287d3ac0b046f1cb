"""
Field type parser.

Splits a field declaration node into a property name and a type
expression, and classifies the type as a primitive or a union.
"""

from __future__ import annotations

import logging
from typing import Any

from ..syntax import SourceTree
from .schema_nodes import FieldEntry, FieldType

logger = logging.getLogger(__name__)


class FieldTypeParser:
    """Parses property signatures into FieldEntry values."""

    TYPE_SEPARATOR = ":"
    UNION_SEPARATOR = "|"

    def parse(self, node: Any, tree: SourceTree) -> FieldEntry | None:
        """
        Parse a single field declaration.

        Args:
            node: A direct child of an interface body
            tree: The parsed source the node belongs to

        Returns:
            FieldEntry, or None when the node lacks a name or a type
        """
        name: str | None = None
        field_type: FieldType | None = None

        for child in node.children:
            text = tree.text(child)
            if not text:
                continue
            if text[0] == self.TYPE_SEPARATOR:
                if field_type is None:
                    field_type = self._parse_type_side(child, tree)
            elif name is None:
                name = text

        if name is None or field_type is None:
            if node.children:
                logger.debug("Dropping field %r: no name or type", tree.text(node))
            return None
        return FieldEntry(name=name, type=field_type)

    def _parse_type_side(self, node: Any, tree: SourceTree) -> FieldType | None:
        """Classify the type expression under a type annotation."""
        for child in node.children:
            text = tree.text(child)
            if text == self.TYPE_SEPARATOR:
                continue
            return self.classify(text)
        return None

    def classify(self, text: str) -> FieldType:
        """
        Classify a raw type expression.

        "A | B" becomes ["A", "B"]; anything else is returned trimmed.
        """
        if self.UNION_SEPARATOR in text:
            # A leading "|" is kept as an empty first member
            return [part.strip() for part in text.split(self.UNION_SEPARATOR)]
        return text.strip()
