"""
Schema merger.

Builds the final schema from the extracted entries: the first entry is
the root and each of its top-level fields naming another declared
interface is replaced with that interface's full entry. Resolution is
single level; fields of an inlined entry are left as written.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence

from ..config import InlineStyle, SchemaGeneratorConfig
from ..errors import EmptySchemaError
from ..extractor.schema_nodes import FieldEntry, SchemaEntry

logger = logging.getLogger(__name__)


class SchemaMerger:
    """Resolves the root entry's references against all extracted entries."""

    def __init__(self, config: SchemaGeneratorConfig | None = None):
        self.config = config or SchemaGeneratorConfig()

    def merge(self, entries: Sequence[SchemaEntry]) -> SchemaEntry:
        """
        Merge extracted entries into one schema rooted at entries[0].

        Args:
            entries: Extracted entries in source order

        Returns:
            A copy of the root entry with resolvable fields inlined

        Raises:
            EmptySchemaError: If there are no entries
        """
        if not entries:
            raise EmptySchemaError("No interface declarations found; nothing to use as the root schema")

        root = entries[0]
        merged = copy.deepcopy(root)
        base_types = set(self.config.base_types)

        # First declaration wins for duplicate names
        by_name: dict[str, SchemaEntry] = {}
        for entry in entries:
            if entry.name is not None:
                by_name.setdefault(entry.name, entry)

        for i, field in enumerate(root.fields):
            if not isinstance(field, FieldEntry) or not isinstance(field.type, str):
                continue
            if field.type in base_types:
                continue
            target = by_name.get(field.type)
            if target is None:
                logger.debug("Field %r references unknown type %r; leaving as is", field.name, field.type)
                continue
            merged.fields[i] = self._inline(field, copy.deepcopy(target))

        return merged

    def _inline(self, field: FieldEntry, target: SchemaEntry) -> FieldEntry | SchemaEntry:
        if self.config.inline_style is InlineStyle.NESTED_TYPE:
            return FieldEntry(name=field.name, type=target)
        return target
