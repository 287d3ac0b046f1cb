"""
Merger module.

Resolves references between extracted interfaces and writes the
resulting schema.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .schema_merger import SchemaMerger

__all__ = [
    "SchemaMerger",
    "AtomicWriter",
]
