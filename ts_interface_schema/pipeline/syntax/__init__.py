"""
Syntax module.

Wraps tree-sitter parsing of TypeScript sources.
"""

from __future__ import annotations

from .provider import NodeKind, SourceTree, SyntaxProvider

__all__ = [
    "NodeKind",
    "SourceTree",
    "SyntaxProvider",
]
