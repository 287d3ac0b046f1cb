"""
Configuration for the schema generator pipeline.

Grammar selection and merge behavior are explicit configuration values
passed into the pipeline instead of process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Type names that are never treated as references to declared interfaces
BASE_TYPES = ["string", "number", "null", "Date", "boolean"]


class Grammar(str, Enum):
    """tree-sitter-typescript grammar used to parse the source."""

    TYPESCRIPT = "typescript"
    TSX = "tsx"


class InlineStyle(str, Enum):
    """Where a resolved interface is placed in the root record.

    REPLACE_FIELD substitutes the whole field with the record.
    NESTED_TYPE keeps the field name and stores the record under "type".
    """

    REPLACE_FIELD = "replace_field"
    NESTED_TYPE = "nested_type"


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check the JSON before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class SchemaGeneratorConfig:
    """Configuration options for schema generation."""

    # Grammar handed to tree-sitter
    grammar: Grammar = Grammar.TYPESCRIPT

    # Type names checked before reference lookup
    base_types: list[str] = field(default_factory=lambda: list(BASE_TYPES))

    # Placement of inlined interfaces
    inline_style: InlineStyle = InlineStyle.REPLACE_FIELD

    # Also extract interfaces wrapped in top-level export statements
    unwrap_exports: bool = False

    # JSON indentation (None = compact)
    indent: int | None = None

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> SchemaGeneratorConfig:
        """Create a config from a dictionary."""
        config = SchemaGeneratorConfig()
        for k, v in d.items():
            if not hasattr(config, k):
                continue
            if k == "grammar":
                v = Grammar(v)
            elif k == "inline_style":
                v = InlineStyle(v)
            elif k == "base_types":
                v = list(v)
            elif k == "output":
                v = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.ERROR_IF_EXISTS.value)),
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "grammar": self.grammar.value,
            "base_types": list(self.base_types),
            "inline_style": self.inline_style.value,
            "unwrap_exports": self.unwrap_exports,
            "indent": self.indent,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
