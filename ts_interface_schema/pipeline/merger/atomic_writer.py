"""
Atomic file writer for schema output.

Ensures that file writes are atomic to prevent leaving a truncated
schema behind after an interrupted run.
"""

from __future__ import annotations

import json
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import SchemaOutputError


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_json: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_json: Optional validation function for the schema text
        """
        self._validate_json = validate_json or self._default_validate_json

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            SchemaOutputError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_json(content)

            temp_path.replace(path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Returns:
            True once the file is written

        Raises:
            FileExistsError: If the file already exists
            SchemaOutputError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

        self.write(path, content, validate)
        return True

    def _default_validate_json(self, content: str) -> None:
        """Check that content is a JSON Record schema.

        Raises:
            SchemaOutputError: If validation fails
        """
        try:
            schema = json.loads(content)
        except json.JSONDecodeError as e:
            raise SchemaOutputError(f"Generated schema is not valid JSON: {e}") from e

        if not isinstance(schema, dict) or "name" not in schema or "fields" not in schema:
            raise SchemaOutputError("Generated schema is missing the root record")
