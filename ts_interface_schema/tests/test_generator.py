"""
Tests for PipelineGenerator output and writing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from ts_interface_schema.pipeline import (
    EmptySchemaError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaGeneratorConfig,
)

PERSON = """
interface Person {
    age: number;
    location: string | null;
}
"""


class TestPipelineGenerator:
    def test_compact_output(self):
        expected = '{"type":"Record","name":"Person","fields":[{"name":"age","type":"number"},{"name":"location","type":["string","null"]}]}'
        assert PipelineGenerator().generate(PERSON) == expected

    def test_indented_output(self):
        out = PipelineGenerator(SchemaGeneratorConfig(indent=2)).generate(PERSON)
        assert out.startswith('{\n  "type": "Record"')
        assert json.loads(out)["name"] == "Person"

    def test_no_interfaces_fail(self):
        with pytest.raises(EmptySchemaError):
            PipelineGenerator().generate("const x = 1;")

    def test_empty_source_fails(self):
        with pytest.raises(EmptySchemaError):
            PipelineGenerator().build("")

    def test_extract_returns_every_declaration(self):
        code = "interface A { b: B; }\ninterface B { c: string; }"
        assert [e.name for e in PipelineGenerator().extract(code)] == ["A", "B"]

    def test_syntax_errors_are_best_effort(self, caplog):
        code = "interface Good { a: string; }\ninterface Broken { b: ; }"
        with caplog.at_level(logging.WARNING):
            schema = PipelineGenerator().build(code)
        assert schema.name == "Good"
        assert "syntax errors" in caplog.text


class TestPipelineWrite:
    def test_write_new_file(self, tmp_path: Path):
        target = tmp_path / "schema.json"
        generator = PipelineGenerator()
        generator.write(generator.generate(PERSON), target)
        assert json.loads(target.read_text(encoding="utf-8"))["name"] == "Person"

    def test_existing_file_is_an_error(self, tmp_path: Path):
        target = tmp_path / "schema.json"
        target.write_text("old", encoding="utf-8")
        generator = PipelineGenerator()
        with pytest.raises(FileExistsError):
            generator.write(generator.generate(PERSON), target)
        assert target.read_text(encoding="utf-8") == "old"

    def test_force_overwrites(self, tmp_path: Path):
        target = tmp_path / "schema.json"
        target.write_text("old", encoding="utf-8")
        generator = PipelineGenerator(SchemaGeneratorConfig(output=OutputConfig(mode=OutputMode.FORCE)))
        generator.write(generator.generate(PERSON), target)
        assert json.loads(target.read_text(encoding="utf-8"))["name"] == "Person"

    def test_non_atomic_write(self, tmp_path: Path):
        target = tmp_path / "schema.json"
        target.write_text("old", encoding="utf-8")
        generator = PipelineGenerator(SchemaGeneratorConfig(output=OutputConfig(atomic_write=False)))
        with pytest.raises(FileExistsError):
            generator.write("{}", target)
