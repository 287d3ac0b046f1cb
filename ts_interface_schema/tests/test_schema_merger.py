"""
Tests for SchemaMerger.
"""

from __future__ import annotations

import pytest

from ts_interface_schema.pipeline import EmptySchemaError, InlineStyle, SchemaGeneratorConfig, SchemaMerger
from ts_interface_schema.pipeline.extractor import FieldEntry, SchemaEntry, TypeKind


def _person(location_type="Location") -> SchemaEntry:
    return SchemaEntry(
        name="Person",
        fields=[
            FieldEntry(name="age", type="number"),
            FieldEntry(name="location", type=location_type),
        ],
    )


def _location() -> SchemaEntry:
    return SchemaEntry(
        name="Location",
        fields=[
            FieldEntry(name="city", type="string"),
            FieldEntry(name="state", type="string"),
        ],
    )


class TestSchemaMerger:
    """Reference resolution into the root entry"""

    def test_empty_entries_fail(self):
        with pytest.raises(EmptySchemaError):
            SchemaMerger().merge([])

    def test_single_entry_is_copied(self):
        person = _person("string")
        merged = SchemaMerger().merge([person])
        assert merged == person
        assert merged is not person

    def test_nested_type_keeps_field_name(self):
        config = SchemaGeneratorConfig(inline_style=InlineStyle.NESTED_TYPE)
        merged = SchemaMerger(config).merge([_person(), _location()])
        location = merged.fields[1]
        assert location.name == "location"
        assert location.type_kind is TypeKind.RECORD
        assert location.type == _location()
        assert [f.name for f in location.type.fields] == ["city", "state"]

    def test_reference_replaces_whole_field(self):
        merged = SchemaMerger().merge([_person(), _location()])
        assert merged.fields[0] == FieldEntry(name="age", type="number")
        assert merged.fields[1] == _location()

    def test_unknown_reference_passes_through(self):
        merged = SchemaMerger().merge([_person("Unknown"), _location()])
        assert merged.fields[1] == FieldEntry(name="location", type="Unknown")

    def test_base_type_never_resolved(self):
        # A record named like a base type does not capture the field
        shadow = SchemaEntry(name="string", fields=[FieldEntry(name="x", type="number")])
        merged = SchemaMerger().merge([_person("string"), shadow])
        assert merged.fields[1] == FieldEntry(name="location", type="string")

    def test_configured_base_types(self):
        config = SchemaGeneratorConfig(base_types=["number", "Location"])
        merged = SchemaMerger(config).merge([_person(), _location()])
        assert merged.fields[1] == FieldEntry(name="location", type="Location")

    def test_union_members_are_not_resolved(self):
        merged = SchemaMerger().merge([_person(["Location", "null"]), _location()])
        assert merged.fields[1] == FieldEntry(name="location", type=["Location", "null"])

    def test_resolution_is_single_level(self):
        location = SchemaEntry(name="Location", fields=[FieldEntry(name="geo", type="Geo")])
        geo = SchemaEntry(name="Geo", fields=[FieldEntry(name="lat", type="number")])
        merged = SchemaMerger().merge([_person(), location, geo])
        assert merged.fields[1].fields == [FieldEntry(name="geo", type="Geo")]

    def test_self_reference_inlines_unresolved_root(self):
        node = SchemaEntry(name="Node", fields=[FieldEntry(name="next", type="Node")])
        merged = SchemaMerger().merge([node])
        assert merged.fields[0] == node

    def test_first_duplicate_name_wins(self):
        first = SchemaEntry(name="Location", fields=[FieldEntry(name="first", type="string")])
        second = SchemaEntry(name="Location", fields=[FieldEntry(name="second", type="string")])
        merged = SchemaMerger().merge([_person(), first, second])
        assert merged.fields[1] == first

    def test_inputs_are_not_mutated(self):
        person, location = _person(), _location()
        merged = SchemaMerger().merge([person, location])
        merged.fields[1].fields.append(FieldEntry(name="zip", type="string"))
        assert person == _person()
        assert location == _location()

    def test_root_without_name_still_merges(self):
        root = SchemaEntry(fields=[FieldEntry(name="location", type="Location")])
        merged = SchemaMerger().merge([root, _location()])
        assert merged.name is None
        assert merged.fields[0] == _location()
