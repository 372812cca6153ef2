"""Tests for schema compilation, reference resolution and violation text."""

from __future__ import annotations

import pytest

from yajsv.exceptions import SchemaError, ValidateError
from yajsv.models.schema import compile_schema


def test_required_field_violation(testdata):
    schema = compile_schema(testdata / "schema.json")
    result = schema.validate(b"{}")
    assert not result.valid
    assert result.errors == ("(root): foo is required",)


def test_valid_document(testdata):
    schema = compile_schema(testdata / "schema.json")
    assert schema.validate(b'{"foo": 1}').valid


def test_yaml_schema_compiles(testdata):
    schema = compile_schema(testdata / "schema.yml")
    assert schema.validate(b"{}").errors == ("(root): foo is required",)


def test_truncated_document_is_a_validate_error(testdata):
    schema = compile_schema(testdata / "schema.json")
    with pytest.raises(ValidateError, match="Expecting value"):
        schema.validate(b'{"foo": tru')


def test_invalid_utf8_is_a_validate_error(testdata):
    schema = compile_schema(testdata / "schema.json")
    with pytest.raises(ValidateError, match="UTF-8"):
        schema.validate(b'{"foo": "\xff"}')


def test_nested_violations_are_sorted_with_context(write_json):
    path = write_json(
        "schema.json",
        {
            "type": "object",
            "properties": {
                "items": {
                    "type": "array",
                    "items": {"type": "object", "required": ["name"]},
                },
                "count": {"type": "integer"},
            },
        },
    )
    result = compile_schema(path).validate(b'{"items": [{"name": "a"}, {}], "count": "x"}')
    assert result.errors == (
        "(root).count: 'x' is not of type 'integer'",
        "(root).items.1: name is required",
    )


def test_multiple_missing_fields_each_reported(write_json):
    path = write_json("schema.json", {"required": ["a", "b"]})
    assert compile_schema(path).validate(b"{}").errors == (
        "(root): a is required",
        "(root): b is required",
    )


def test_invalid_schema(write_json):
    path = write_json("schema.json", {"type": 5})
    with pytest.raises(SchemaError, match="invalid schema"):
        compile_schema(path)


def test_non_schema_document(write_json):
    path = write_json("schema.json", [1, 2])
    with pytest.raises(SchemaError, match="invalid schema"):
        compile_schema(path)


def test_missing_schema(tmp_path):
    with pytest.raises(SchemaError, match="unable to load schema"):
        compile_schema(tmp_path / "missing.json")


def test_malformed_schema(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(SchemaError, match="unable to load schema"):
        compile_schema(path)


def test_reference_by_id(write_json):
    item = write_json(
        "refs/item.json",
        {"$id": "http://example.com/item.json", "type": "object", "required": ["name"]},
    )
    primary = write_json(
        "schema.json",
        {"type": "object", "properties": {"item": {"$ref": "http://example.com/item.json"}}},
    )
    schema = compile_schema(primary, [item])
    assert schema.validate(b'{"item": {"name": "x"}}').valid
    assert schema.validate(b'{"item": {}}').errors == ("(root).item: name is required",)


def test_invalid_reference_schema(write_json):
    ref = write_json("ref.json", {"type": "nope"})
    primary = write_json("schema.json", {"type": "object"})
    with pytest.raises(SchemaError, match="ref.json: invalid schema"):
        compile_schema(primary, [ref])


def test_primary_schema_in_refs_is_skipped(write_json):
    primary = write_json("schema.json", {"required": ["foo"]})
    schema = compile_schema(primary, [primary])
    assert schema.validate(b'{"foo": 1}').valid


def test_relative_file_reference_is_loaded_on_demand(write_json):
    write_json("defs.json", {"definitions": {"positive": {"type": "integer", "minimum": 1}}})
    primary = write_json(
        "schema.json",
        {"properties": {"foo": {"$ref": "defs.json#/definitions/positive"}}},
    )
    schema = compile_schema(primary)
    assert schema.validate(b'{"foo": 3}').valid
    assert schema.validate(b'{"foo": 0}').errors == ("(root).foo: 0 is less than the minimum of 1",)


def test_relative_reference_with_draft4_schema(write_json):
    write_json("defs.json", {"definitions": {"name": {"type": "string"}}})
    primary = write_json(
        "schema.json",
        {
            "$schema": "http://json-schema.org/draft-04/schema#",
            "properties": {"name": {"$ref": "defs.json#/definitions/name"}},
        },
    )
    schema = compile_schema(primary)
    assert not schema.validate(b'{"name": 1}').valid


def test_unresolvable_reference_is_a_validate_error(write_json):
    primary = write_json(
        "schema.json",
        {"properties": {"foo": {"$ref": "http://example.com/missing.json"}}},
    )
    schema = compile_schema(primary)
    with pytest.raises(ValidateError, match="unresolvable reference"):
        schema.validate(b'{"foo": 1}')
