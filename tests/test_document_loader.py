"""Tests for format dispatch and YAML conversion in the document loader."""

from __future__ import annotations

import json

import pytest

from yajsv.exceptions import LoadError
from yajsv.parsers.charset import BOM_UTF8
from yajsv.parsers.document_loader import DocumentFormat, load
from yajsv.parsers.yaml_parser import yaml_to_json


@pytest.mark.parametrize(
    "name, expected",
    [
        ("doc.yml", DocumentFormat.YAML),
        ("doc.yaml", DocumentFormat.YAML),
        ("DOC.YAML", DocumentFormat.YAML),
        ("doc.json", DocumentFormat.JSON),
        ("doc.txt", DocumentFormat.JSON),
        ("doc", DocumentFormat.JSON),
        ("doc.yml.json", DocumentFormat.JSON),
    ],
)
def test_format_is_resolved_from_extension(name, expected):
    assert DocumentFormat.from_path(name) is expected


def test_json_document_loads_as_is(testdata):
    assert json.loads(load(testdata / "data-pass.json")) == {"foo": 1}


def test_yaml_document_is_converted_to_json(testdata):
    assert json.loads(load(testdata / "data-pass.yml")) == {"foo": 1}


def test_missing_file_is_a_load_error(tmp_path):
    missing = tmp_path / "missing.json"
    with pytest.raises(LoadError) as info:
        load(missing)
    assert info.value.path == str(missing)
    assert "No such file or directory" in info.value.cause


def test_directory_is_a_load_error(tmp_path):
    with pytest.raises(LoadError):
        load(tmp_path)


def test_json_bom_follows_allow_flag(tmp_path):
    path = tmp_path / "bom.json"
    path.write_bytes(BOM_UTF8 + b'{"foo": 1}')

    with pytest.raises(LoadError) as info:
        load(path)
    assert info.value.cause == "unexpected BOM, see `-b` flag"
    assert str(info.value).startswith(f"{path}: ")

    assert load(path, allow_bom=True) == b'{"foo": 1}'


def test_yaml_ignores_bom_flag(tmp_path):
    path = tmp_path / "bom.yml"
    path.write_bytes(BOM_UTF8 + b"foo: 1\n")
    assert json.loads(load(path)) == {"foo": 1}


def test_bomless_utf16_yaml_is_not_detected(tmp_path):
    path = tmp_path / "utf16.yaml"
    path.write_bytes("foo: 1\n".encode("utf-16-le"))
    with pytest.raises(LoadError, match="yaml"):
        load(path)


def test_yaml_syntax_error_is_a_single_line_load_error(testdata):
    with pytest.raises(LoadError) as info:
        load(testdata / "data-error.yml")
    assert info.value.cause.startswith("yaml: ")
    assert "\n" not in info.value.cause


def test_yaml_timestamps_stay_strings():
    assert json.loads(yaml_to_json(b"when: 2001-12-14t21:59:43.10-05:00\n")) == {
        "when": "2001-12-14t21:59:43.10-05:00"
    }


def test_empty_yaml_is_null():
    assert yaml_to_json(b"") == b"null"


def test_yaml_without_json_equivalent_is_rejected():
    with pytest.raises(LoadError, match="cannot convert to JSON"):
        yaml_to_json(b"data: !!binary aGVsbG8=\n")


def test_yaml_keeps_unicode():
    assert json.loads(yaml_to_json("name: bär\n".encode("utf-8"))) == {"name": "bär"}
