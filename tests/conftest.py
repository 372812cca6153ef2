"""Shared pytest fixtures for the yajsv test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from yajsv.testdata import generate_variants

TESTDATA = Path(__file__).resolve().parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("YAJSV_CONCURRENCY", "YAJSV_LOG_LEVEL", "YAJSV_PRINT_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON value to ``tmp_path / name`` and return the path."""

    def _write(name: str, value) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(value), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def encoded_docs(tmp_path) -> Path:
    """UTF-16 and BOM variants of ``testdata/utf-8`` below a temp directory."""
    dest = tmp_path / "encoded"
    generate_variants(TESTDATA / "utf-8", dest)
    return dest
