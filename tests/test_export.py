"""Tests for the keys export payload and its file naming."""

import json

import pytest

from xlsx_keys.extraction.aggregator import ExtractionResult
from xlsx_keys.formatters.json_formatter import (
    build_export_payload,
    export_filename,
    write_export,
)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("report.xlsx", "report-keys.json"),
        ("report.v2.xlsx", "report.v2-keys.json"),
        ("report", "report-keys.json"),
        ("/tmp/data/book.xlsm", "book-keys.json"),
        ("فهرست.xlsx", "فهرست-keys.json"),
        (".xlsx", "excel-keys-keys.json"),
        (None, "excel-keys-keys.json"),
        ("", "excel-keys-keys.json"),
    ],
)
def test_export_filename(source, expected):
    assert export_filename(source) == expected


def test_payload_contains_only_keys():
    result = ExtractionResult(keys=["a_b", "c_d"], sheets_processed=["S"], total_cells=4)
    assert build_export_payload(result) == {"keys": ["a_b", "c_d"]}


def test_payload_is_a_copy():
    result = ExtractionResult(keys=["a_b"])
    build_export_payload(result)["keys"].append("x_y")
    assert result.keys == ["a_b"]


def test_write_export(tmp_path):
    result = ExtractionResult(keys=["Name", "user_id"])
    path = write_export(result, "users.xlsx", tmp_path / "out")
    assert path == tmp_path / "out" / "users-keys.json"
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == {"keys": ["Name", "user_id"]}
    assert text.endswith("\n")


def test_write_export_empty_result(tmp_path):
    path = write_export(ExtractionResult(), "blank.xlsx", tmp_path)
    assert json.loads(path.read_text(encoding="utf-8")) == {"keys": []}
