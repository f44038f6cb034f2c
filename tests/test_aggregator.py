"""Tests for workbook traversal and key aggregation over model workbooks."""

import logging
from datetime import date, datetime

from conftest import make_sheet, make_workbook

from xlsx_keys.extraction.aggregator import ExtractionResult, extract_keys, stringify_value
from xlsx_keys.extraction.key_filter import is_english_key
from xlsx_keys.workbook import Cell, NamedRange, Sheet, UsedRange

ARABIC_HELLO = "مرحبا"


def test_header_and_data_row():
    sheet = make_sheet("Users", [["user_id", "Name", "B"], ["u1", "Ali", 42]])
    result = extract_keys(make_workbook(sheet))
    assert result.keys == ["Name", "user_id"]
    assert result.sheets_processed == ["Users"]
    assert result.total_cells == 6
    assert result.total_formulas == 0


def test_formula_contributes_quoted_key_only():
    formula = Cell(formula='=VLOOKUP("employee_code", Sheet2!A:A, 1, FALSE)')
    result = extract_keys(make_workbook(make_sheet("Calc", [[formula]])))
    assert result.keys == ["employee_code"]
    assert result.total_formulas == 1


def test_formula_cached_value_is_a_separate_candidate():
    cell = Cell(value="order_total", formula="=SUM(A1:A3)")
    result = extract_keys(make_workbook(make_sheet("Calc", [[cell]])))
    assert result.keys == ["order_total"]


def test_empty_sheet_without_used_range():
    result = extract_keys(make_workbook(Sheet(name="Empty")))
    assert result.keys == []
    assert result.is_empty
    assert result.sheets_processed == ["Empty"]
    assert result.total_cells == 0


def test_range_of_blank_cells():
    sheet = Sheet(name="Blank", used_range=UsedRange(0, 1, 0, 1), cells={(0, 0): Cell()})
    result = extract_keys(make_workbook(sheet))
    assert result.keys == []
    assert result.total_cells == 0


def test_workbook_without_sheets():
    result = extract_keys(make_workbook())
    assert result == ExtractionResult()


def test_duplicates_across_sheets_collapse():
    first = make_sheet("One", [["user_id", "order_id"]])
    second = make_sheet("Two", [["order_id", "user_id"]])
    result = extract_keys(make_workbook(first, second))
    assert result.keys == ["order_id", "user_id"]
    assert result.sheets_processed == ["One", "Two"]


def test_keys_are_case_sensitive():
    sheet = make_sheet("Data", [["Key_1", "key_1"]])
    assert extract_keys(make_workbook(sheet)).keys == ["Key_1", "key_1"]


def test_ordinal_sort_order():
    sheet = make_sheet("Data", [["zeta_key", "Alpha_key", "beta_key", "_private"]])
    result = extract_keys(make_workbook(sheet))
    assert result.keys == ["Alpha_key", "_private", "beta_key", "zeta_key"]


def test_values_are_trimmed():
    sheet = make_sheet("Data", [["  user_id \t"]])
    assert extract_keys(make_workbook(sheet)).keys == ["user_id"]


def test_formatted_text_is_a_candidate():
    cell = Cell(value=0.15, formatted_text=" discount_rate ")
    result = extract_keys(make_workbook(make_sheet("Data", [[cell]])))
    assert result.keys == ["discount_rate"]


def test_arabic_values_never_reported():
    sheet = make_sheet(
        "Data",
        [[ARABIC_HELLO, f"{ARABIC_HELLO}_{ARABIC_HELLO}", Cell(formula=f'="{ARABIC_HELLO}"')]],
    )
    assert extract_keys(make_workbook(sheet)).keys == []


def test_cells_outside_used_range_are_not_visited():
    sheet = Sheet(
        name="Data",
        used_range=UsedRange(0, 0, 0, 0),
        cells={(0, 0): Cell(value="user_id"), (5, 5): Cell(value="hidden_key")},
    )
    result = extract_keys(make_workbook(sheet))
    assert result.keys == ["user_id"]
    assert result.total_cells == 1


def test_header_row_uses_first_row_of_used_range():
    sheet = make_sheet("Offset", [["region_code", 7], ["x", "y"]], origin=(3, 2))
    assert sheet.used_range == UsedRange(3, 4, 2, 3)
    assert [c.value for c in sheet.header_row()] == ["region_code", 7]
    assert extract_keys(make_workbook(sheet)).keys == ["region_code"]


def test_named_ranges_are_filtered():
    named = (
        NamedRange("tax_rate", "Sheet1!$B$1"),
        NamedRange("Total", "Sheet1!$C$9"),
        NamedRange("ORDER_IDS", "Orders!$A:$A"),
        NamedRange("", None),
    )
    sheet = make_sheet("Sheet1", [[1]])
    result = extract_keys(make_workbook(sheet, named_ranges=named))
    assert result.keys == ["ORDER_IDS", "tax_rate"]


def test_non_string_scalars_degrade_to_rejection():
    row = [True, False, 3.0, datetime(2024, 1, 5), date(2024, 2, 1), object(), 0.00001, 2.5e-05]
    sheet = make_sheet("Data", [row])
    result = extract_keys(make_workbook(sheet))
    assert result.keys == []
    assert result.total_cells == 8


def test_numeric_text_with_letters_is_never_a_key():
    numbers = ["1e-05", "1.5e3", "-Infinity", "Infinity", "2E+10"]
    rows = [
        ["rate_id", *numbers],
        [Cell(value=0.00001, formatted_text="1E-05"), Cell(value=1e-08), 1e21, "\ufeffuser_id"],
    ]
    result = extract_keys(make_workbook(make_sheet("Rates", rows)))
    assert result.keys == ["rate_id", "user_id"]
    assert all(not is_english_key(n) for n in numbers)


def test_result_invariants_and_determinism():
    sheet = make_sheet(
        "Mixed",
        [
            ["user_id", "itemName", "MAX_COUNT", "key-1"],
            [Cell(formula='=IF(isActive, "status_code", "n/a")'), "config.value", "IF", "A1"],
            ["user_id", "12345", "Name", "a"],
        ],
    )
    workbook = make_workbook(sheet)
    first = extract_keys(workbook)
    second = extract_keys(workbook)
    assert first == second
    assert first.keys == sorted(set(first.keys))
    assert all(is_english_key(k) for k in first.keys)
    assert "isActive" in first.keys
    assert "status_code" in first.keys
    assert "IF" not in first.keys


def test_workbook_is_not_mutated():
    sheet = make_sheet("Data", [["user_id", Cell(formula="=SUM(A1)")]])
    before = dict(sheet.cells)
    extract_keys(make_workbook(sheet))
    assert dict(sheet.cells) == before


def test_to_dict():
    result = ExtractionResult(keys=["a_b"], sheets_processed=["S"], total_cells=1)
    assert result.to_dict() == {
        "keys": ["a_b"],
        "sheets_processed": ["S"],
        "total_cells": 1,
        "total_formulas": 0,
    }


def test_decisions_are_traced(caplog):
    caplog.set_level(logging.DEBUG, logger="xlsx_keys")
    extract_keys(make_workbook(make_sheet("Data", [["user_id", "Ali"]])))
    messages = [r.getMessage() for r in caplog.records]
    assert any("Added key 'user_id'" in m and "Data!A1" in m for m in messages)
    assert any("Filtered candidate 'Ali'" in m for m in messages)
    assert any("Found 1 keys across 1 sheets" in m for m in messages)


class TestStringifyValue:
    def test_booleans_lowercase(self):
        assert stringify_value(True) == "true"
        assert stringify_value(False) == "false"

    def test_numbers(self):
        assert stringify_value(42) == "42"
        assert stringify_value(42.0) == "42"
        assert stringify_value(1.5) == "1.5"

    def test_temporal(self):
        assert stringify_value(datetime(2024, 1, 5)) == "2024-01-05"
        assert stringify_value(datetime(2024, 1, 5, 9, 30)) == "2024-01-05T09:30:00"
        assert stringify_value(date(2024, 2, 1)) == "2024-02-01"

    def test_strings_untouched(self):
        assert stringify_value("  a b ") == "  a b "
