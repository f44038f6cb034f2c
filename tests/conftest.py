"""Shared pytest fixtures for xlsx-keys tests."""

import pytest
from openpyxl import Workbook
from openpyxl.workbook.defined_name import DefinedName

from xlsx_keys.workbook import Cell, Sheet, UsedRange
from xlsx_keys.workbook import Workbook as KeyWorkbook


def make_sheet(name: str, rows: list[list], origin: tuple[int, int] = (0, 0)) -> Sheet:
    """Build a model Sheet from literal row values; None leaves a gap."""
    cells = {}
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value is None:
                continue
            cell = value if isinstance(value, Cell) else Cell(value=value)
            cells[(origin[0] + r, origin[1] + c)] = cell
    return Sheet(name=name, used_range=UsedRange.bounding(list(cells)), cells=cells)


def make_workbook(*sheets: Sheet, named_ranges=None) -> KeyWorkbook:
    return KeyWorkbook(sheets=sheets, named_ranges=named_ranges)


@pytest.fixture
def keys_xlsx(tmp_path):
    """Two-sheet workbook covering values, formulas, Arabic text and a defined name.

    - "Config": header (user_id, Name, B), one data row (u1, Ali, 42)
    - "Formulas": VLOOKUP with a quoted key, a plain SUM, an Arabic word
    - Defined name tax_rate -> Config!$C$2
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Config"
    ws["A1"] = "user_id"
    ws["B1"] = "Name"
    ws["C1"] = "B"
    ws["A2"] = "u1"
    ws["B2"] = "Ali"
    ws["C2"] = 42

    ws_formulas = wb.create_sheet("Formulas")
    ws_formulas["A1"] = '=VLOOKUP("employee_code", Config!A:A, 1, FALSE)'
    ws_formulas["A2"] = "=SUM(B1:B5)"
    ws_formulas["B1"] = "مرحبا"  # Arabic "marhaba"

    wb.defined_names["tax_rate"] = DefinedName("tax_rate", attr_text="Config!$C$2")

    p = tmp_path / "keys.xlsx"
    wb.save(p)
    return p


@pytest.fixture
def empty_xlsx(tmp_path):
    """Single untouched sheet."""
    wb = Workbook()
    wb.active.title = "Blank"
    p = tmp_path / "empty.xlsx"
    wb.save(p)
    return p


@pytest.fixture
def broken_xlsx(tmp_path):
    """Bytes that are not a zip container despite the .xlsx extension."""
    p = tmp_path / "broken.xlsx"
    p.write_bytes(b"this is not a spreadsheet")
    return p


@pytest.fixture
def wide_xlsx(tmp_path):
    """Sheet whose used range spans A1:Z100 (2,600 cells) with two populated corners."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Wide"
    ws["A1"] = "order_id"
    ws["Z100"] = "lineTotal"
    p = tmp_path / "wide.xlsx"
    wb.save(p)
    return p
