"""openpyxl adapter reading Office Open XML workbooks (.xlsx, .xlsm) into the workbook model.

The container is loaded twice: once with ``data_only=False`` to see formula
text and once with ``data_only=True`` to see the values cached by the last
recalculation. Normal (non-read-only) mode is used because read-only
worksheets trust the declared ``<dimension>`` and do not expose
sheet-scoped defined names.
"""

from __future__ import annotations

import io
import zipfile
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.formula import ArrayFormula
from openpyxl.worksheet.worksheet import Worksheet

from xlsx_keys.utils.dates import display_text
from xlsx_keys.utils.errors import MalformedWorkbookError, RangeTooLargeError
from xlsx_keys.utils.logging import get_logger
from xlsx_keys.workbook import Cell, NamedRange, Sheet, UsedRange, Workbook

logger = get_logger(__name__)

# Everything openpyxl / zipfile / the XML layer raise for a damaged or foreign container
_PARSE_ERRORS = (
    InvalidFileException,
    zipfile.BadZipFile,
    KeyError,
    ValueError,
    TypeError,
    SyntaxError,
    EOFError,
)


def _open(source: bytes | str | Path, data_only: bool) -> Any:
    handle = io.BytesIO(source) if isinstance(source, bytes) else str(source)
    return load_workbook(handle, data_only=data_only)


def _formula_text(value: Any) -> str | None:
    """Formula string for a formula cell, including array formulas."""
    if isinstance(value, ArrayFormula):
        return value.text
    if isinstance(value, str):
        return value
    # DataTableFormula and friends carry no formula text
    return None


def _check_dimensions(ws: Worksheet, max_cells: int | None) -> None:
    if max_cells is None:
        return
    cells = (ws.max_row - ws.min_row + 1) * (ws.max_column - ws.min_column + 1)
    if cells > max_cells:
        raise RangeTooLargeError(ws.title, cells, max_cells)


def _iter_cell_pairs(ws: Worksheet, values_ws: Worksheet) -> Iterator[tuple[Any, Any]]:
    """Yield (formula-view cell, cached value) pairs over the sheet's bounding box."""
    bounds = {
        "min_row": ws.min_row,
        "max_row": ws.max_row,
        "min_col": ws.min_column,
        "max_col": ws.max_column,
    }
    for row_cells, cached_row in zip(
        ws.iter_rows(**bounds),
        values_ws.iter_rows(**bounds, values_only=True),
        strict=True,
    ):
        yield from zip(row_cells, cached_row, strict=True)


def _build_cell(cell: Any, cached: Any) -> Cell | None:
    """Create a Cell from the formula view and the cached value, or None when blank."""
    formula = None
    if cell.data_type == "f":
        formula = _formula_text(cell.value)
        value = cached
    else:
        value = cell.value

    text = display_text(value, cell.number_format)
    if value is None and formula is None and text is None:
        return None
    return Cell(value=value, formula=formula, formatted_text=text)


def _read_sheet(ws: Worksheet, values_ws: Worksheet, max_cells: int | None) -> Sheet:
    _check_dimensions(ws, max_cells)
    cells: dict[tuple[int, int], Cell] = {}
    for cell, cached in _iter_cell_pairs(ws, values_ws):
        built = _build_cell(cell, cached)
        if built is not None:
            cells[(cell.row - 1, cell.column - 1)] = built

    used_range = UsedRange.bounding(list(cells))
    logger.debug("Read sheet %s: %d populated cells, range %s", ws.title, len(cells), used_range)
    return Sheet(name=ws.title, used_range=used_range, cells=cells)


def _defined_names(wb: Any) -> list[NamedRange]:
    """Workbook-scoped names followed by sheet-scoped names in sheet order."""
    names = [NamedRange(name, defn.attr_text) for name, defn in wb.defined_names.items()]
    for ws in wb.worksheets:
        for name, defn in ws.defined_names.items():
            names.append(NamedRange(name, defn.attr_text))
    return names


def read_openxml(
    source: bytes | str | Path,
    *,
    label: str,
    max_cells: int | None = None,
) -> Workbook:
    """Parse an Office Open XML workbook from a path or raw bytes.

    *label* names the source in error messages. Raises
    MalformedWorkbookError when the container cannot be parsed and
    RangeTooLargeError when a sheet exceeds *max_cells*.
    """
    try:
        wb = _open(source, data_only=False)
        values_wb = _open(source, data_only=True)
    except _PARSE_ERRORS as e:
        raise MalformedWorkbookError(label, str(e) or type(e).__name__) from e

    try:
        sheets = [
            _read_sheet(ws, values_wb[ws.title], max_cells) for ws in wb.worksheets
        ]
        return Workbook(sheets=sheets, named_ranges=_defined_names(wb))
    finally:
        wb.close()
        values_wb.close()
