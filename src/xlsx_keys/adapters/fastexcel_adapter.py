"""Legacy container adapter (.xls, .xlsb, .ods) using fastexcel (Calamine) + Polars.

Calamine exposes cached values only, so workbooks read here carry no
formula text and no defined names.
"""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Any

import fastexcel
import polars as pl

from xlsx_keys.utils.dates import display_text
from xlsx_keys.utils.errors import MalformedWorkbookError, RangeTooLargeError
from xlsx_keys.utils.logging import get_logger
from xlsx_keys.workbook import Cell, Sheet, UsedRange, Workbook

logger = get_logger(__name__)


def _open(source: bytes | str | Path) -> Any:
    return fastexcel.read_excel(source if isinstance(source, bytes) else str(source))


def _check_dimensions(reader: Any, name: str, max_cells: int | None) -> None:
    """Compare the sheet's height x width against *max_cells* without loading data."""
    if max_cells is None:
        return
    probe = reader.load_sheet(name, header_row=None, n_rows=0)
    cells = probe.total_height * probe.width
    if cells > max_cells:
        raise RangeTooLargeError(name, cells, max_cells)


def _read_sheet(reader: Any, name: str, max_cells: int | None) -> Sheet:
    _check_dimensions(reader, name, max_cells)
    with _suppress_stderr():
        df: pl.DataFrame = reader.load_sheet(name, header_row=None).to_polars()

    cells: dict[tuple[int, int], Cell] = {}
    for row_idx, row in enumerate(df.iter_rows()):
        for col_idx, value in enumerate(row):
            if value is None:
                continue
            cells[(row_idx, col_idx)] = Cell(value=value, formatted_text=display_text(value))

    used_range = UsedRange.bounding(list(cells))
    logger.debug("Read sheet %s: %d populated cells, range %s", name, len(cells), used_range)
    return Sheet(name=name, used_range=used_range, cells=cells)


def read_legacy(
    source: bytes | str | Path,
    *,
    label: str,
    max_cells: int | None = None,
) -> Workbook:
    """Parse a legacy/binary workbook from a path or raw bytes."""
    try:
        reader = _open(source)
        sheets = [_read_sheet(reader, name, max_cells) for name in reader.sheet_names]
    except (fastexcel.FastExcelError, pl.exceptions.PolarsError) as e:
        raise MalformedWorkbookError(label, str(e).strip() or type(e).__name__) from e
    return Workbook(sheets=sheets, named_ranges=None)


@contextlib.contextmanager
def _suppress_stderr():
    """Suppress stderr output from Rust/fastexcel dtype warnings."""
    old_stderr_fd = os.dup(2)
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, 2)
        yield
    finally:
        os.dup2(old_stderr_fd, 2)
        os.close(old_stderr_fd)
        os.close(devnull)
