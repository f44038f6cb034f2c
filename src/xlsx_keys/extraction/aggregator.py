"""Workbook traversal: fold every candidate of a workbook into a sorted key list.

Candidates come from five places: formula tokens, literal cell values,
formatted cell text, the defined-name table and the header row of each
sheet. Every candidate goes through :func:`is_english_key` and accepted
candidates collect in one workbook-wide set, so duplicates across sheets
collapse. The header pass repeats part of the general scan on purpose: it
only looks at string values and is kept independent of how the general
scan stringifies cells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any

from xlsx_keys.extraction.key_filter import is_english_key, trim
from xlsx_keys.extraction.tokenizer import extract_formula_tokens
from xlsx_keys.utils.constants import KEYS_PREVIEW_COUNT
from xlsx_keys.utils.dates import format_number, format_temporal
from xlsx_keys.utils.logging import get_logger
from xlsx_keys.utils.validation import cell_address
from xlsx_keys.workbook import Sheet, Workbook

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of one extraction run. An empty ``keys`` list is a normal result."""

    keys: list[str] = field(default_factory=list)
    sheets_processed: list[str] = field(default_factory=list)
    total_cells: int = 0
    total_formulas: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.keys

    def to_dict(self) -> dict[str, Any]:
        return {
            "keys": list(self.keys),
            "sheets_processed": list(self.sheets_processed),
            "total_cells": self.total_cells,
            "total_formulas": self.total_formulas,
        }


def stringify_value(value: Any) -> str:
    """Render any scalar cell value as candidate text (untrimmed)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (datetime, date, time, timedelta)):
        return format_temporal(value)
    return str(value)


def _accept(keys: set[str], candidate: Any, source: str, where: str) -> None:
    if is_english_key(candidate):
        keys.add(trim(candidate))
        logger.debug("Added key %r from %s in %s", trim(candidate), source, where)
    else:
        logger.debug("Filtered candidate %r from %s in %s", candidate, source, where)


def _scan_sheet(sheet: Sheet, keys: set[str]) -> tuple[int, int]:
    """Scan formulas, values and formatted text. Returns (cells, formulas)."""
    cell_count = 0
    formula_count = 0
    for row, col, cell in sheet.iter_used_cells():
        if cell.is_blank:
            continue
        cell_count += 1
        where = f"{sheet.name}!{cell_address(row, col)}"

        if cell.formula:
            formula_count += 1
            for token in extract_formula_tokens(cell.formula):
                _accept(keys, token, "formula", where)

        if cell.value is not None:
            text = trim(stringify_value(cell.value))
            if text:
                _accept(keys, text, "value", where)

        if cell.formatted_text:
            _accept(keys, cell.formatted_text, "formatted text", where)

    return cell_count, formula_count


def _scan_header(sheet: Sheet, keys: set[str]) -> None:
    for cell in sheet.header_row():
        if isinstance(cell.value, str) and trim(cell.value):
            _accept(keys, trim(cell.value), "header", sheet.name)


def _scan_named_ranges(workbook: Workbook, keys: set[str]) -> None:
    for named in workbook.named_ranges or ():
        if named.name:
            _accept(keys, named.name, "named range", named.target or "workbook")


def extract_keys(workbook: Workbook) -> ExtractionResult:
    """Collect every English key in *workbook*.

    Sheets are visited in document order and cells row-major within the
    used range. The returned keys are distinct and sorted by code point.
    The workbook is not modified.
    """
    keys: set[str] = set()
    sheets_processed: list[str] = []
    total_cells = 0
    total_formulas = 0

    for sheet in workbook.sheets:
        cells, formulas = _scan_sheet(sheet, keys)
        _scan_header(sheet, keys)
        total_cells += cells
        total_formulas += formulas
        sheets_processed.append(sheet.name)
        logger.info(
            "Sheet %s: %d cells processed, %d formulas found", sheet.name, cells, formulas
        )

    _scan_named_ranges(workbook, keys)

    ordered = sorted(keys)
    preview = ", ".join(ordered[:KEYS_PREVIEW_COUNT])
    if len(ordered) > KEYS_PREVIEW_COUNT:
        preview += "..."
    logger.info("Found %d keys across %d sheets: %s", len(ordered), len(sheets_processed), preview)

    return ExtractionResult(
        keys=ordered,
        sheets_processed=sheets_processed,
        total_cells=total_cells,
        total_formulas=total_formulas,
    )
