"""Shared validation helpers for file paths and cell coordinates."""

from __future__ import annotations

import os
from pathlib import Path

from xlsx_keys.utils.constants import DEFAULT_EXTENSION, EXCEL_EXTENSIONS
from xlsx_keys.utils.errors import ExcelFileNotFoundError, InvalidFormatError


def validate_file(filepath: str) -> Path:
    """Validate that the file exists and has a supported extension. Returns resolved Path."""
    p = Path(filepath).resolve()
    if not p.exists():
        raise ExcelFileNotFoundError(filepath)
    if p.suffix.lower() not in EXCEL_EXTENSIONS:
        raise InvalidFormatError(filepath)
    return p


def resolve_extension(filename: str | None) -> str:
    """Lower-cased extension used as the reader's format hint.

    A missing name or a name without a suffix falls back to ``.xlsx``.
    Unknown suffixes raise InvalidFormatError.
    """
    if not filename:
        return DEFAULT_EXTENSION
    suffix = Path(filename).suffix.lower()
    if not suffix:
        return DEFAULT_EXTENSION
    if suffix not in EXCEL_EXTENSIONS:
        raise InvalidFormatError(filename)
    return suffix


def file_size_bytes(filepath: str | Path) -> int:
    """Return file size in bytes."""
    return os.path.getsize(filepath)


def human_size(size: int) -> str:
    """Return a byte count as a human-readable string (e.g. '107.7 KB', '76.2 MB')."""
    if size < 1024:
        return f"{size} B"
    elif size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    elif size < 1024 * 1024 * 1024:
        return f"{size / (1024 * 1024):.1f} MB"
    return f"{size / (1024 * 1024 * 1024):.1f} GB"


def file_size_human(filepath: str | Path) -> str:
    return human_size(file_size_bytes(filepath))


def index_to_col_letter(index: int) -> str:
    """Convert 0-based index to Excel column letter(s). 0=A, 25=Z, 26=AA."""
    result = ""
    idx = index + 1
    while idx > 0:
        idx, remainder = divmod(idx - 1, 26)
        result = chr(65 + remainder) + result
    return result


def cell_address(row: int, col: int) -> str:
    """A1-style address for 0-based *row* and *col*."""
    return f"{index_to_col_letter(col)}{row + 1}"
