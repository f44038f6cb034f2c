"""Format dispatch for the workbook readers."""

from __future__ import annotations

from pathlib import Path

from xlsx_keys.utils.constants import OPENXML_EXTENSIONS
from xlsx_keys.utils.validation import resolve_extension
from xlsx_keys.workbook import Workbook


def read_workbook(
    source: bytes | str | Path,
    *,
    filename: str | None = None,
    max_cells: int | None = None,
) -> Workbook:
    """Parse *source* (a path or raw bytes) into a :class:`Workbook`.

    The extension of *filename* (or of the path) selects the reader:
    openpyxl for .xlsx/.xlsm, fastexcel for .xls/.xlsb/.ods. Raw bytes
    without a filename are treated as .xlsx.
    """
    if isinstance(source, bytes):
        label = filename or "<bytes>"
        extension = resolve_extension(filename)
    else:
        label = filename or Path(source).name
        extension = resolve_extension(filename or str(source))

    if extension in OPENXML_EXTENSIONS:
        from xlsx_keys.adapters.openpyxl_adapter import read_openxml

        return read_openxml(source, label=label, max_cells=max_cells)

    from xlsx_keys.adapters.fastexcel_adapter import read_legacy

    return read_legacy(source, label=label, max_cells=max_cells)
