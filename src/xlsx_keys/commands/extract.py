"""Extract keys from a workbook and optionally write the ``<name>-keys.json`` export."""

import time
from datetime import datetime, timezone
from typing import Optional

import typer

from xlsx_keys.adapters.reader import read_workbook
from xlsx_keys.cli import app
from xlsx_keys.extraction.aggregator import extract_keys
from xlsx_keys.formatters.json_formatter import (
    build_export_payload,
    output_spreadsheet_data,
    relativize_path,
    should_include_meta,
    write_export,
)
from xlsx_keys.utils.config import get_max_cells, parse_max_cells
from xlsx_keys.utils.errors import handle_error
from xlsx_keys.utils.logging import configure_logging, get_logger
from xlsx_keys.utils.memory import check_memory
from xlsx_keys.utils.validation import file_size_human, validate_file

logger = get_logger(__name__)

EMPTY_RESULT_HINTS = [
    "The workbook may be empty",
    "Cells may hold only plain words, numbers, or non-Latin text",
    "Formulas may have been saved as values only",
    "Run with --verbose to see every filtered candidate on stderr",
]


@app.command()
@handle_error
def extract(
    file: str = typer.Argument(..., help="Path to the spreadsheet file"),
    save: bool = typer.Option(
        False, "--save", help="Write <name>-keys.json to the current directory"
    ),
    output_dir: Optional[str] = typer.Option(
        None, "--output-dir", "-o", help="Directory for <name>-keys.json (implies --save)"
    ),
    max_cells: Optional[int] = typer.Option(
        None, "--max-cells", help="Refuse sheets whose used range exceeds this many cells"
    ),
    keys_only: bool = typer.Option(
        False, "--keys-only", help="Print only the export payload {\"keys\": [...]}"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Trace every candidate decision on stderr"
    ),
) -> None:
    """Extract English keys from every sheet, formula and defined name.

    Keys are snake_case, camelCase, CONSTANT_CASE, kebab-case and
    dot.notation words, or words containing id/key/code/name/type/value.
    """
    configure_logging(verbose)
    path = validate_file(file)
    limit = parse_max_cells(max_cells, "--max-cells") if max_cells is not None else get_max_cells()

    start = time.perf_counter()
    workbook = read_workbook(path, max_cells=limit)
    check_memory()
    result = extract_keys(workbook)
    elapsed_ms = round((time.perf_counter() - start) * 1000, 1)

    output_file = None
    if save or output_dir:
        output_file = write_export(result, path.name, output_dir or ".")
        logger.info("Wrote %d keys to %s", len(result.keys), output_file)

    if keys_only:
        output_spreadsheet_data(build_export_payload(result))
        return

    report = {
        "source": path.name,
        "extracted_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "sheets": result.sheets_processed,
        "sheet_count": len(result.sheets_processed),
        "key_count": len(result.keys),
        "total_cells": result.total_cells,
        "total_formulas": result.total_formulas,
        "keys": result.keys,
        "extract_time_ms": elapsed_ms,
    }
    if should_include_meta():
        report["file_size"] = file_size_human(path)
    if result.is_empty:
        report["empty"] = True
        report["suggestions"] = EMPTY_RESULT_HINTS
    if output_file is not None:
        report["output_file"] = str(output_file)
        relativize_path(report)

    output_spreadsheet_data(report)
