"""JSON output formatting and the keys export payload."""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Any

from xlsx_keys.extraction.aggregator import ExtractionResult
from xlsx_keys.utils.constants import EXPORT_FALLBACK_NAME, EXPORT_SUFFIX

# Module-level flag toggled by the global --no-meta CLI option
_suppress_meta: bool = False

# One trailing extension, never crossing a directory separator
_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def set_suppress_meta(value: bool) -> None:
    """Toggle metadata suppression (called by the --no-meta global callback)."""
    global _suppress_meta
    _suppress_meta = value


def should_include_meta() -> bool:
    return not _suppress_meta


def output(data: dict[str, Any]) -> None:
    """Print a dict as JSON to stdout."""
    json.dump(data, sys.stdout, indent=2, default=_serialise, ensure_ascii=False)
    sys.stdout.write("\n")


def output_spreadsheet_data(data: dict[str, Any]) -> None:
    """Output spreadsheet-sourced content, tagged as untrusted external data.

    Keys are copied verbatim out of the workbook, so a consumer feeding them
    to another tool gets per-call provenance via ``_data_origin``. The tag is
    dropped when ``--no-meta`` is active.
    """
    if _suppress_meta:
        output(data)
    else:
        output({"_data_origin": "untrusted_spreadsheet", **data})


def build_export_payload(result: ExtractionResult) -> dict[str, list[str]]:
    """The document written to ``<name>-keys.json``: only the sorted keys."""
    return {"keys": list(result.keys)}


def export_filename(source_name: str | None) -> str:
    """``report.xlsx`` -> ``report-keys.json``; a missing base becomes ``excel-keys``."""
    base = _EXTENSION_RE.sub("", Path(source_name).name) if source_name else ""
    return f"{base or EXPORT_FALLBACK_NAME}{EXPORT_SUFFIX}"


def write_export(
    result: ExtractionResult,
    source_name: str | None,
    directory: str | Path = ".",
) -> Path:
    """Write the export payload as UTF-8 JSON and return the written path."""
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / export_filename(source_name)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(build_export_payload(result), f, indent=2, ensure_ascii=False)
        f.write("\n")
    return target


def relativize_path(result: dict[str, Any], key: str = "output_file") -> dict[str, Any]:
    """Convert an absolute path to a concise relative path for JSON output."""
    if key in result and result[key]:
        p = Path(result[key])
        if p.is_absolute():
            try:
                result[key] = str(p.relative_to(Path.cwd()))
            except ValueError:
                result[key] = str(p)
    return result


def _serialise(obj: Any) -> Any:
    """Handle non-standard types during JSON serialisation."""
    import datetime

    if isinstance(obj, datetime.datetime):
        return obj.isoformat()
    if isinstance(obj, datetime.date):
        return obj.isoformat()
    if isinstance(obj, Path):
        return str(obj)
    return str(obj)
