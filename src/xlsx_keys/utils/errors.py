"""Consistent error types and JSON error formatting."""

from __future__ import annotations

import functools
import json
import sys
from typing import Any


class KeyExtractorError(Exception):
    """Base error with structured JSON output."""

    def __init__(self, code: str, message: str, suggestions: list[str] | None = None):
        self.code = code
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "error": True,
            "code": self.code,
            "message": self.message,
        }
        if self.suggestions:
            result["suggestions"] = self.suggestions
        return result


class ExcelFileNotFoundError(KeyExtractorError):
    def __init__(self, path: str):
        super().__init__(
            "FILE_NOT_FOUND",
            f"The file '{path}' does not exist",
            ["Check the file path is correct", "Ensure the file has a supported extension"],
        )


class InvalidFormatError(KeyExtractorError):
    def __init__(self, path: str):
        super().__init__(
            "INVALID_FORMAT",
            f"'{path}' is not a supported spreadsheet file",
            ["Supported formats: .xlsx, .xlsm, .xlsb, .xls, .ods"],
        )


class MalformedWorkbookError(KeyExtractorError):
    def __init__(self, source: str, reason: str):
        super().__init__(
            "MALFORMED_WORKBOOK",
            f"'{source}' could not be parsed as a spreadsheet: {reason}",
            [
                "Make sure the file is a valid, uncorrupted spreadsheet",
                "Password-protected workbooks are not supported; remove the password first",
                "Re-save the file from your spreadsheet application and retry",
            ],
        )


class RangeTooLargeError(KeyExtractorError):
    def __init__(self, sheet: str, cells: int, limit: int):
        super().__init__(
            "RANGE_TOO_LARGE",
            f"Sheet '{sheet}' spans {cells:,} cells, above the limit of {limit:,}",
            [
                "Delete stray formatting far outside the data so the used range shrinks",
                "Raise the limit with --max-cells or 'xlsx-keys config --set-max-cells'",
            ],
        )


class MemoryExceededError(KeyExtractorError):
    def __init__(self, used_mb: float, limit_mb: float):
        super().__init__(
            "MEMORY_EXCEEDED",
            f"Memory usage {used_mb:.0f}MB exceeds limit {limit_mb:.0f}MB",
            ["Split the workbook into smaller files", "Lower --max-cells to fail earlier"],
        )


class InvalidConfigError(KeyExtractorError):
    def __init__(self, setting: str, value: Any):
        super().__init__(
            "INVALID_CONFIG",
            f"Invalid value for '{setting}': {value!r}",
            ["Use a positive integer", "Reset with 'xlsx-keys config --clear'"],
        )


def handle_error(func):
    """Decorator that catches KeyExtractorError and prints JSON to stdout."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyExtractorError as e:
            json.dump(e.to_dict(), sys.stdout, indent=2)
            sys.stdout.write("\n")
            raise SystemExit(1)

    return wrapper
