"""Display-text helpers for date, time and numeric cell values."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

# Regex to detect date-like number formats in Excel (contains year or day tokens)
_DATE_FORMAT_RE = re.compile(r"[yYdD]")

# Numbers in this magnitude range render without an exponent
_POSITIONAL_MIN = 1e-7
_POSITIONAL_MAX = 1e21


def is_date_format(number_format: str | None) -> bool:
    return bool(_DATE_FORMAT_RE.search(number_format or "General"))


def excel_serial_to_isodate(serial: float) -> str | None:
    """Convert an Excel serial number to an ISO date string.

    Returns date-only (``"2024-02-15"``) for whole numbers, or
    datetime (``"2024-02-15T14:30:00"``) when a fractional time
    component is present.  Returns ``None`` for NaN and non-positive values.
    """
    if serial != serial or serial <= 0:  # NaN check
        return None

    base = datetime(1899, 12, 30)
    int_part = int(serial)
    frac_part = serial - int_part

    dt = base + timedelta(days=int_part)

    if frac_part > 1e-9:
        # Has a time component
        dt = dt + timedelta(days=frac_part)
        return dt.strftime("%Y-%m-%dT%H:%M:%S")

    return dt.strftime("%Y-%m-%d")


def format_temporal(value: date | time | timedelta) -> str:
    """ISO text for date-like values; midnight datetimes collapse to the date."""
    if isinstance(value, datetime):
        if value.hour == 0 and value.minute == 0 and value.second == 0 and value.microsecond == 0:
            return value.strftime("%Y-%m-%d")
        return value.isoformat()
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def format_number(value: int | float) -> str:
    """Shortest text for a number, as a browser would show it.

    ``42`` for ``42.0`` and ``0.00001`` rather than ``1e-05``. Exponent form
    is kept only outside ``1e-7 <= |x| < 1e21`` and reads ``1e-8``/``1e+21``.
    """
    if isinstance(value, float):
        if value != value:
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0:
            return "0"
        if not _POSITIONAL_MIN <= abs(value) < _POSITIONAL_MAX:
            mantissa, _, exponent = repr(value).partition("e")
            return f"{mantissa}e{int(exponent):+d}"
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def display_text(value: Any, number_format: str | None = None) -> str | None:
    """Approximate the text a spreadsheet application shows for *value*.

    Booleans render as ``TRUE``/``FALSE``; serial numbers under a date
    format render as ISO dates. Returns None for empty cells.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (datetime, date, time, timedelta)):
        return format_temporal(value)
    if isinstance(value, (int, float)):
        if number_format and number_format != "General" and is_date_format(number_format):
            iso = excel_serial_to_isodate(float(value))
            if iso is not None:
                return iso
        return format_number(value)
    return str(value)
