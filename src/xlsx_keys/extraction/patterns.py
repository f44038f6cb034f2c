"""Compiled patterns and closed word lists shared by the tokenizer and key filter."""

from __future__ import annotations

import re

# Common spreadsheet functions that must never be reported as keys.
# TRUE/FALSE are functions too and otherwise pass the CONSTANT_CASE shape.
SPREADSHEET_FUNCTIONS = frozenset(
    {
        "SUM",
        "COUNT",
        "AVERAGE",
        "MAX",
        "MIN",
        "IF",
        "AND",
        "OR",
        "NOT",
        "VLOOKUP",
        "HLOOKUP",
        "INDEX",
        "MATCH",
        "CONCATENATE",
        "LEFT",
        "RIGHT",
        "MID",
        "LEN",
        "TRIM",
        "UPPER",
        "LOWER",
        "FIND",
        "SUBSTITUTE",
        "TEXT",
        "VALUE",
        "DATE",
        "TODAY",
        "NOW",
        "YEAR",
        "MONTH",
        "DAY",
        "WEEKDAY",
        "TRUE",
        "FALSE",
    }
)

# Substrings that mark a word as a key regardless of its shape.
SEMANTIC_SUBSTRINGS = ("key", "id", "code", "name", "type", "value")

# ---------------------------------------------------------------------------
# Formula tokenizer passes (each captures group 1)
# ---------------------------------------------------------------------------

_A = re.ASCII

FORMULA_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("double_quoted", re.compile(r'"([^"]+)"')),
    ("single_quoted", re.compile(r"'([^']+)'")),
    ("function_call", re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\s*\(", _A)),
    ("identifier", re.compile(r"\b([A-Za-z][A-Za-z0-9_\-.]*[A-Za-z0-9])\b", _A)),
    ("sheet_reference", re.compile(r"'([^'!]+)'!")),
    ("constant", re.compile(r"\b([A-Z_][A-Z0-9_]*)\b", _A)),
    ("camel_case", re.compile(r"\b([a-z][a-zA-Z0-9]*[A-Z][a-zA-Z0-9]*)\b", _A)),
)

# Arabic, Arabic Supplement, Arabic Extended-A, Presentation Forms A and B
ARABIC_SCRIPT_RUN = re.compile(
    r"[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]+"
)
MIN_SCRIPT_RUN_LENGTH = 3

# ---------------------------------------------------------------------------
# Candidate shapes
# ---------------------------------------------------------------------------

CELL_REFERENCE = re.compile(r"[A-Z]+[0-9]+", re.ASCII | re.IGNORECASE)
NUMERIC_LITERAL = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity)\s*", re.ASCII
)

# Whitespace as a browser trims it, U+FEFF included
EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

KEY_CHARSET = re.compile(r"[a-zA-Z0-9_\-.]+")
ASCII_LETTER = re.compile(r"[a-zA-Z]")
ALL_DIGITS = re.compile(r"[0-9]+")

CONSTANT_CASE = re.compile(r"[A-Z_][A-Z0-9_]*")
CAMEL_CASE_PREFIX = re.compile(r"[a-z]+[A-Z]")
WORD_WITH_DIGITS = re.compile(r"[A-Za-z]+[0-9]+")
