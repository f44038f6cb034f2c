"""The acceptance predicate deciding whether a candidate is an English key."""

from __future__ import annotations

from typing import Any

from xlsx_keys.extraction.patterns import (
    ALL_DIGITS,
    ASCII_LETTER,
    CAMEL_CASE_PREFIX,
    CONSTANT_CASE,
    EDGE_SPACE,
    KEY_CHARSET,
    SEMANTIC_SUBSTRINGS,
    WORD_WITH_DIGITS,
)
from xlsx_keys.extraction.tokenizer import is_cell_reference, is_numeric, is_spreadsheet_function

# Rejection reasons, in evaluation order
REJECT_EMPTY = "empty"
REJECT_CHARSET = "charset"
REJECT_TOO_SHORT = "too_short"
REJECT_NO_LETTER = "no_letter"
REJECT_NUMERIC = "numeric"
REJECT_FUNCTION = "spreadsheet_function"
REJECT_CELL_REFERENCE = "cell_reference"
REJECT_NO_SHAPE = "no_key_shape"


def trim(text: str) -> str:
    """Strip surrounding whitespace, byte-order marks included."""
    return EDGE_SPACE.sub("", text)


def _rejection(candidate: Any) -> str | None:
    if not candidate or not isinstance(candidate, str):
        return REJECT_EMPTY
    text = trim(candidate)
    if not KEY_CHARSET.fullmatch(text):
        return REJECT_CHARSET
    if len(text) < 2:
        return REJECT_TOO_SHORT
    if not ASCII_LETTER.search(text):
        return REJECT_NO_LETTER
    # Exponent and Infinity literals carry letters
    if ALL_DIGITS.fullmatch(text) or is_numeric(text):
        return REJECT_NUMERIC
    if is_spreadsheet_function(text):
        return REJECT_FUNCTION
    if is_cell_reference(text):
        return REJECT_CELL_REFERENCE
    return None


def _key_shape(text: str) -> str | None:
    """Name of the first acceptance rule *text* satisfies."""
    if "_" in text:
        return "snake_case"
    if "-" in text:
        return "kebab-case"
    if "." in text:
        return "dot.notation"
    if CONSTANT_CASE.fullmatch(text):
        return "CONSTANT_CASE"
    if CAMEL_CASE_PREFIX.match(text):
        return "camelCase"
    if WORD_WITH_DIGITS.fullmatch(text):
        return "word_with_digits"
    lowered = text.lower()
    for word in SEMANTIC_SUBSTRINGS:
        if word in lowered:
            return f"contains:{word}"
    return None


def is_english_key(candidate: Any) -> bool:
    """Return True when *candidate* passes every rejection rule and has a key shape.

    Accepts snake_case, kebab-case, dot.notation, CONSTANT_CASE, camelCase,
    word-plus-digits, and words containing id/key/code/name/type/value.
    Anything outside ASCII letters, digits, ``_``, ``-`` and ``.`` is
    rejected, which excludes non-Latin scripts.
    """
    if _rejection(candidate) is not None:
        return False
    return _key_shape(trim(candidate)) is not None


def explain_candidate(candidate: Any) -> tuple[bool, str]:
    """Return ``(accepted, reason)`` where reason names the deciding rule."""
    reason = _rejection(candidate)
    if reason is not None:
        return False, reason
    shape = _key_shape(trim(candidate))
    if shape is None:
        return False, REJECT_NO_SHAPE
    return True, shape
