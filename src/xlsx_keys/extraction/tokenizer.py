"""Lexical scanning of formula text into raw key candidates.

Formulas are never evaluated. Each pattern in
:data:`~xlsx_keys.extraction.patterns.FORMULA_PATTERNS` scans the whole
formula independently and the matches are unioned, so one substring may be
proposed by several passes before duplicates collapse.
"""

from __future__ import annotations

from xlsx_keys.extraction.patterns import (
    ARABIC_SCRIPT_RUN,
    CELL_REFERENCE,
    FORMULA_PATTERNS,
    MIN_SCRIPT_RUN_LENGTH,
    NUMERIC_LITERAL,
    SPREADSHEET_FUNCTIONS,
)


def is_numeric(text: str) -> bool:
    """True for decimal/exponent literals such as ``42``, ``-1.5`` or ``1e3``."""
    return bool(NUMERIC_LITERAL.fullmatch(text))


def is_spreadsheet_function(text: str) -> bool:
    return text.upper() in SPREADSHEET_FUNCTIONS


def is_cell_reference(text: str) -> bool:
    """Letters followed by digits, e.g. ``A1`` or ``aa10``."""
    return bool(CELL_REFERENCE.fullmatch(text))


def strip_formula_prefix(formula: str) -> str:
    return formula[1:] if formula.startswith("=") else formula


def _keep_match(token: str) -> bool:
    return (
        len(token) > 1
        and not is_numeric(token)
        and not is_spreadsheet_function(token)
        and not is_cell_reference(token)
    )


def pattern_matches(formula: str) -> dict[str, list[str]]:
    """Raw group-1 matches per pattern name, before any filtering."""
    text = strip_formula_prefix(formula)
    return {
        name: [m.group(1) for m in pattern.finditer(text)] for name, pattern in FORMULA_PATTERNS
    }


def script_runs(formula: str) -> list[str]:
    """Arabic-script runs of at least three code points."""
    text = strip_formula_prefix(formula)
    return [
        m.group(0)
        for m in ARABIC_SCRIPT_RUN.finditer(text)
        if len(m.group(0)) >= MIN_SCRIPT_RUN_LENGTH
    ]


def extract_formula_tokens(formula: str) -> list[str]:
    """Return the distinct raw candidates found in *formula*.

    Order is first-seen: pattern order, then match order, with
    Arabic-script runs last. Script runs bypass the per-match filter; the
    key filter rejects them later.
    """
    tokens: dict[str, None] = {}
    for matches in pattern_matches(formula).values():
        for token in matches:
            if token and _keep_match(token):
                tokens.setdefault(token)
    for run in script_runs(formula):
        tokens.setdefault(run)
    return list(tokens)
