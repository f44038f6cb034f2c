"""Show the raw tokens the formula scanner proposes for one formula."""

import typer

from xlsx_keys.cli import app
from xlsx_keys.extraction.key_filter import is_english_key, trim
from xlsx_keys.extraction.tokenizer import extract_formula_tokens, pattern_matches
from xlsx_keys.formatters.json_formatter import output
from xlsx_keys.utils.errors import handle_error


@app.command()
@handle_error
def tokenize(
    formula: str = typer.Argument(..., help="Formula text, with or without the leading '='"),
    by_pattern: bool = typer.Option(
        False, "--by-pattern", help="Include unfiltered matches of each scanning pass"
    ),
) -> None:
    """Tokenize a formula and report which tokens are keys."""
    tokens = extract_formula_tokens(formula)
    result = {
        "formula": formula,
        "tokens": tokens,
        "keys": sorted({trim(t) for t in tokens if is_english_key(t)}),
    }
    if by_pattern:
        result["patterns"] = pattern_matches(formula)
    output(result)
