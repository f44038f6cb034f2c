"""Run the key acceptance filter on literal candidates."""

from typing import List

import typer

from xlsx_keys.cli import app
from xlsx_keys.extraction.key_filter import explain_candidate
from xlsx_keys.formatters.json_formatter import output
from xlsx_keys.utils.errors import handle_error


@app.command()
@handle_error
def check(
    candidates: List[str] = typer.Argument(..., help="Strings to test as keys"),
) -> None:
    """Show whether each candidate would be reported as a key, and why."""
    results = []
    for candidate in candidates:
        accepted, reason = explain_candidate(candidate)
        results.append({"candidate": candidate, "accepted": accepted, "reason": reason})

    output(
        {
            "results": results,
            "accepted_count": sum(1 for r in results if r["accepted"]),
        }
    )
