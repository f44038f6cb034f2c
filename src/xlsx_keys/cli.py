"""Main CLI entry point for xlsx-keys."""

from __future__ import annotations

from typing import Optional

import typer

from xlsx_keys import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"xlsx-keys {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="xlsx-keys",
    help="Extract identifier-like keys from spreadsheet cells and formulas.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    no_meta: bool = typer.Option(
        False,
        "--no-meta",
        help="Omit the _data_origin provenance tag from spreadsheet-derived output.",
    ),
) -> None:
    """Extract identifier-like keys from spreadsheet cells and formulas."""
    from xlsx_keys.formatters.json_formatter import set_suppress_meta

    set_suppress_meta(no_meta)


def _register_commands() -> None:
    """Import and register all command modules."""
    from xlsx_keys.commands import (
        check,  # noqa: F401
        config_cmd,  # noqa: F401
        extract,  # noqa: F401
        tokenize,  # noqa: F401
    )


_register_commands()
