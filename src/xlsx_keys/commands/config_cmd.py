"""Manage persistent xlsx-keys settings."""

from __future__ import annotations

from typing import Optional

import typer

from xlsx_keys.cli import app
from xlsx_keys.formatters.json_formatter import output
from xlsx_keys.utils.errors import handle_error


@app.command(name="config")
@handle_error
def config_cmd(
    show: bool = typer.Option(False, "--show", help="Print current settings (the default)"),
    set_max_cells: Optional[int] = typer.Option(
        None, "--set-max-cells", help="Save the used-range cell limit"
    ),
    clear: bool = typer.Option(False, "--clear", help="Remove all saved settings"),
) -> None:
    """Show or change settings stored in ~/.xlsx-keys/config.json.

    The XLSX_KEYS_MAX_CELLS environment variable overrides the saved limit.
    """
    from xlsx_keys.utils.config import (
        CONFIG_FILE,
        get_max_cells,
        load_config,
        parse_max_cells,
        save_config,
    )

    if set_max_cells is not None:
        config = load_config()
        config["max_cells"] = parse_max_cells(set_max_cells)
        save_config(config)
    elif clear:
        save_config({})

    output(
        {
            "config_file": str(CONFIG_FILE),
            "settings": load_config(),
            "effective_max_cells": get_max_cells(),
        }
    )
