"""Persistent configuration for xlsx-keys (~/.xlsx-keys/config.json)."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from xlsx_keys.utils.constants import ENV_MAX_CELLS, MAX_CELLS
from xlsx_keys.utils.errors import InvalidConfigError

CONFIG_DIR = Path.home() / ".xlsx-keys"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config() -> dict[str, Any]:
    """Load config from disk. Returns empty dict if file missing."""
    if not CONFIG_FILE.exists():
        return {}
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (json.JSONDecodeError, OSError):
        return {}


def save_config(config: dict[str, Any]) -> None:
    """Write config to disk, creating directory if needed."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(config, indent=2) + "\n")


def parse_max_cells(value: Any, setting: str = "max_cells") -> int:
    """Coerce *value* to a positive cell limit or raise InvalidConfigError."""
    if isinstance(value, bool):
        raise InvalidConfigError(setting, value)
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise InvalidConfigError(setting, value) from None
    if limit <= 0:
        raise InvalidConfigError(setting, value)
    return limit


def get_max_cells() -> int:
    """Resolve the used-range cell limit. Priority: env var > config file > default."""
    env_value = os.environ.get(ENV_MAX_CELLS)
    if env_value:
        return parse_max_cells(env_value, ENV_MAX_CELLS)

    config = load_config()
    if "max_cells" in config:
        return parse_max_cells(config["max_cells"])

    return MAX_CELLS
