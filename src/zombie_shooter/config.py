"""User config: character choice, tuning overrides and debug options."""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from .entities_constants import CharacterType

APP_NAME = "ZombieShooter"
CONFIG_FILENAME = "config.json"

DEFAULT_CONFIG: dict[str, Any] = {
    "character": CharacterType.BALANCED.value,
    "tuning": {},
    "debug": {"log_level": "WARNING"},
}


def user_config_path() -> Path:
    return Path(user_config_dir(APP_NAME, APP_NAME)) / CONFIG_FILENAME


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated by ``override``; nested dicts merge key by key."""
    merged = deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = deepcopy(val)
    return merged


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    loaded = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(loaded, dict):
        raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
    return loaded


def load_config(path: Path | None = None) -> tuple[dict[str, Any], Path]:
    """Load the user config over the defaults.

    A missing file yields the defaults. An unreadable or malformed file is
    reported and the defaults are used instead.
    """
    config_path = path or user_config_path()
    try:
        user_config = _read_config_file(config_path)
    except (OSError, ValueError) as exc:
        print(f"Failed to load config ({config_path}): {exc}")
        user_config = {}
    return _deep_merge(DEFAULT_CONFIG, user_config), config_path


def save_config(config: dict[str, Any], path: Path | None = None) -> None:
    config_path = path or user_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except (OSError, TypeError) as exc:
        print(f"Failed to save config ({config_path}): {exc}")


def configured_character(config: dict[str, Any]) -> CharacterType:
    """Return the character type named in config, defaulting to balanced."""
    raw = config.get("character", DEFAULT_CONFIG["character"])
    try:
        return CharacterType(str(raw).lower())
    except ValueError:
        print(f"Unknown character '{raw}' in config, using balanced")
        return CharacterType.BALANCED


def configured_log_level(config: dict[str, Any], *, verbose: bool = False) -> int:
    """Map ``debug.log_level`` to a logging level; ``verbose`` forces DEBUG."""
    if verbose:
        return logging.DEBUG
    debug = config.get("debug")
    name = debug.get("log_level", "WARNING") if isinstance(debug, dict) else "WARNING"
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        print(f"Unknown log level '{name}' in config, using WARNING")
        return logging.WARNING
    return level
