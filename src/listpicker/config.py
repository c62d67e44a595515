# -*- coding: utf-8 -*-
"""Settings loading and validation."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

from listpicker.constants import (
    DEFAULT_KEYMAP,
    DEFAULT_SETTINGS_FILE,
    MAIN_ROW_COUNT,
    PHYSICAL_BUTTONS,
    SETTINGS_ENV_VAR,
)
from listpicker.utils.file_utils import read_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "display": {"row_count": MAIN_ROW_COUNT, "fullscreen": False},
    "logging": {"level": "WARNING", "log_dir": ""},
    "keymap": deepcopy(DEFAULT_KEYMAP),
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: Mapping[str, str]) -> dict[str, Any]:
    """Apply LISTPICKER_* overrides to the runtime config."""
    merged = deepcopy(config)
    row_count = env_values.get("LISTPICKER_ROW_COUNT", "").strip()
    log_level = env_values.get("LISTPICKER_LOG_LEVEL", "").strip()
    log_dir = env_values.get("LISTPICKER_LOG_DIR", "").strip()

    if row_count:
        try:
            merged["display"]["row_count"] = int(row_count)
        except ValueError as exc:
            raise ConfigError(f"LISTPICKER_ROW_COUNT must be an integer, got {row_count!r}") from exc
    if log_level:
        merged["logging"]["level"] = log_level.upper()
    if log_dir:
        merged["logging"]["log_dir"] = log_dir
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the picker relies on."""
    row_count = config.get("display", {}).get("row_count")
    if isinstance(row_count, bool) or not isinstance(row_count, int) or not (2 <= row_count <= 64):
        raise ConfigError("display.row_count must be an int in range 2..64")

    level = config.get("logging", {}).get("level")
    if level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")

    keymap = config.get("keymap")
    if not isinstance(keymap, dict):
        raise ConfigError("keymap must be an object")
    for button, keys in keymap.items():
        if button not in PHYSICAL_BUTTONS:
            raise ConfigError(f"keymap: unknown button {button!r}")
        if not isinstance(keys, list) or not all(isinstance(key, str) for key in keys):
            raise ConfigError(f"keymap.{button} must be a list of key names")


def settings_path(path: str | Path | None = None) -> Path:
    raw = path or os.environ.get(SETTINGS_ENV_VAR) or DEFAULT_SETTINGS_FILE
    return Path(raw).expanduser()


def load_config(path: str | Path | None = None, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Load settings JSON, merge into defaults and apply env overrides."""
    config_path = settings_path(path)
    env_values = _load_env_file(config_path.parent / ".env")
    env_values.update(os.environ if environ is None else environ)

    merged = get_default_config()
    if config_path.exists():
        try:
            loaded = read_json_file(config_path)
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Invalid settings file {config_path}: {exc}") from exc
        merged = _deep_merge(merged, loaded)
        logging.getLogger(__name__).debug("Settings loaded from %s", config_path)

    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged
