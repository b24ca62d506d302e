"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

from dhsheet.data.paths import DEFINITIONS_ENV_VAR

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "dhsheet"
        return Path.home() / "dhsheet"
    return Path.home() / ".config" / "dhsheet"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_definitions_path(value: object) -> str:
    return value if isinstance(value, str) else ""


def _defaults() -> Dict[str, str]:
    return {"log_level": _DEFAULT_LOG_LEVEL, "definitions_path": ""}


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults.

    ``DHSHEET_DEFINITIONS_PATH`` overrides the stored definitions path.
    """
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        raw = {}
    if not isinstance(raw, dict):
        raw = {}
    config = _defaults()
    config["log_level"] = _normalize_log_level(raw.get("log_level"))
    config["definitions_path"] = _normalize_definitions_path(raw.get("definitions_path"))
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        config["definitions_path"] = override
    return config


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "log_level": _normalize_log_level(config.get("log_level")),
        "definitions_path": _normalize_definitions_path(config.get("definitions_path")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(config: Dict[str, str]) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=getattr(logging, _normalize_log_level(config.get("log_level"))),
        format="%(levelname)s %(name)s: %(message)s",
    )
