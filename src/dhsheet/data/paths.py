"""Helpers for resolving rule definition locations."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "DHSHEET_DEFINITIONS_PATH"


def get_package_root() -> Path:
    """Return the directory of the installed dhsheet package."""
    return Path(__file__).resolve().parents[1]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON rule definitions.

    An explicit ``base_path`` wins, then the ``DHSHEET_DEFINITIONS_PATH``
    environment variable, then the definitions shipped with the package.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_package_root() / "data" / "definitions"
