"""Reads rule-definition JSON files for the repositories."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """Return the decoded contents of the rule table at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Rule definition file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Cannot read rule definition file {path}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(
            f"Rule definition file {path} is not valid JSON (line {exc.lineno}): {exc.msg}"
        ) from exc
