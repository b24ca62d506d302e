"""Rules engine for character-sheet stat derivation and level-up validation."""
from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
