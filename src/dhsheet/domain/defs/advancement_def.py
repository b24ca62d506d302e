"""Advancement definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AdvancementDef:
    """A level-up option and the number of advancement slots it consumes."""

    id: str
    name: str
    slot_cost: int
    min_tier: int
    order: int
