"""Tier definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TierDef:
    """A contiguous band of character levels.

    ``achievement_level`` is the level at which the tier's achievements are
    granted (``None`` for the starting tier).
    """

    tier: int
    min_level: int
    max_level: int
    achievement_level: int | None = None
    clears_marked_traits: bool = False

    def contains(self, level: int) -> bool:
        return self.min_level <= level <= self.max_level
