"""Vital and damage-threshold models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vitals:
    """Current and maximum values of every tracked vital."""

    hit_points_current: int = 6
    hit_points_max: int = 6
    armor_slots: int = 0
    armor_score: int = 0
    stress_current: int = 0
    stress_max: int = 6
    hope_current: int = 2
    hope_max: int = 6


@dataclass(frozen=True, slots=True)
class DamageThresholds:
    minor: int
    major: int
    severe: int
