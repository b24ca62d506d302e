"""Shared type aliases for the core and domain layers."""
from typing import Literal

VitalKind = Literal["hit_points_current", "armor_slots", "stress_current", "hope_current"]
ItemLocation = Literal["equipped_primary", "equipped_secondary", "equipped_armor", "backpack"]
ModifierSource = Literal["system", "user"]
ModifierOperator = Literal["add", "subtract", "multiply", "divide", "set"]

EQUIPPED_LOCATIONS: frozenset[ItemLocation] = frozenset(
    {"equipped_primary", "equipped_secondary", "equipped_armor"}
)

__all__ = [
    "EQUIPPED_LOCATIONS",
    "ItemLocation",
    "ModifierOperator",
    "ModifierSource",
    "VitalKind",
]
