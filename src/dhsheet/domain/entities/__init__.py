"""Runtime entity exports."""

from .character import Character, ClassData, Experience
from .inventory import InventoryItem, ItemDefinition, ItemModifier
from .modifier import Modifier, ModifierKey, TextModifier
from .vitals import DamageThresholds, Vitals

__all__ = [
    "Character",
    "ClassData",
    "DamageThresholds",
    "Experience",
    "InventoryItem",
    "ItemDefinition",
    "ItemModifier",
    "Modifier",
    "ModifierKey",
    "TextModifier",
    "Vitals",
]
