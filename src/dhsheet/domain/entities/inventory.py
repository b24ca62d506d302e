"""Inventory item models."""
from __future__ import annotations

from dataclasses import dataclass

from dhsheet.core.types import EQUIPPED_LOCATIONS


@dataclass(frozen=True, slots=True)
class ItemModifier:
    """Structured modifier entry declared by an item definition."""

    id: str | None
    target: str
    value: int


@dataclass(frozen=True, slots=True)
class ItemDefinition:
    """Library data joined onto an inventory entry.

    ``modifiers`` is ``None`` when the item predates structured modifiers;
    those items are scanned for legacy text instead.
    """

    base_score: str | None = None
    base_thresholds: str | None = None
    modifiers: tuple[ItemModifier, ...] | None = None
    feat_text: str | None = None
    feature_text: str | None = None
    damage: str | None = None


@dataclass(frozen=True, slots=True)
class InventoryItem:
    id: str
    name: str
    location: str
    definition: ItemDefinition | None = None

    @property
    def is_equipped(self) -> bool:
        return self.location in EQUIPPED_LOCATIONS
