"""Character snapshot model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from dhsheet.core.types import ItemLocation

from .inventory import InventoryItem
from .modifier import Modifier
from .vitals import DamageThresholds, Vitals


@dataclass(frozen=True, slots=True)
class ClassData:
    """Class data joined onto a character record."""

    name: str | None = None
    starting_hp: int | None = None
    starting_evasion: int | None = None


@dataclass(frozen=True, slots=True)
class Experience:
    name: str
    value: int


@dataclass(frozen=True, slots=True)
class Character:
    """Read-only snapshot of a character as supplied by persistence."""

    level: int
    id: str = ""
    name: str = ""
    class_data: ClassData | None = None
    vitals: Vitals = field(default_factory=Vitals)
    damage_thresholds: DamageThresholds | None = None
    inventory: tuple[InventoryItem, ...] = ()
    modifiers: Mapping[str, tuple[Modifier, ...]] = field(default_factory=dict)
    proficiency: int = 1
    evasion: int | None = None
    experiences: tuple[Experience, ...] = ()
    domains: tuple[str, ...] = ()

    def equipped_items(self) -> list[InventoryItem]:
        return [item for item in self.inventory if item.is_equipped]

    def items_at(self, location: ItemLocation) -> list[InventoryItem]:
        return [item for item in self.inventory if item.location == location]
