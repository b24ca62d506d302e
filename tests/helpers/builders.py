from __future__ import annotations

from typing import Mapping, Sequence

from dhsheet.domain.entities import (
    Character,
    ClassData,
    InventoryItem,
    ItemDefinition,
    ItemModifier,
    Modifier,
    Vitals,
)


def make_armor(
    item_id: str = "armor1",
    *,
    base_score: str | None = None,
    base_thresholds: str | None = None,
    modifiers: Sequence[ItemModifier] | None = None,
    location: str = "equipped_armor",
) -> InventoryItem:
    return InventoryItem(
        id=item_id,
        name=f"Armor {item_id}",
        location=location,
        definition=ItemDefinition(
            base_score=base_score,
            base_thresholds=base_thresholds,
            modifiers=tuple(modifiers) if modifiers is not None else None,
        ),
    )


def make_item(
    item_id: str,
    name: str,
    location: str,
    *,
    modifiers: Sequence[ItemModifier] | None = None,
    feat_text: str | None = None,
    feature_text: str | None = None,
) -> InventoryItem:
    return InventoryItem(
        id=item_id,
        name=name,
        location=location,
        definition=ItemDefinition(
            modifiers=tuple(modifiers) if modifiers is not None else None,
            feat_text=feat_text,
            feature_text=feature_text,
        ),
    )


def user_mod(mod_id: str, value: int, name: str = "Manual") -> Modifier:
    return Modifier(id=mod_id, name=name, value=value, source="user")


def system_mod(mod_id: str, value: int, name: str = "Item") -> Modifier:
    return Modifier(id=mod_id, name=name, value=value, source="system")


def make_character(
    *,
    level: int = 1,
    inventory: Sequence[InventoryItem] = (),
    modifiers: Mapping[str, Sequence[Modifier]] | None = None,
    vitals: Vitals | None = None,
    class_data: ClassData | None = None,
    proficiency: int = 1,
) -> Character:
    return Character(
        id="char1",
        name="Test Character",
        level=level,
        class_data=class_data,
        vitals=vitals or Vitals(),
        inventory=tuple(inventory),
        modifiers={stat: tuple(mods) for stat, mods in (modifiers or {}).items()},
        proficiency=proficiency,
    )
