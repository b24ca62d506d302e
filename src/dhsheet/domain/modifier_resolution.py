"""Collects the modifiers that apply to a stat.

System modifiers come from equipped items, either from a structured
``modifiers`` list on the item definition or, for legacy items without one,
from phrases such as ``"+1 to Evasion"`` in the item's feature text. Manual
modifiers come from the character's ledger and are passed through as-is.
"""
from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import Iterable, Sequence

from dhsheet.domain.entities import Character, InventoryItem, Modifier, ModifierKey

LEGACY_ID_SUFFIX = "regex"


@dataclass(frozen=True, slots=True)
class StatTotal:
    total: int
    modifiers: list[Modifier]


def legacy_stat_pattern(stat: str) -> re.Pattern[str]:
    """Return the pattern matching ``<signed int> to|bonus to <stat>`` in item text."""
    words = [re.escape(part) for part in stat.split("_") if part]
    stat_pattern = r"\s+".join(words)
    return re.compile(rf"([+-]?\d+)\s+(?:to|bonus\s+to)\s+{stat_pattern}", re.IGNORECASE)


def resolve_system_modifiers(character: Character | None, stat: str) -> list[Modifier]:
    """Return system modifiers for ``stat`` from the character's equipped items."""
    if character is None:
        return []
    modifiers: list[Modifier] = []
    for item in character.equipped_items():
        if item.definition is None:
            continue
        if item.definition.modifiers is not None:
            modifiers.extend(_structured_modifiers(item, stat))
        else:
            modifiers.extend(_legacy_text_modifiers(item, stat))
    return modifiers


def _structured_modifiers(item: InventoryItem, stat: str) -> list[Modifier]:
    assert item.definition is not None and item.definition.modifiers is not None
    result: list[Modifier] = []
    for entry in item.definition.modifiers:
        if entry.target != stat:
            continue
        suffix = entry.id if entry.id else uuid.uuid4().hex
        result.append(
            Modifier(
                id=f"{item.id}-{suffix}",
                name=item.name,
                value=entry.value,
                source="system",
                key=ModifierKey(item_id=item.id, entry_id=entry.id),
            )
        )
    return result


def _legacy_text_modifiers(item: InventoryItem, stat: str) -> list[Modifier]:
    assert item.definition is not None
    texts = [
        text
        for text in (item.definition.feature_text, item.definition.feat_text)
        if text
    ]
    if not texts:
        return []
    pattern = legacy_stat_pattern(stat)
    # Every match from one item shares the same public id; duplicates collapse
    # when combined. ModifierKey keeps the matches distinguishable.
    return [
        Modifier(
            id=f"{item.id}-{LEGACY_ID_SUFFIX}",
            name=item.name,
            value=int(match.group(1)),
            source="system",
            key=ModifierKey(item_id=item.id, match_index=index),
        )
        for index, match in enumerate(pattern.finditer("\n".join(texts)))
    ]


def manual_modifiers(character: Character | None, stat: str) -> list[Modifier]:
    """Return the character's ledger entries for ``stat`` unchanged."""
    if character is None:
        return []
    return list(character.modifiers.get(stat, ()))


def combine_modifiers(*groups: Iterable[Modifier]) -> list[Modifier]:
    """Concatenate modifier groups and de-duplicate by id.

    A repeated id keeps the position of its first occurrence and the value
    of its last.
    """
    unique: dict[str, Modifier] = {}
    for group in groups:
        for modifier in group:
            unique[modifier.id] = modifier
    return list(unique.values())


def modifier_total(modifiers: Sequence[Modifier]) -> int:
    return sum(modifier.value for modifier in modifiers)


def stat_total(character: Character, stat: str, base: int) -> StatTotal:
    """Return ``base`` plus every distinct system and manual modifier for ``stat``."""
    combined = combine_modifiers(
        resolve_system_modifiers(character, stat),
        manual_modifiers(character, stat),
    )
    return StatTotal(total=base + modifier_total(combined), modifiers=combined)
