"""Extracts stat modifiers from free-text item and feature descriptions."""
from __future__ import annotations

import re
import uuid

from dhsheet.domain.entities import TextModifier

STAT_MODIFIER_PATTERN = re.compile(
    r"([+-]?\d+)\s+(?:to|bonus\s+to)\s+"
    r"(Agility|Strength|Finesse|Instinct|Presence|Knowledge|Evasion|Armor|Hit\s+Points|Stress|Hope|Proficiency)",
    re.IGNORECASE,
)
_SEGMENT_SEPARATORS = re.compile(r"[;\n]")

_STAT_ALIASES = {
    "hit_points": "hp",
    "armor_score": "armor",
}


def parse_modifier_text(text: str | None) -> list[TextModifier]:
    """Return one modifier per ``;``/newline separated segment naming a stat.

    ``"+1 to Evasion; -1 to Agility"`` yields an evasion ``add`` and an
    agility ``subtract``.
    """
    if not text:
        return []
    modifiers: list[TextModifier] = []
    for segment in _SEGMENT_SEPARATORS.split(text):
        clean_segment = segment.strip()
        if not clean_segment:
            continue
        match = STAT_MODIFIER_PATTERN.search(clean_segment)
        if match is None:
            continue
        value = int(match.group(1))
        raw_stat = re.sub(r"\s+", "_", match.group(2).lower())
        modifiers.append(
            TextModifier(
                id=str(uuid.uuid4()),
                kind="stat",
                target=_STAT_ALIASES.get(raw_stat, raw_stat),
                value=value,
                operator="add" if value >= 0 else "subtract",
                description=clean_segment,
            )
        )
    return modifiers
