"""Derives armor, hit point, stress and threshold values from a character.

Every function here is pure: inputs are read, new values are returned and
the character snapshot is never modified.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Sequence

from dhsheet.data.rules_loader import default_rule_set
from dhsheet.domain.entities import Character, DamageThresholds, InventoryItem, Modifier, Vitals
from dhsheet.domain.modifier_resolution import (
    combine_modifiers,
    manual_modifiers,
    modifier_total,
    resolve_system_modifiers,
)
from dhsheet.domain.rule_set import RuleSet

logger = logging.getLogger(__name__)

ARMOR_SCORE_CAP = 12
BASE_STRESS = 6
BASE_HOPE = 6
DEFAULT_CLASS_HP = 6
DEFAULT_EVASION = 10
MIN_CAPACITY = 1
MINOR_THRESHOLD = 1

ARMOR_STAT = "armor"
HIT_POINTS_STAT = "hit_points"
STRESS_STAT = "stress"
THRESHOLDS_STAT = "damage_thresholds"
EVASION_STAT = "evasion"
HOPE_STAT = "hope"
PROFICIENCY_STAT = "proficiency"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_THRESHOLD_PART = re.compile(r"\s*([+-]?\d+)\s*")


@dataclass(frozen=True, slots=True)
class DerivedStats:
    vitals: Vitals
    damage_thresholds: DamageThresholds


def parse_base_score(raw: object) -> int:
    """Return the leading integer of an armor base score, or 0."""
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return 0
    match = _LEADING_INT.match(raw)
    if match is None:
        logger.debug("Ignoring unparseable armor base score %r", raw)
        return 0
    return int(match.group(1))


def parse_base_thresholds(raw: object) -> tuple[int, int] | None:
    """Parse a ``"major/severe"`` string; ``None`` when it is absent or malformed."""
    if not isinstance(raw, str) or not raw:
        return None
    parts = raw.split("/")
    if len(parts) != 2:
        logger.debug("Ignoring malformed base thresholds %r", raw)
        return None
    major_match = _THRESHOLD_PART.fullmatch(parts[0])
    severe_match = _THRESHOLD_PART.fullmatch(parts[1])
    if major_match is None or severe_match is None:
        logger.debug("Ignoring malformed base thresholds %r", raw)
        return None
    return int(major_match.group(1)), int(severe_match.group(1))


def armor_score(
    equipped_armor: Sequence[InventoryItem],
    system_mods: Sequence[Modifier],
    user_mods: Sequence[Modifier],
) -> int:
    """Base score of the worn armor plus modifiers, capped at 12.

    Negative totals are not floored.
    """
    score = sum(
        parse_base_score(item.definition.base_score)
        for item in equipped_armor
        if item.definition is not None
    )
    score += modifier_total([mod for mod in system_mods if mod.source == "system"])
    score += modifier_total(user_mods)
    return min(score, ARMOR_SCORE_CAP)


def damage_thresholds(
    level: int,
    equipped_armor: Sequence[InventoryItem],
    threshold_mods: Sequence[Modifier],
) -> DamageThresholds:
    """Unarmored thresholds are ``1 / level / level * 2``.

    The first armor with well-formed base thresholds replaces major and
    severe with ``base + level``. Threshold modifiers apply to major and
    severe only.
    """
    major = level
    severe = level * 2
    for item in equipped_armor:
        if item.definition is None:
            continue
        parsed = parse_base_thresholds(item.definition.base_thresholds)
        if parsed is not None:
            base_major, base_severe = parsed
            major = base_major + level
            severe = base_severe + level
            break
    bonus = modifier_total(threshold_mods)
    return DamageThresholds(minor=MINOR_THRESHOLD, major=major + bonus, severe=severe + bonus)


def max_hp(
    class_base_hp: int,
    system_mods: Sequence[Modifier],
    user_mods: Sequence[Modifier],
) -> int:
    total = class_base_hp
    total += modifier_total([mod for mod in system_mods if mod.source == "system"])
    total += modifier_total(user_mods)
    return max(total, MIN_CAPACITY)


def max_stress(system_mods: Sequence[Modifier], user_mods: Sequence[Modifier]) -> int:
    total = BASE_STRESS
    total += modifier_total([mod for mod in system_mods if mod.source == "system"])
    total += modifier_total(user_mods)
    return max(total, MIN_CAPACITY)


def class_starting_hp(character: Character) -> int:
    if character.class_data is not None and character.class_data.starting_hp:
        return character.class_data.starting_hp
    return DEFAULT_CLASS_HP


def derive_stats(
    character: Character,
    armor_mods: Sequence[Modifier],
    hp_mods: Sequence[Modifier],
    stress_mods: Sequence[Modifier],
    threshold_mods: Sequence[Modifier],
) -> DerivedStats:
    """Recompute capacities and clamp current values down into them.

    Current values only ever shrink: a larger maximum does not restore
    armor slots, hit points or stress.
    """
    equipped_armor = character.items_at("equipped_armor")
    new_armor_score = armor_score(
        equipped_armor, armor_mods, manual_modifiers(character, ARMOR_STAT)
    )
    new_max_hp = max_hp(
        class_starting_hp(character), hp_mods, manual_modifiers(character, HIT_POINTS_STAT)
    )
    new_max_stress = max_stress(stress_mods, manual_modifiers(character, STRESS_STAT))
    thresholds = damage_thresholds(character.level, equipped_armor, threshold_mods)

    current = character.vitals
    vitals = replace(
        current,
        armor_score=new_armor_score,
        armor_slots=min(current.armor_slots, new_armor_score),
        hit_points_max=new_max_hp,
        hit_points_current=min(current.hit_points_current, new_max_hp),
        stress_max=new_max_stress,
        stress_current=min(current.stress_current, new_max_stress),
    )
    return DerivedStats(vitals=vitals, damage_thresholds=thresholds)


def derive_character_stats(character: Character) -> DerivedStats:
    """Resolve the character's item modifiers and derive its stats."""
    return derive_stats(
        character,
        resolve_system_modifiers(character, ARMOR_STAT),
        resolve_system_modifiers(character, HIT_POINTS_STAT),
        resolve_system_modifiers(character, STRESS_STAT),
        resolve_system_modifiers(character, THRESHOLDS_STAT),
    )


def base_evasion(character: Character, rules: RuleSet | None = None) -> int:
    """Starting evasion from the class data, then the class table, then 10."""
    class_data = character.class_data
    if class_data is not None and class_data.starting_evasion is not None:
        return class_data.starting_evasion
    if class_data is not None and class_data.name:
        class_def = (rules or default_rule_set()).class_by_name(class_data.name)
        if class_def is not None:
            return class_def.starting_evasion
    return DEFAULT_EVASION


def class_base_stat(character: Character, stat: str, rules: RuleSet | None = None) -> int:
    """Return the unmodified base value the sheet shows for ``stat``."""
    if stat == EVASION_STAT:
        return base_evasion(character, rules)
    if stat == HIT_POINTS_STAT:
        return class_starting_hp(character)
    if stat == STRESS_STAT:
        return BASE_STRESS
    if stat == HOPE_STAT:
        return BASE_HOPE
    if stat == ARMOR_STAT:
        return sum(
            parse_base_score(item.definition.base_score)
            for item in character.items_at("equipped_armor")
            if item.definition is not None
        )
    return 0


def total_proficiency(character: Character) -> int:
    """Proficiency including item and ledger modifiers, never below 1."""
    combined = combine_modifiers(
        resolve_system_modifiers(character, PROFICIENCY_STAT),
        manual_modifiers(character, PROFICIENCY_STAT),
    )
    return max(MIN_CAPACITY, character.proficiency + modifier_total(combined))
