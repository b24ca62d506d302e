"""Level-up rule tables: tiers, achievements, advancements and domains.

Table-backed functions take an optional ``rules`` argument; when omitted the
rule set shipped with the package is used.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from dhsheet.data.rules_loader import default_rule_set
from dhsheet.domain.derived_stats import MINOR_THRESHOLD, parse_base_thresholds
from dhsheet.domain.entities import DamageThresholds, Experience, InventoryItem
from dhsheet.domain.errors import LevelOutOfRangeError
from dhsheet.domain.rule_set import RuleSet

ADVANCEMENT_SLOTS_PER_LEVEL = 2
DEFAULT_SLOT_COST = 1
TIER_ACHIEVEMENT_EXPERIENCE_VALUE = 2
TIER_ACHIEVEMENT_PROFICIENCY = 1
INCREASE_PROFICIENCY = "increase_proficiency"
MULTICLASS = "multiclass"
SUBCLASS_CARD = "subclass_card"


@dataclass(frozen=True, slots=True)
class TierAchievements:
    new_experience_value: int | None
    proficiency_increase: int
    should_clear_marked_traits: bool


@dataclass(frozen=True, slots=True)
class SlotUsage:
    valid: bool
    total_slots: int


@dataclass(frozen=True, slots=True)
class LevelUpConfig:
    tier: int
    tier_achievements: TierAchievements
    advancements_available: list[str]
    max_domain_card_level: int


def _rules(rules: RuleSet | None) -> RuleSet:
    return rules if rules is not None else default_rule_set()


def tier_of(level: int, rules: RuleSet | None = None) -> int:
    """Return the tier containing ``level``; out-of-range levels raise."""
    tier = _rules(rules).tier_for_level(level)
    if tier is None:
        raise LevelOutOfRangeError(f"Invalid level: {level}")
    return tier.tier


def tier_achievement_levels(rules: RuleSet | None = None) -> frozenset[int]:
    return _rules(rules).achievement_levels


def has_tier_achievements(level: int, rules: RuleSet | None = None) -> bool:
    return level in tier_achievement_levels(rules)


def tier_achievements(level: int, rules: RuleSet | None = None) -> TierAchievements:
    tier = _rules(rules).achievement_tier(level)
    if tier is None:
        return TierAchievements(
            new_experience_value=None,
            proficiency_increase=0,
            should_clear_marked_traits=False,
        )
    return TierAchievements(
        new_experience_value=TIER_ACHIEVEMENT_EXPERIENCE_VALUE,
        proficiency_increase=TIER_ACHIEVEMENT_PROFICIENCY,
        should_clear_marked_traits=tier.clears_marked_traits,
    )


def new_experience(level: int, value: int = TIER_ACHIEVEMENT_EXPERIENCE_VALUE) -> Experience:
    return Experience(name=f"Experience (Level {level})", value=value)


def add_experience_at_level_up(
    experiences: Sequence[Experience],
    level: int,
    value: int = TIER_ACHIEVEMENT_EXPERIENCE_VALUE,
) -> tuple[Experience, ...]:
    """Return ``experiences`` with the tier-achievement experience appended."""
    return (*experiences, new_experience(level, value))


def thresholds_after_level_up(current: DamageThresholds) -> DamageThresholds:
    return DamageThresholds(
        minor=current.minor + 1,
        major=current.major + 1,
        severe=current.severe + 1,
    )


def thresholds_for_level(
    level: int, equipped_armor: InventoryItem | None = None
) -> DamageThresholds:
    """Preview thresholds at ``level`` for a single optional armor piece."""
    major = level
    severe = level * 2
    if equipped_armor is not None and equipped_armor.definition is not None:
        parsed = parse_base_thresholds(equipped_armor.definition.base_thresholds)
        if parsed is not None:
            major = parsed[0] + level
            severe = parsed[1] + level
    return DamageThresholds(minor=MINOR_THRESHOLD, major=major, severe=severe)


def advancements_for_tier(tier: int, rules: RuleSet | None = None) -> list[str]:
    """Return advancement ids selectable at ``tier``, in catalog order."""
    return [
        advancement.id
        for advancement in _rules(rules).advancements
        if is_advancement_available(advancement.min_tier, tier)
    ]


def is_advancement_available(advancement_tier: int, character_tier: int) -> bool:
    return advancement_tier <= character_tier


def advancement_slot_cost(advancement_id: str, rules: RuleSet | None = None) -> int:
    advancement = _rules(rules).advancement(advancement_id)
    if advancement is None:
        return DEFAULT_SLOT_COST
    return advancement.slot_cost


def validate_advancement_slot_usage(
    selected_ids: Sequence[str], rules: RuleSet | None = None
) -> SlotUsage:
    """Selections must spend exactly the two slots granted per level."""
    total = sum(advancement_slot_cost(advancement_id, rules) for advancement_id in selected_ids)
    return SlotUsage(valid=total == ADVANCEMENT_SLOTS_PER_LEVEL, total_slots=total)


def max_domain_card_level(character_level: int) -> int:
    return character_level


def validate_threshold_triple(thresholds: DamageThresholds) -> bool:
    return (
        thresholds.minor >= 1
        and thresholds.major >= thresholds.minor
        and thresholds.severe > thresholds.major
    )


def proficiency_increase(
    level: int, selected_ids: Sequence[str], rules: RuleSet | None = None
) -> int:
    """Tier-achievement and advancement bonuses stack."""
    increase = 0
    if has_tier_achievements(level, rules):
        increase += TIER_ACHIEVEMENT_PROFICIENCY
    if INCREASE_PROFICIENCY in selected_ids:
        increase += 1
    return increase


def level_up_config(level: int, rules: RuleSet | None = None) -> LevelUpConfig:
    tier = tier_of(level, rules)
    return LevelUpConfig(
        tier=tier,
        tier_achievements=tier_achievements(level, rules),
        advancements_available=advancements_for_tier(tier, rules),
        max_domain_card_level=max_domain_card_level(level),
    )


def class_domains(class_name: str, rules: RuleSet | None = None) -> list[str]:
    """Exact-case lookup of a class's two domains; unknown names give ``[]``."""
    class_def = _rules(rules).class_by_name(class_name)
    if class_def is None:
        return []
    return list(class_def.domains)


def all_class_names(rules: RuleSet | None = None) -> list[str]:
    return [class_def.name for class_def in _rules(rules).classes]


def multiclass_domain_options(
    primary_class: str | None, multiclass_class: str, rules: RuleSet | None = None
) -> list[str]:
    """Domains a character may pick up by multiclassing into ``multiclass_class``."""
    if primary_class is not None and multiclass_class == primary_class:
        return []
    return class_domains(multiclass_class, rules)


def eligible_domains(
    character_domains: Sequence[str], multiclass_domain: str | None = None
) -> list[str]:
    """Domains whose cards the character may take, without duplicates."""
    domains = list(dict.fromkeys(character_domains))
    if multiclass_domain and multiclass_domain not in domains:
        domains.append(multiclass_domain)
    return domains
