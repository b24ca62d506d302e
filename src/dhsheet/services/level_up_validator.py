"""Validation of level-up wizard submissions.

Each validator returns a list of field-tagged issues; an empty list means
the selection is valid. Nothing here raises for invalid choices.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, Literal, Sequence

from dhsheet.domain.level_up_rules import (
    ADVANCEMENT_SLOTS_PER_LEVEL,
    MULTICLASS,
    SUBCLASS_CARD,
    advancement_slot_cost,
)
from dhsheet.domain.rule_set import RuleSet

MIN_LEVEL = 1
MAX_LEVEL = 10
REQUIRED_TRAIT_PICKS = 2
REQUIRED_EXPERIENCE_PICKS = 2


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    field: str
    message: str


@dataclass(frozen=True, slots=True)
class AvailableTrait:
    id: str
    marked: bool = False


@dataclass(frozen=True, slots=True)
class DomainCardExchange:
    """Optional swap of an existing domain card during level-up."""

    existing_card_id: str | None
    existing_card_level: int | None
    new_card_level: int


@dataclass(frozen=True, slots=True)
class LevelUpSubmission:
    """Choices made in the level-up wizard.

    The trait, experience and exchange sub-selections are carried for the
    caller; ``validate_complete_level_up`` does not check them.
    """

    current_level: int
    new_level: int
    selected_advancements: tuple[str, ...]
    selected_domain_card_level: int
    is_multiclass: bool = False
    is_multiclassed_or_has_mastery: bool = False
    selected_trait_ids: tuple[str, ...] = ()
    selected_experience_indices: tuple[int, ...] = ()
    domain_card_exchange: DomainCardExchange | None = None
    available_traits: tuple[AvailableTrait, ...] = ()
    already_upgraded_traits_this_tier: frozenset[str] = field(default_factory=frozenset)


def format_issue(issue: ValidationIssue) -> str:
    return f"{issue.field}: {issue.message}"


def validate_new_level(current_level: int, new_level: int) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if new_level <= current_level:
        issues.append(
            ValidationIssue(
                field="new_level",
                message=(
                    f"New level ({new_level}) must be higher than current level "
                    f"({current_level})"
                ),
            )
        )
    if new_level > MAX_LEVEL:
        issues.append(ValidationIssue(field="new_level", message=f"Maximum level is {MAX_LEVEL}"))
    if new_level < MIN_LEVEL:
        issues.append(ValidationIssue(field="new_level", message=f"Minimum level is {MIN_LEVEL}"))
    return issues


def validate_advancement_selections(
    selected_advancements: Sequence[str],
    character_level: int,
    is_multiclassed_or_has_mastery: bool,
    rules: RuleSet | None = None,
) -> list[ValidationIssue]:
    """Selections must spend exactly two slots.

    An upgraded subclass card and multiclassing are both unavailable to a
    character that is already multiclassed or has mastery. ``character_level``
    is accepted for callers that pass the target level; the slot rule does
    not depend on it.
    """
    if not selected_advancements:
        return [ValidationIssue(field="advancements", message="Must select at least one advancement")]

    issues: list[ValidationIssue] = []
    total_slots = sum(
        advancement_slot_cost(advancement_id, rules) for advancement_id in selected_advancements
    )
    if total_slots != ADVANCEMENT_SLOTS_PER_LEVEL:
        issues.append(
            ValidationIssue(
                field="advancements",
                message=(
                    f"Total advancement slots must equal {ADVANCEMENT_SLOTS_PER_LEVEL}, "
                    f"but selected {total_slots}"
                ),
            )
        )

    for advancement_id in selected_advancements:
        if advancement_id == SUBCLASS_CARD and is_multiclassed_or_has_mastery:
            issues.append(
                ValidationIssue(
                    field="advancements",
                    message="Cannot take upgraded subclass card - already have mastery or multiclassed",
                )
            )
        if advancement_id == MULTICLASS and is_multiclassed_or_has_mastery:
            issues.append(
                ValidationIssue(
                    field="advancements",
                    message="Cannot take multiclass - already multiclassed",
                )
            )
    return issues


def validate_domain_card_selection(
    selected_card_level: int, character_level: int, is_multiclass: bool = False
) -> list[ValidationIssue]:
    """The chosen card must be between level 1 and the character's new level.

    Multiclassed characters draw from a wider domain set, but the level
    limit is the same.
    """
    issues: list[ValidationIssue] = []
    if selected_card_level > character_level:
        issues.append(
            ValidationIssue(
                field="domain_card",
                message=(
                    f"Domain card level ({selected_card_level}) must be at or below "
                    f"character level ({character_level})"
                ),
            )
        )
    if selected_card_level < 1:
        issues.append(
            ValidationIssue(field="domain_card", message="Domain card level must be at least 1")
        )
    return issues


def validate_trait_selection(
    selected_trait_ids: Sequence[str],
    available_traits: Iterable[AvailableTrait],
    already_upgraded_this_tier: AbstractSet[str],
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if len(selected_trait_ids) != REQUIRED_TRAIT_PICKS:
        issues.append(
            ValidationIssue(
                field="trait_selection",
                message=(
                    f"Must select exactly {REQUIRED_TRAIT_PICKS} traits, "
                    f"selected {len(selected_trait_ids)}"
                ),
            )
        )
    if len(set(selected_trait_ids)) != len(selected_trait_ids):
        issues.append(
            ValidationIssue(field="trait_selection", message="Cannot select the same trait twice")
        )

    traits_by_id = {trait.id: trait for trait in available_traits}
    for trait_id in selected_trait_ids:
        trait = traits_by_id.get(trait_id)
        if trait is None:
            issues.append(
                ValidationIssue(field="trait_selection", message=f"Trait {trait_id} not found")
            )
            continue
        if trait.marked:
            issues.append(
                ValidationIssue(
                    field="trait_selection",
                    message=f"Trait {trait_id} is already marked and cannot be upgraded",
                )
            )
        if trait_id in already_upgraded_this_tier:
            issues.append(
                ValidationIssue(
                    field="trait_selection",
                    message=f"Trait {trait_id} has already been upgraded this tier",
                )
            )
    return issues


def validate_experience_selection(
    selected_indices: Sequence[int], available_experiences: Sequence[object]
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if len(selected_indices) != REQUIRED_EXPERIENCE_PICKS:
        issues.append(
            ValidationIssue(
                field="experience_selection",
                message=(
                    f"Must select exactly {REQUIRED_EXPERIENCE_PICKS} experiences, "
                    f"selected {len(selected_indices)}"
                ),
            )
        )
    if len(set(selected_indices)) != len(selected_indices):
        issues.append(
            ValidationIssue(
                field="experience_selection",
                message="Cannot select the same experience twice",
            )
        )
    for index in selected_indices:
        if index < 0 or index >= len(available_experiences):
            issues.append(
                ValidationIssue(
                    field="experience_selection",
                    message=f"Experience at index {index} not found",
                )
            )
    return issues


def validate_domain_card_exchange(
    exchange_existing_card: bool,
    existing_card_id: str | None,
    existing_card_level: int | None,
    new_card_level: int,
) -> list[ValidationIssue]:
    """A replacement card may not be higher level than the card it replaces."""
    if not exchange_existing_card:
        return []
    if not existing_card_id:
        return [ValidationIssue(field="domain_card_exchange", message="Must select a card to exchange")]
    if existing_card_level is None:
        return [
            ValidationIssue(
                field="domain_card_exchange",
                message="Could not determine level of card being exchanged",
            )
        ]
    if new_card_level > existing_card_level:
        return [
            ValidationIssue(
                field="domain_card_exchange",
                message=(
                    f"New card (level {new_card_level}) must be at or below card being "
                    f"replaced (level {existing_card_level})"
                ),
            )
        ]
    return []


def validate_vital_slot_addition(
    vital_kind: Literal["hp", "stress"], slots_to_add: int | float
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    field_name = f"{vital_kind}_slots"
    if slots_to_add < 1:
        issues.append(
            ValidationIssue(field=field_name, message=f"Must add at least 1 {vital_kind} slot")
        )
    if isinstance(slots_to_add, bool) or not float(slots_to_add).is_integer():
        issues.append(
            ValidationIssue(field=field_name, message=f"{vital_kind} slots must be an integer")
        )
    return issues


def validate_complete_level_up(
    submission: LevelUpSubmission, rules: RuleSet | None = None
) -> list[ValidationIssue]:
    """Run the level, advancement and domain-card validators.

    Trait, experience, exchange and vital-slot checks depend on which
    advancements were picked and are left to the caller.
    """
    issues: list[ValidationIssue] = []
    issues.extend(validate_new_level(submission.current_level, submission.new_level))
    issues.extend(
        validate_advancement_selections(
            submission.selected_advancements,
            submission.new_level,
            submission.is_multiclassed_or_has_mastery,
            rules,
        )
    )
    issues.extend(
        validate_domain_card_selection(
            submission.selected_domain_card_level,
            submission.new_level,
            submission.is_multiclass,
        )
    )
    return issues


def is_level_up_valid(issues: Sequence[ValidationIssue]) -> bool:
    return not issues


def group_issues_by_field(issues: Iterable[ValidationIssue]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for issue in issues:
        grouped.setdefault(issue.field, []).append(issue.message)
    return grouped
