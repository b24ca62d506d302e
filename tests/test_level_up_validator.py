from __future__ import annotations

import pytest

from dhsheet.services.level_up_validator import (
    AvailableTrait,
    LevelUpSubmission,
    ValidationIssue,
    format_issue,
    group_issues_by_field,
    is_level_up_valid,
    validate_advancement_selections,
    validate_complete_level_up,
    validate_domain_card_exchange,
    validate_domain_card_selection,
    validate_experience_selection,
    validate_new_level,
    validate_trait_selection,
    validate_vital_slot_addition,
)


def _messages(issues: list[ValidationIssue]) -> list[str]:
    return [issue.message for issue in issues]


def test_new_level_must_increase() -> None:
    assert validate_new_level(3, 4) == []
    issues = validate_new_level(4, 4)
    assert _messages(issues) == ["New level (4) must be higher than current level (4)"]
    assert issues[0].field == "new_level"


def test_new_level_bounds() -> None:
    assert "Maximum level is 10" in _messages(validate_new_level(10, 11))
    assert "Minimum level is 1" in _messages(validate_new_level(0, 0))


def test_advancements_require_a_selection() -> None:
    issues = validate_advancement_selections([], 2, False)
    assert _messages(issues) == ["Must select at least one advancement"]


def test_advancements_must_spend_exactly_two_slots() -> None:
    assert validate_advancement_selections(["add_hp", "add_stress"], 2, False) == []
    assert validate_advancement_selections(["increase_proficiency"], 2, False) == []
    issues = validate_advancement_selections(["multiclass", "add_hp"], 3, False)
    assert _messages(issues) == ["Total advancement slots must equal 2, but selected 3"]


def test_mastery_blocks_subclass_and_multiclass() -> None:
    subclass = validate_advancement_selections(["subclass_card", "add_hp"], 5, True)
    assert _messages(subclass) == [
        "Cannot take upgraded subclass card - already have mastery or multiclassed"
    ]
    multiclass = validate_advancement_selections(["multiclass"], 5, True)
    assert _messages(multiclass) == ["Cannot take multiclass - already multiclassed"]
    assert validate_advancement_selections(["multiclass"], 5, False) == []


def test_domain_card_level_limits() -> None:
    assert validate_domain_card_selection(3, 3) == []
    too_high = validate_domain_card_selection(4, 3)
    assert _messages(too_high) == [
        "Domain card level (4) must be at or below character level (3)"
    ]
    assert _messages(validate_domain_card_selection(0, 3)) == ["Domain card level must be at least 1"]
    assert validate_domain_card_selection(2, 3, is_multiclass=True) == []


def test_trait_selection() -> None:
    traits = [
        AvailableTrait("agility"),
        AvailableTrait("strength"),
        AvailableTrait("finesse", marked=True),
    ]
    assert validate_trait_selection(["agility", "strength"], traits, frozenset()) == []

    issues = validate_trait_selection(["agility", "agility"], traits, frozenset())
    assert "Cannot select the same trait twice" in _messages(issues)

    issues = validate_trait_selection(["agility"], traits, frozenset())
    assert "Must select exactly 2 traits, selected 1" in _messages(issues)

    issues = validate_trait_selection(["finesse", "knowledge"], traits, frozenset({"finesse"}))
    assert _messages(issues) == [
        "Trait finesse is already marked and cannot be upgraded",
        "Trait finesse has already been upgraded this tier",
        "Trait knowledge not found",
    ]
    assert {issue.field for issue in issues} == {"trait_selection"}


def test_experience_selection() -> None:
    experiences = ["Sailor", "Scholar", "Thief"]
    assert validate_experience_selection([0, 2], experiences) == []
    assert "Cannot select the same experience twice" in _messages(
        validate_experience_selection([1, 1], experiences)
    )
    assert "Experience at index 3 not found" in _messages(
        validate_experience_selection([0, 3], experiences)
    )
    assert "Must select exactly 2 experiences, selected 0" in _messages(
        validate_experience_selection([], experiences)
    )


def test_domain_card_exchange() -> None:
    assert validate_domain_card_exchange(False, None, None, 9) == []
    assert _messages(validate_domain_card_exchange(True, None, None, 2)) == [
        "Must select a card to exchange"
    ]
    assert _messages(validate_domain_card_exchange(True, "card-1", None, 2)) == [
        "Could not determine level of card being exchanged"
    ]
    assert _messages(validate_domain_card_exchange(True, "card-1", 2, 3)) == [
        "New card (level 3) must be at or below card being replaced (level 2)"
    ]
    assert validate_domain_card_exchange(True, "card-1", 3, 3) == []


@pytest.mark.parametrize(
    ("slots", "expected"),
    [
        (1, []),
        (3, []),
        (0, ["Must add at least 1 hp slot"]),
        (1.5, ["hp slots must be an integer"]),
        (0.5, ["Must add at least 1 hp slot", "hp slots must be an integer"]),
    ],
)
def test_vital_slot_addition(slots: float, expected: list[str]) -> None:
    issues = validate_vital_slot_addition("hp", slots)
    assert _messages(issues) == expected
    assert all(issue.field == "hp_slots" for issue in issues)


def test_complete_level_up_collects_every_issue() -> None:
    submission = LevelUpSubmission(
        current_level=4,
        new_level=4,
        selected_advancements=("multiclass", "add_hp"),
        selected_domain_card_level=6,
    )
    issues = validate_complete_level_up(submission)

    assert not is_level_up_valid(issues)
    assert group_issues_by_field(issues) == {
        "new_level": ["New level (4) must be higher than current level (4)"],
        "advancements": ["Total advancement slots must equal 2, but selected 3"],
        "domain_card": ["Domain card level (6) must be at or below character level (4)"],
    }


def test_complete_level_up_ignores_sub_selections() -> None:
    submission = LevelUpSubmission(
        current_level=1,
        new_level=2,
        selected_advancements=("increase_traits", "increase_experience"),
        selected_domain_card_level=2,
        selected_trait_ids=("agility",),
    )
    issues = validate_complete_level_up(submission)
    assert is_level_up_valid(issues)


def test_format_issue() -> None:
    issue = ValidationIssue(field="domain_card", message="Domain card level must be at least 1")
    assert format_issue(issue) == "domain_card: Domain card level must be at least 1"
