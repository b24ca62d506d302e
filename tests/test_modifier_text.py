from __future__ import annotations

from dhsheet.domain.modifier_text import parse_modifier_text


def test_parses_each_segment() -> None:
    modifiers = parse_modifier_text("+1 to Evasion; -1 to Agility")

    assert [(mod.target, mod.value, mod.operator) for mod in modifiers] == [
        ("evasion", 1, "add"),
        ("agility", -1, "subtract"),
    ]
    assert modifiers[0].description == "+1 to Evasion"
    assert modifiers[0].kind == "stat"
    assert modifiers[0].id != modifiers[1].id


def test_newlines_separate_segments() -> None:
    modifiers = parse_modifier_text("Heavy: -1 to Evasion\n+2 bonus to Armor")
    assert [(mod.target, mod.value) for mod in modifiers] == [("evasion", -1), ("armor", 2)]


def test_hit_points_are_aliased() -> None:
    modifiers = parse_modifier_text("+2 to Hit Points")
    assert [(mod.target, mod.value) for mod in modifiers] == [("hp", 2)]


def test_unsigned_values_add() -> None:
    modifiers = parse_modifier_text("3 to Hope")
    assert modifiers[0].operator == "add"
    assert modifiers[0].value == 3


def test_one_modifier_per_segment() -> None:
    modifiers = parse_modifier_text("+1 to Strength and +1 to Finesse")
    assert len(modifiers) == 1
    assert modifiers[0].target == "strength"


def test_text_without_modifiers() -> None:
    assert parse_modifier_text("Reliable: reroll a 1 once per rest") == []
    assert parse_modifier_text("") == []
    assert parse_modifier_text(None) == []
    assert parse_modifier_text(" ; \n ") == []
