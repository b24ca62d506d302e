from __future__ import annotations

from dataclasses import dataclass

from dhsheet.domain.cards import (
    card_description,
    card_domain,
    card_level,
    card_name,
    card_recall_cost,
    card_type,
    filter_cards_by_domain_and_level,
    is_card_available_at_level,
    is_card_in_domain,
)


@dataclass
class CardRow:
    name: str
    domain: str
    level: int


def test_flat_card_fields() -> None:
    card = {
        "name": "Book of Ava",
        "level": 2,
        "domain": "Codex",
        "type": "grimoire",
        "recall_cost": 2,
        "description": "Power Push",
    }
    assert card_name(card) == "Book of Ava"
    assert card_level(card) == 2
    assert card_domain(card) == "Codex"
    assert card_type(card) == "grimoire"
    assert card_recall_cost(card) == 2
    assert card_description(card) == "Power Push"


def test_nested_data_wins_over_flat_fields() -> None:
    card = {"level": 1, "data": {"level": 3, "markdown": "Nested text"}, "description": "Flat"}
    assert card_level(card) == 3
    assert card_description(card) == "Nested text"


def test_null_nested_value_falls_back_to_flat() -> None:
    card = {"level": 4, "data": {"level": None}}
    assert card_level(card) == 4


def test_defaults_for_missing_fields() -> None:
    assert card_level({}) == 1
    assert card_name({}) == "Unknown Card"
    assert card_description({}) == ""
    assert card_recall_cost(None) == 0
    assert card_domain(None) == ""


def test_attribute_cards_are_supported() -> None:
    card = CardRow(name="Whirlwind", domain="Blade", level=1)
    assert card_name(card) == "Whirlwind"
    assert is_card_in_domain(card, "blade")


def test_domain_match_ignores_case_and_whitespace() -> None:
    card = {"data": {"domain": " Grace "}}
    assert is_card_in_domain(card, "grace")
    assert not is_card_in_domain(card, "Codex")
    assert not is_card_in_domain(card, "")
    assert not is_card_in_domain(None, "Grace")


def test_card_availability_by_level() -> None:
    assert is_card_available_at_level({"level": 3}, 3)
    assert not is_card_available_at_level({"level": 4}, 3)
    assert not is_card_available_at_level(None, 10)


def test_filter_cards_by_domain_and_level() -> None:
    cards = [
        {"name": "A", "domain": "Codex", "level": 1},
        {"name": "B", "domain": "Grace", "level": 2},
        {"name": "C", "domain": "Blade", "level": 1},
        {"name": "D", "data": {"domain": "Codex", "level": 5}},
    ]
    result = filter_cards_by_domain_and_level(cards, ["Codex", "Grace"], 2)
    assert [card_name(card) for card in result] == ["A", "B"]
