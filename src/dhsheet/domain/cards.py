"""Field accessors for domain cards stored flat or under a ``data`` object.

Library cards arrive either as ``{"level": 2}`` or ``{"data": {"level": 2}}``
(or as objects with the equivalent attributes). The nested value wins when
both are present.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

_MISSING = object()


def _get(container: Any, key: str) -> Any:
    if container is None:
        return _MISSING
    if isinstance(container, Mapping):
        value = container.get(key, _MISSING)
    else:
        value = getattr(container, key, _MISSING)
    return _MISSING if value is None else value


def _card_field(card: Any, *nested_keys: str, direct_key: str, default: Any) -> Any:
    if card is None:
        return default
    nested = _get(card, "data")
    for key in nested_keys:
        value = _get(nested, key)
        if value is not _MISSING:
            return value
    value = _get(card, direct_key)
    return default if value is _MISSING else value


def card_level(card: Any) -> int:
    return _card_field(card, "level", direct_key="level", default=1)


def card_description(card: Any) -> str:
    return _card_field(card, "description", "markdown", direct_key="description", default="")


def card_type(card: Any) -> str:
    return _card_field(card, "type", direct_key="type", default="")


def card_domain(card: Any) -> str:
    return _card_field(card, "domain", direct_key="domain", default="")


def card_recall_cost(card: Any) -> int:
    return _card_field(card, "recall_cost", direct_key="recall_cost", default=0)


def card_name(card: Any) -> str:
    return _card_field(card, "name", direct_key="name", default="Unknown Card")


def is_card_in_domain(card: Any, domain: str) -> bool:
    """Case- and surrounding-whitespace-insensitive domain comparison."""
    if card is None or not domain:
        return False
    return card_domain(card).strip().lower() == domain.strip().lower()


def is_card_available_at_level(card: Any, character_level: int) -> bool:
    if card is None:
        return False
    return card_level(card) <= character_level


def filter_cards_by_domain_and_level(
    cards: Iterable[Any], domains: Iterable[str], max_level: int
) -> list[Any]:
    domain_list = list(domains)
    return [
        card
        for card in cards
        if any(is_card_in_domain(card, domain) for domain in domain_list)
        and is_card_available_at_level(card, max_level)
    ]
