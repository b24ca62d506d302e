"""Stat modifier models."""
from __future__ import annotations

from dataclasses import dataclass, field

from dhsheet.core.types import ModifierOperator, ModifierSource


@dataclass(frozen=True, slots=True)
class ModifierKey:
    """Structured provenance of a system modifier.

    ``entry_id`` is set for structured item modifiers, ``match_index`` for
    modifiers scanned out of item text.
    """

    item_id: str
    entry_id: str | None = None
    match_index: int | None = None


@dataclass(frozen=True, slots=True)
class Modifier:
    """A signed adjustment to a single stat."""

    id: str
    name: str
    value: int
    source: ModifierSource
    target: str | None = None
    key: ModifierKey | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class TextModifier:
    """A modifier extracted from a free-text description."""

    id: str
    kind: str
    target: str
    value: int
    operator: ModifierOperator
    description: str
