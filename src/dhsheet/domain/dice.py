"""Dice notation parsing and proficiency scaling."""
from __future__ import annotations

import re
from dataclasses import dataclass, field

_DAMAGE_TYPE_WORDS = re.compile(r"physical|magic|phy|mag", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s")
_DICE_TERM = re.compile(r"(\d+)?d(\d+)")
_LEADING_INT = re.compile(r"[+-]?\d+")
_SCALABLE_DICE = re.compile(r"(\d*)d(\d+)", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class DiceNotation:
    dice: list[str] = field(default_factory=list)
    modifier: int = 0

    @property
    def dice_expression(self) -> str:
        return "+".join(self.dice)


def parse_dice_notation(notation: str) -> DiceNotation:
    """Split ``notation`` into dice terms and a flat modifier.

    Damage-type words (``phy``, ``mag``, ``physical``, ``magic``) and
    whitespace are ignored. Terms are separated by ``+``; dice terms keep
    their order and duplicates. Any other term contributes its leading
    integer, so ``"2fire"`` adds 2 and ``"1d10-1"`` adds 1; terms without
    one are dropped.
    """
    cleaned = _WHITESPACE.sub("", _DAMAGE_TYPE_WORDS.sub("", notation)).lower()
    dice: list[str] = []
    modifier = 0
    for part in cleaned.split("+"):
        if _DICE_TERM.fullmatch(part):
            dice.append(part)
            continue
        match = _LEADING_INT.match(part)
        if match is not None:
            modifier += int(match.group())
    return DiceNotation(dice=dice, modifier=modifier)


def scale_weapon_damage(notation: str, proficiency: int) -> str:
    """Multiply every dice count in ``notation`` by ``proficiency``.

    ``"d8+2"`` at proficiency 2 becomes ``"2d8+2"``. Flat modifiers are
    kept as written and notation without dice is returned unchanged.
    """
    if not notation:
        return notation

    def _scale(match: re.Match[str]) -> str:
        count = int(match.group(1)) if match.group(1) else 1
        return f"{count * proficiency}d{match.group(2)}"

    return _SCALABLE_DICE.sub(_scale, notation)
