from __future__ import annotations

import math

import pytest

from dhsheet.domain.errors import NonFiniteVitalError, RulesError, UnknownVitalKindError
from dhsheet.domain.vital_clamp import clamp_vital, clear_vital, mark_vital

VITALS = ["hit_points_current", "armor_slots", "stress_current", "hope_current"]


@pytest.mark.parametrize("kind", VITALS)
def test_clamp_keeps_values_in_range(kind: str) -> None:
    assert clamp_vital(kind, -1, 6) == 0
    assert clamp_vital(kind, 7, 6) == 6
    assert clamp_vital(kind, 3, 6) == 3


def test_clamp_with_zero_maximum() -> None:
    assert clamp_vital("armor_slots", 2, 0) == 0


def test_clamp_rejects_unknown_kind() -> None:
    with pytest.raises(UnknownVitalKindError):
        clamp_vital("evasion", 1, 6)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_clamp_rejects_non_finite_values(value: float) -> None:
    with pytest.raises(NonFiniteVitalError):
        clamp_vital("hope_current", value, 6)
    with pytest.raises(NonFiniteVitalError):
        clamp_vital("hope_current", 1, value)


def test_vital_errors_are_value_errors() -> None:
    assert issubclass(NonFiniteVitalError, RulesError)
    assert issubclass(RulesError, ValueError)


def test_marking_spends_hit_points_and_fills_stress() -> None:
    assert mark_vital("hit_points_current", 6, 6) == 5
    assert mark_vital("armor_slots", 0, 3) == 0
    assert mark_vital("stress_current", 5, 6, amount=3) == 6
    assert mark_vital("hope_current", 2, 6) == 3


def test_clearing_reverses_marks() -> None:
    assert clear_vital("hit_points_current", 5, 6) == 6
    assert clear_vital("hit_points_current", 6, 6) == 6
    assert clear_vital("stress_current", 1, 6, amount=2) == 0
