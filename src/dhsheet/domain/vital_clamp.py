"""Range enforcement for capacity-style vitals."""
from __future__ import annotations

import math
from typing import Literal

from dhsheet.core.types import VitalKind
from dhsheet.domain.errors import NonFiniteVitalError, UnknownVitalKindError

TrackType = Literal["mark-bad", "fill-up"]

# Marking a mark-bad vital spends remaining capacity; marking a fill-up vital
# accumulates towards its maximum.
VITAL_TRACKS: dict[str, TrackType] = {
    "hit_points_current": "mark-bad",
    "armor_slots": "mark-bad",
    "stress_current": "fill-up",
    "hope_current": "fill-up",
}

Number = int | float


def _require_finite(value: Number, context: str) -> None:
    if not math.isfinite(value):
        raise NonFiniteVitalError(f"{context} must be a finite number, got {value!r}.")


def clamp_vital(kind: VitalKind, value: Number, maximum: Number) -> Number:
    """Clamp ``value`` into ``[0, maximum]``.

    The range is the same for every vital; callers express direction by the
    arithmetic they apply before clamping.
    """
    if kind not in VITAL_TRACKS:
        raise UnknownVitalKindError(f"Unknown vital kind: {kind!r}")
    _require_finite(value, kind)
    _require_finite(maximum, f"{kind} maximum")
    return max(0, min(value, maximum))


def mark_vital(kind: VitalKind, current: Number, maximum: Number, amount: int = 1) -> Number:
    """Mark ``amount`` boxes of a vital and clamp the result."""
    if kind not in VITAL_TRACKS:
        raise UnknownVitalKindError(f"Unknown vital kind: {kind!r}")
    delta = -amount if VITAL_TRACKS[kind] == "mark-bad" else amount
    return clamp_vital(kind, current + delta, maximum)


def clear_vital(kind: VitalKind, current: Number, maximum: Number, amount: int = 1) -> Number:
    """Undo ``amount`` marks of a vital and clamp the result."""
    return mark_vital(kind, current, maximum, -amount)
