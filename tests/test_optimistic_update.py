from __future__ import annotations

import logging

import pytest

from dhsheet.domain.entities import Vitals
from dhsheet.services.optimistic_update import StateHolder, apply_optimistically


def test_successful_operation_keeps_new_state() -> None:
    holder = StateHolder(Vitals(hit_points_current=6))
    result = apply_optimistically(holder, Vitals(hit_points_current=5), lambda: "saved")

    assert result.success is True
    assert result.data == "saved"
    assert result.error is None
    assert holder.state.hit_points_current == 5


def test_failed_operation_restores_previous_state(caplog: pytest.LogCaptureFixture) -> None:
    holder = StateHolder(Vitals(hit_points_current=6))

    def failing_write() -> None:
        raise OSError("disk full")

    with caplog.at_level(logging.WARNING, logger="dhsheet.services.optimistic_update"):
        result = apply_optimistically(
            holder, Vitals(hit_points_current=5), failing_write, description="Mark hit point"
        )

    assert result.success is False
    assert isinstance(result.error, OSError)
    assert holder.state.hit_points_current == 6
    assert "Mark hit point failed" in caplog.text


def test_state_holder_replace_returns_previous() -> None:
    holder = StateHolder(1)
    assert holder.replace(2) == 1
    assert holder.state == 2
