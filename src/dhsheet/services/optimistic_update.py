"""Compensating-action helper for optimistic state updates.

A caller installs the new character state immediately, runs the backing
operation (typically a storage write) and restores the previous state if
that operation fails.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")


class StateHolder(Generic[S]):
    """Minimal store holding one current state value."""

    def __init__(self, state: S) -> None:
        self._state = state

    @property
    def state(self) -> S:
        return self._state

    def replace(self, state: S) -> S:
        """Install ``state`` and return the value it replaced."""
        previous = self._state
        self._state = state
        return previous


@dataclass(frozen=True, slots=True)
class OptimisticResult(Generic[R]):
    success: bool
    data: R | None = None
    error: Exception | None = None


def apply_optimistically(
    holder: StateHolder[S],
    new_state: S,
    operation: Callable[[], R],
    *,
    description: str = "Operation",
) -> OptimisticResult[R]:
    """Install ``new_state``, run ``operation`` and roll back if it raises."""
    previous = holder.replace(new_state)
    try:
        data = operation()
    except Exception as exc:
        holder.replace(previous)
        logger.warning("%s failed, restored previous state: %s", description, exc)
        return OptimisticResult(success=False, error=exc)
    return OptimisticResult(success=True, data=data)
