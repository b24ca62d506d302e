"""Service layer: level-up validation, record loading and update helpers."""

from .character_record import CharacterRecordLoader, character_from_record
from .errors import CharacterRecordError
from .level_up_validator import (
    LevelUpSubmission,
    ValidationIssue,
    is_level_up_valid,
    validate_complete_level_up,
)
from .optimistic_update import OptimisticResult, StateHolder, apply_optimistically

__all__ = [
    "CharacterRecordError",
    "CharacterRecordLoader",
    "LevelUpSubmission",
    "OptimisticResult",
    "StateHolder",
    "ValidationIssue",
    "apply_optimistically",
    "character_from_record",
    "is_level_up_valid",
    "validate_complete_level_up",
]
