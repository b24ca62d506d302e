"""Precondition errors raised by the rule functions."""


class RulesError(ValueError):
    """Base exception for invalid inputs to the rules engine."""


class LevelOutOfRangeError(RulesError):
    """Raised when a character level falls outside the defined tiers."""


class NonFiniteVitalError(RulesError):
    """Raised when a vital value is NaN or infinite."""


class UnknownVitalKindError(RulesError):
    """Raised when a vital kind is not one of the tracked vitals."""
