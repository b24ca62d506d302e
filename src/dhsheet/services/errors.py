"""Service-layer exceptions."""


class CharacterRecordError(Exception):
    """Raised when a persisted character record cannot be interpreted at all."""
