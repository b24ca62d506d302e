"""Errors raised while loading the tier, advancement and class tables."""


class DataError(Exception):
    """Base exception for rule-definition problems."""


class DataLoadError(DataError):
    """A definition file is missing, unreadable or not valid JSON."""


class DataValidationError(DataError):
    """A definition file parsed but its tables are malformed."""


class DataReferenceError(DataError):
    """One rule table names an entry another table does not define."""
