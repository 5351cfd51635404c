class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NullArgumentError(ValidationError):
    """Raised when a required argument is missing (``None``)."""


class InvalidIntervalError(ValidationError):
    """Raised when a time interval would end before it starts."""


class TimeLogChronologyError(ValidationError):
    """Raised when time logs are not ordered ascending by entry time."""


class DisjointIntervalsError(DomainError):
    """Raised when merging two intervals that neither overlap nor touch."""
