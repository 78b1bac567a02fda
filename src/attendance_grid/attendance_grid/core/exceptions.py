class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriod(ValidationError):
    """Raised when a reporting period is malformed (bad month, start after end)."""


class DataSourceError(DomainError):
    """Raised when employee records cannot be loaded."""
