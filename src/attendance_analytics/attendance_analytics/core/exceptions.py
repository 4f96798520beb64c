class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRecordError(DomainError):
    """Raised when a stored attendance row cannot be mapped to a record."""
