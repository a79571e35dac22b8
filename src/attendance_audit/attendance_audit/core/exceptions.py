class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ReviewStateError(ValidationError):
    """Raised when an audit queue entry cannot move to the requested state."""
