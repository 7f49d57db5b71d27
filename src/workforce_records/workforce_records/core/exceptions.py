class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an operation references a record id that does not exist."""


class InvalidStateError(DomainError):
    """Raised when a workflow operation is attempted from a disallowed state."""
