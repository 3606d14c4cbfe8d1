class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an operation references an id that does not exist."""


class InvalidTransitionError(DomainError):
    """Raised when strict workflow mode rejects a status change."""
