class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an id-keyed operation has no matching record."""


class AuthenticationError(DomainError):
    """Raised when the admin passcode is wrong."""
