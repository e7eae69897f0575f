class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when a calendar source cannot be loaded."""
