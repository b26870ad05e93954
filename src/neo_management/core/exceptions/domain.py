"""Exceptions raised by the library itself, before any I/O happens."""

from .base import NeoManagementError


# Configuration Errors
class ConfigurationError(NeoManagementError):
    """Raised when environment settings cannot be turned into client options."""
    pass


# Validation Errors
class ValidationError(NeoManagementError):
    """Raised when input validation fails."""
    pass


class ArgumentError(ValidationError):
    """Raised synchronously when options or call parameters break a precondition.

    Never retried and never delivered through a completion callback.
    """
    pass
