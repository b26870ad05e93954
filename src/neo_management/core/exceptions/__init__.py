"""Exception hierarchy for neo-management."""

from .base import (
    NeoManagementError,
    create_error_response,
)

from .domain import (
    ConfigurationError,
    ValidationError,
    ArgumentError,
)

from .infrastructure import (
    ExternalServiceError,
    RequestError,
)

__all__ = [
    "NeoManagementError",
    "create_error_response",
    "ConfigurationError",
    "ValidationError",
    "ArgumentError",
    "ExternalServiceError",
    "RequestError",
]
