"""Base exceptions for neo-management.

Every error raised by the library inherits from NeoManagementError and carries
an error code and a details mapping so callers can render a uniform payload.
"""

from typing import Any, Dict, Optional


class NeoManagementError(Exception):
    """Base exception for all neo-management errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoManagementError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-management exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
