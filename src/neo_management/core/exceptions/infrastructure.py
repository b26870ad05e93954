"""Exceptions describing failures of the remote management API."""

from typing import Any, Dict, Optional

from .base import NeoManagementError


class ExternalServiceError(NeoManagementError):
    """Base class for errors reported by, or on the way to, a remote service."""
    pass


class RequestError(ExternalServiceError):
    """Raised for non-2xx responses and transport failures.

    ``status_code`` is ``None`` when the request never produced a response
    (connection refused, timeout, protocol error) and also when httpx gave up
    on a response it could not use (undecodable body, too many redirects).
    Only the first kind counts as a transport error.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        transport_error: Optional[bool] = None,
    ):
        super().__init__(message, error_code=error_code, details=details)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.headers = headers or {}
        self.body = body
        self._transport_error = status_code is None if transport_error is None else transport_error

    @property
    def is_transport_error(self) -> bool:
        return self._transport_error

    def __repr__(self) -> str:
        return (
            f"RequestError(status_code={self.status_code!r}, "
            f"error_code={self.error_code!r}, message={self.message!r})"
        )
