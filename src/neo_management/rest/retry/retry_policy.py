"""Retry policy for management API requests."""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from ...core.exceptions import ArgumentError, RequestError


# Hard upper bound on retries, whatever the configuration asks for
MAX_REQUEST_RETRY_COUNT = 10

ALL_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


class BackoffType(Enum):
    """Types of backoff strategies."""

    EXPONENTIAL = "exponential"
    LINEAR = "linear"
    FIXED = "fixed"


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for request retry behavior.

    ``max_retries`` counts re-issues after the first call, so a policy allows
    ``max_retries + 1`` network calls in total.
    """

    enabled: bool = True
    max_retries: int = 3
    backoff_type: BackoffType = BackoffType.EXPONENTIAL
    initial_delay_ms: int = 250
    max_delay_ms: int = 10000
    jitter: bool = True
    retry_on_transport_error: bool = True
    retry_on_status: FrozenSet[int] = field(default_factory=lambda: frozenset({429}))
    retry_methods: FrozenSet[str] = ALL_METHODS

    def __post_init__(self):
        """Validate retry policy parameters."""
        if not isinstance(self.max_retries, int) or self.max_retries < 0:
            raise ArgumentError("max_retries must be a non-negative integer")
        if self.initial_delay_ms < 0:
            raise ArgumentError("initial_delay_ms must be non-negative")
        if self.max_delay_ms < self.initial_delay_ms:
            raise ArgumentError("max_delay_ms must be >= initial_delay_ms")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "max_retries", min(self.max_retries, MAX_REQUEST_RETRY_COUNT))
        object.__setattr__(self, "retry_on_status", frozenset(self.retry_on_status))
        object.__setattr__(self, "retry_methods", frozenset(m.upper() for m in self.retry_methods))

    @property
    def max_attempts(self) -> int:
        """Total number of network calls one request may issue."""
        if not self.enabled:
            return 1
        return self.max_retries + 1

    def calculate_delay(self, attempt: int) -> int:
        """
        Calculate delay before re-issuing after a failed attempt.

        Args:
            attempt: Number of the attempt that just failed (1-based)

        Returns:
            Delay in milliseconds
        """
        if attempt <= 0:
            return 0

        if self.backoff_type == BackoffType.EXPONENTIAL:
            delay = self.initial_delay_ms * (2 ** (attempt - 1))
        elif self.backoff_type == BackoffType.LINEAR:
            delay = self.initial_delay_ms * attempt
        else:  # FIXED
            delay = self.initial_delay_ms

        delay = min(delay, self.max_delay_ms)

        if self.jitter and delay > 0:
            jitter_range = int(delay * 0.1)  # 10% jitter
            delay += random.randint(-jitter_range, jitter_range)
            delay = max(0, delay)

        return delay

    def is_retryable(self, method: str, error: BaseException) -> bool:
        """Whether ``error`` raised by a ``method`` call may be re-issued."""
        if method.upper() not in self.retry_methods:
            return False
        if not isinstance(error, RequestError):
            return False
        if error.is_transport_error:
            return self.retry_on_transport_error
        return error.status_code in self.retry_on_status

    def should_retry(self, attempt: int, method: str, error: BaseException) -> bool:
        """
        Determine if a failed request should be re-issued.

        Args:
            attempt: Number of the attempt that just failed (1-based)
            method: HTTP method of the request
            error: Error raised by that attempt

        Returns:
            True if should retry, False otherwise
        """
        if attempt >= self.max_attempts:
            return False
        return self.is_retryable(method, error)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RetryPolicy":
        """Create retry policy from dictionary.

        Accepts the snake_case field names as well as ``maxRetries``.
        """
        data = dict(data or {})
        backoff_type = data.get("backoff_type", BackoffType.EXPONENTIAL.value)
        if isinstance(backoff_type, str):
            try:
                backoff_type = BackoffType(backoff_type.lower())
            except ValueError as e:
                raise ArgumentError(f"Unknown backoff type: {backoff_type}") from e

        kwargs: Dict[str, Any] = {
            "enabled": data.get("enabled", True),
            "max_retries": data.get("max_retries", data.get("maxRetries", 3)),
            "backoff_type": backoff_type,
            "initial_delay_ms": data.get("initial_delay_ms", 250),
            "max_delay_ms": data.get("max_delay_ms", 10000),
            "jitter": data.get("jitter", True),
            "retry_on_transport_error": data.get("retry_on_transport_error", True),
        }
        if "retry_on_status" in data:
            kwargs["retry_on_status"] = frozenset(data["retry_on_status"])
        if "retry_methods" in data:
            kwargs["retry_methods"] = frozenset(data["retry_methods"])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert retry policy to dictionary."""
        return {
            "enabled": self.enabled,
            "max_retries": self.max_retries,
            "backoff_type": self.backoff_type.value,
            "initial_delay_ms": self.initial_delay_ms,
            "max_delay_ms": self.max_delay_ms,
            "jitter": self.jitter,
            "retry_on_transport_error": self.retry_on_transport_error,
            "retry_on_status": sorted(self.retry_on_status),
            "retry_methods": sorted(self.retry_methods),
        }


DEFAULT_RETRY_POLICIES = {
    "default": RetryPolicy(),

    "aggressive": RetryPolicy(
        max_retries=5,
        backoff_type=BackoffType.EXPONENTIAL,
        initial_delay_ms=500,
        max_delay_ms=30000,
        retry_on_status=frozenset({429, 502, 503, 504}),
        retry_methods=frozenset({"GET", "PUT", "DELETE"}),
    ),

    "no_retry": RetryPolicy(
        enabled=False,
        max_retries=0,
        backoff_type=BackoffType.FIXED,
        initial_delay_ms=0,
        max_delay_ms=0,
        jitter=False,
    ),
}
