"""Retry policy components."""

from .retry_policy import (
    BackoffType,
    RetryPolicy,
    DEFAULT_RETRY_POLICIES,
    MAX_REQUEST_RETRY_COUNT,
)

__all__ = [
    "BackoffType",
    "RetryPolicy",
    "DEFAULT_RETRY_POLICIES",
    "MAX_REQUEST_RETRY_COUNT",
]
