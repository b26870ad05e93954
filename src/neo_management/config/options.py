"""Client options shared by every resource client a manager builds."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from ..core.exceptions import ArgumentError
from ..rest.retry import RetryPolicy
from ..rest.token_provider import TokenProvider

DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass
class ClientOptions:
    """Typed options for the management clients.

    Validated once at construction; an invalid base URL raises ArgumentError
    before any client exists.
    """

    base_url: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    token_provider: Optional[TokenProvider] = None
    retry: Union[RetryPolicy, Mapping[str, Any], None] = None
    repeat_params: bool = False
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        if self.base_url is None:
            raise ArgumentError("Must provide a base URL for the API")
        if not isinstance(self.base_url, str) or len(self.base_url) == 0:
            raise ArgumentError("The provided base URL is invalid")
        self.base_url = self.base_url.rstrip("/")

        if self.headers is None:
            self.headers = {}
        elif not isinstance(self.headers, Mapping):
            raise ArgumentError("Headers must be a mapping")
        else:
            self.headers = dict(self.headers)

        if self.retry is None:
            self.retry = RetryPolicy()
        elif isinstance(self.retry, Mapping):
            self.retry = RetryPolicy.from_dict(self.retry)
        elif not isinstance(self.retry, RetryPolicy):
            raise ArgumentError("Retry configuration must be a RetryPolicy or a mapping")

        if self.timeout is not None and self.timeout <= 0:
            raise ArgumentError("timeout must be positive")

    @property
    def retry_policy(self) -> RetryPolicy:
        return self.retry

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientOptions":
        """Create options from a mapping.

        Both snake_case keys and the camelCase keys of the HTTP management
        SDKs (``baseUrl``, ``tokenProvider``, ``query.repeatParams``) work.
        """
        if data is None or not isinstance(data, Mapping):
            raise ArgumentError("Must provide manager options")

        query = data.get("query") or {}
        return cls(
            base_url=data.get("base_url", data.get("baseUrl")),
            headers=data.get("headers") or {},
            token_provider=data.get("token_provider", data.get("tokenProvider")),
            retry=data.get("retry"),
            repeat_params=data.get("repeat_params", query.get("repeatParams", False)),
            timeout=data.get("timeout", DEFAULT_TIMEOUT_SECONDS),
        )
