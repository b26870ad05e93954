"""Credential sources for the management API.

Token acquisition itself lives outside this library; a provider only has to
hand back a bearer token when a request is about to be sent.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenProvider(Protocol):
    """Anything that can supply an access token for the next request."""

    async def get_access_token(self) -> str:
        ...


class StaticTokenProvider:
    """Token provider returning a fixed, pre-issued token."""

    def __init__(self, token: str):
        if not token or not isinstance(token, str):
            raise ValueError("Access token must be a non-empty string")
        self._token = token

    async def get_access_token(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return "StaticTokenProvider(token=***)"
