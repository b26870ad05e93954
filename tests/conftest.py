"""Pytest configuration and fixtures for neo-management tests."""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from neo_management.config.options import ClientOptions
from neo_management.management import OrganizationsManager
from neo_management.rest.retry import BackoffType, RetryPolicy

BASE_URL = "https://api.example.com"


class MockAPI:
    """Fake management API recording every request it receives.

    Responses are taken from ``responses`` in order; once exhausted the
    ``default`` response factory is used.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: List[Any] = []
        self.default: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"ok": True})
        )

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            if callable(response):
                return response(request)
            return response
        return self.default(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1) -> Optional[Any]:
        content = self.requests[index].content
        return json.loads(content) if content else None


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def mock_api():
    """Fake API backing the httpx mock transport."""
    return MockAPI()


@pytest.fixture
def http_client(mock_api):
    """httpx client whose transport is the fake API."""
    return httpx.AsyncClient(transport=httpx.MockTransport(mock_api))


@pytest.fixture
def fast_retry_policy():
    """Retry policy without delays so retry tests run instantly."""
    return RetryPolicy(
        max_retries=2,
        backoff_type=BackoffType.FIXED,
        initial_delay_ms=0,
        max_delay_ms=0,
        jitter=False,
    )


@pytest.fixture
def client_options(fast_retry_policy):
    return ClientOptions(
        base_url=BASE_URL,
        headers={"X-Client": "neo-management-tests"},
        retry=fast_retry_policy,
    )


@pytest.fixture
def manager(client_options, http_client):
    """Organizations manager wired to the fake API."""
    return OrganizationsManager(client_options, http_client=http_client)
