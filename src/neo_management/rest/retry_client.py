"""Retrying decorator for templated resource clients."""

import asyncio
import logging
from typing import Any, Mapping, Optional, Union

from .base import BaseResourceClient, ResolvedRequest
from .retry import RetryPolicy

logger = logging.getLogger(__name__)


class RetryResourceClient(BaseResourceClient):
    """Wraps a resource client and re-issues failed requests per a RetryPolicy.

    The request is resolved once by the wrapped client and the very same
    ResolvedRequest is sent on every attempt. Which failures and which HTTP
    methods are retryable is decided by the policy, not here.
    """

    def __init__(
        self,
        client: BaseResourceClient,
        policy: Union[RetryPolicy, Mapping[str, Any], None] = None,
    ):
        super().__init__()
        self.client = client
        if policy is None or isinstance(policy, RetryPolicy):
            self.policy = policy or RetryPolicy()
        else:
            self.policy = RetryPolicy.from_dict(policy)

    def build_request(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        item: bool = False,
    ) -> ResolvedRequest:
        return self.client.build_request(method, params, data, item=item)

    async def send(self, request: ResolvedRequest) -> Any:
        attempt = 0
        while True:
            attempt += 1
            try:
                return await self.client.send(request)
            except Exception as error:
                if not self.policy.should_retry(attempt, request.method, error):
                    if attempt > 1:
                        logger.error(
                            "%s %s failed after %d attempts: %s",
                            request.method, request.path, attempt, error,
                        )
                    raise

                delay_ms = self.policy.calculate_delay(attempt)
                logger.warning(
                    "%s %s failed (attempt %d/%d), retrying in %dms: %s",
                    request.method, request.path, attempt,
                    self.policy.max_attempts, delay_ms, error,
                )
                if delay_ms > 0:
                    await asyncio.sleep(delay_ms / 1000.0)

    async def aclose(self) -> None:
        aclose = getattr(self.client, "aclose", None)
        if aclose is not None:
            await aclose()

    def __repr__(self) -> str:
        return f"RetryResourceClient({self.client!r}, max_attempts={self.policy.max_attempts})"
