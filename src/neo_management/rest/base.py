"""Shared verb surface for templated resource clients.

Both the plain HTTP client and the retrying decorator implement the same two
hooks, ``build_request`` and ``send``; the five CRUD verbs and the
callback/awaitable call styles are implemented once here.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Set, Tuple

# Error-first completion handler: callback(error, result)
Callback = Callable[[Optional[BaseException], Any], None]


@dataclass(frozen=True)
class ResolvedRequest:
    """A concrete request produced from a template and call parameters."""

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Tuple[Tuple[str, str], ...] = ()
    body: Any = None


class BaseResourceClient(ABC):
    """Uniform CRUD verbs over one endpoint template.

    Every verb resolves its request synchronously, so argument errors surface
    to the caller immediately in both call styles. The request is then
    scheduled as a task on the running loop. Without ``callback`` the verb
    returns that task; with it ``None`` is returned and the callback receives
    ``(error, result)``. Dropping the returned task does not cancel the call
    or its retries.

    Both styles need a running event loop; calling a verb from plain
    synchronous code raises ``RuntimeError``.
    """

    def __init__(self):
        self._pending: Set[asyncio.Task] = set()

    @abstractmethod
    def build_request(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        item: bool = False,
    ) -> ResolvedRequest:
        """Resolve the endpoint template into a concrete request."""

    @abstractmethod
    async def send(self, request: ResolvedRequest) -> Any:
        """Issue a resolved request and return the decoded response."""

    def create(
        self,
        params: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        *,
        callback: Optional[Callback] = None,
    ) -> Optional["asyncio.Task[Any]"]:
        request = self.build_request("POST", params, data)
        return self._dispatch(request, callback)

    def get_all(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        callback: Optional[Callback] = None,
    ) -> Optional["asyncio.Task[Any]"]:
        request = self.build_request("GET", params)
        return self._dispatch(request, callback)

    def get(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        callback: Optional[Callback] = None,
    ) -> Optional["asyncio.Task[Any]"]:
        request = self.build_request("GET", params, item=True)
        return self._dispatch(request, callback)

    def update(
        self,
        params: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        *,
        callback: Optional[Callback] = None,
    ) -> Optional["asyncio.Task[Any]"]:
        """Partial update: only the supplied fields change."""
        request = self.build_request("PATCH", params, data, item=True)
        return self._dispatch(request, callback)

    def delete(
        self,
        params: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        *,
        callback: Optional[Callback] = None,
    ) -> Optional["asyncio.Task[Any]"]:
        """Delete the item, or unlink what ``data`` describes when given."""
        request = self.build_request("DELETE", params, data, item=True)
        return self._dispatch(request, callback)

    def _dispatch(
        self,
        request: ResolvedRequest,
        callback: Optional[Callback],
    ) -> Optional["asyncio.Task[Any]"]:
        loop = asyncio.get_running_loop()
        task = loop.create_task(self.send(request))
        self._pending.add(task)

        if callback is None:
            task.add_done_callback(self._forget)
            return task

        def _report(done: asyncio.Task) -> None:
            self._pending.discard(done)
            if done.cancelled():
                callback(asyncio.CancelledError(), None)
            elif done.exception() is not None:
                callback(done.exception(), None)
            else:
                callback(None, done.result())

        task.add_done_callback(_report)
        return None

    def _forget(self, done: asyncio.Task) -> None:
        self._pending.discard(done)
        # Marks the error as retrieved; a dropped result must not warn at shutdown.
        if not done.cancelled():
            done.exception()


def merge_headers(*sources: Optional[Mapping[str, str]]) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    for source in sources:
        if source:
            headers.update(source)
    return headers
