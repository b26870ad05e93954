"""Templated REST client backed by httpx.

One client owns one endpoint template and issues the five CRUD verbs against
it. Transport errors and non-2xx responses are turned into RequestError.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import httpx

from ..core.exceptions import RequestError
from .base import BaseResourceClient, ResolvedRequest, merge_headers
from .endpoint_template import EndpointTemplate
from .token_provider import TokenProvider

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(
    params: Mapping[str, Any],
    repeat_params: bool = False,
) -> List[Tuple[str, str]]:
    """Turn leftover call parameters into query pairs.

    ``None`` values are dropped. Sequence values become ``key=a,b`` unless
    ``repeat_params`` is set, in which case the key is repeated.
    """
    query: List[Tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            items = [_stringify(item) for item in value if item is not None]
            if repeat_params:
                query.extend((key, item) for item in items)
            else:
                query.append((key, ",".join(items)))
        else:
            query.append((key, _stringify(value)))
    return query


class ResourceClient(BaseResourceClient):
    """CRUD client for one endpoint template under a base URL."""

    def __init__(
        self,
        base_url: str,
        template: Union[str, EndpointTemplate],
        http_client: Optional[httpx.AsyncClient] = None,
        headers: Optional[Mapping[str, str]] = None,
        token_provider: Optional[TokenProvider] = None,
        repeat_params: bool = False,
        timeout: float = 10.0,
    ):
        """Initialize the client.

        Args:
            base_url: Root URL every template path is appended to
            template: Endpoint template, e.g. ``/organizations/:id``
            http_client: Shared httpx client; one is created when omitted
            headers: Headers sent with every request
            token_provider: Source of bearer tokens, if the API needs one
            repeat_params: Repeat array-valued query keys instead of joining
            timeout: Timeout for a client created here
        """
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.template = template if isinstance(template, EndpointTemplate) else EndpointTemplate(template)
        self._headers = dict(headers or {})
        self._token_provider = token_provider
        self._repeat_params = repeat_params

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def url_template(self) -> str:
        return f"{self.base_url}{self.template.pattern}"

    def build_request(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        item: bool = False,
    ) -> ResolvedRequest:
        path, remaining = self.template.resolve(params, require_all=item)
        return ResolvedRequest(
            method=method.upper(),
            path=path,
            headers=dict(self._headers),
            query=tuple(encode_query(remaining, self._repeat_params)),
            body=data,
        )

    async def _auth_headers(self) -> Dict[str, str]:
        if self._token_provider is None:
            return {}
        token = await self._token_provider.get_access_token()
        return {"Authorization": f"Bearer {token}"}

    async def send(self, request: ResolvedRequest) -> Any:
        url = f"{self.base_url}{request.path}"
        headers = merge_headers(request.headers, await self._auth_headers())

        logger.debug("Sending %s %s", request.method, url)
        try:
            response = await self._http_client.request(
                request.method,
                url,
                params=list(request.query),
                headers=headers,
                json=request.body,
            )
        except httpx.RequestError as e:
            # Decoding and redirect failures are not retried as transport errors.
            raise RequestError(
                f"{request.method} {url} failed: {e.__class__.__name__}: {e}",
                error_code=e.__class__.__name__,
                method=request.method,
                url=url,
                transport_error=isinstance(e, httpx.TransportError),
            ) from e

        if response.is_success:
            return self._decode(response)

        raise self._error_from_response(request, url, response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _error_from_response(
        request: ResolvedRequest,
        url: str,
        response: httpx.Response,
    ) -> RequestError:
        try:
            body = response.json()
        except ValueError:
            body = response.text

        message = response.reason_phrase or f"HTTP {response.status_code}"
        error_code = None
        if isinstance(body, dict):
            message = body.get("message") or body.get("error_description") or message
            error_code = body.get("errorCode") or body.get("error")

        logger.debug("%s %s returned %s", request.method, url, response.status_code)
        return RequestError(
            message,
            status_code=response.status_code,
            error_code=error_code,
            method=request.method,
            url=url,
            headers=dict(response.headers),
            body=body,
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    def __repr__(self) -> str:
        return f"ResourceClient({self.url_template!r})"
