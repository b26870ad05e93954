"""Templated REST clients: endpoint templates, transport and retry layering."""

from .endpoint_template import EndpointTemplate
from .base import BaseResourceClient, Callback, ResolvedRequest
from .resource_client import ResourceClient, encode_query
from .retry import BackoffType, RetryPolicy, DEFAULT_RETRY_POLICIES
from .retry_client import RetryResourceClient
from .token_provider import StaticTokenProvider, TokenProvider

__all__ = [
    "EndpointTemplate",
    "BaseResourceClient",
    "Callback",
    "ResolvedRequest",
    "ResourceClient",
    "encode_query",
    "BackoffType",
    "RetryPolicy",
    "DEFAULT_RETRY_POLICIES",
    "RetryResourceClient",
    "StaticTokenProvider",
    "TokenProvider",
]
