"""Organizations manager.

Composes three retrying resource clients, one per URL shape of the
organizations API, and exposes the curated organization, enabled-connection
and member operations on top of them.
"""

import asyncio
from typing import Any, Mapping, Optional, Union

import httpx

from ..config.options import ClientOptions
from ..config.settings import ManagementSettings
from ..core.exceptions import ArgumentError
from ..rest.base import Callback
from ..rest.resource_client import ResourceClient
from ..rest.retry_client import RetryResourceClient

ORGANIZATIONS_TEMPLATE = "/organizations/:id"
ENABLED_CONNECTIONS_TEMPLATE = "/organizations/:id/enabled_connections/:connection_id"
MEMBERS_TEMPLATE = "/organizations/:id/members"

Params = Optional[Mapping[str, Any]]
Pending = Optional["asyncio.Task[Any]"]


def _require_string_param(params: Mapping[str, Any], key: str, label: str) -> None:
    value = params.get(key)
    if not value:
        raise ArgumentError(f"The {label} passed in params cannot be None or empty")
    if not isinstance(value, str):
        raise ArgumentError(f"The {label} has to be a string")


class OrganizationsManager:
    """CRUD operations on organizations and their sub-resources.

    Every method returns a scheduled task, or ``None`` when a ``callback`` is
    given. Both styles need a running event loop.
    Argument errors are always raised synchronously.

    Example:
        async with OrganizationsManager({"base_url": "https://tenant.example.com/api/v2"}) as orgs:
            org = await orgs.create({"name": "acme"})
            await orgs.add_enabled_connection({"id": org["id"]}, {"connection_id": "con_1"})
    """

    def __init__(
        self,
        options: Union[ClientOptions, Mapping[str, Any], None],
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the manager.

        Args:
            options: ClientOptions or a mapping accepted by ClientOptions.from_dict
            http_client: Shared httpx client; one is created and owned when omitted

        Raises:
            ArgumentError: If options are missing or the base URL is invalid
        """
        if isinstance(options, ClientOptions):
            self.options = options
        elif isinstance(options, Mapping):
            self.options = ClientOptions.from_dict(options)
        else:
            raise ArgumentError("Must provide manager options")

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=self.options.timeout)

        self.organizations = self._build_client(ORGANIZATIONS_TEMPLATE)
        self.connections = self._build_client(ENABLED_CONNECTIONS_TEMPLATE)
        self.members = self._build_client(MEMBERS_TEMPLATE)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ManagementSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "OrganizationsManager":
        """Build a manager from environment settings."""
        settings = settings or ManagementSettings()
        return cls(settings.to_client_options(), http_client=http_client)

    def _build_client(self, template: str) -> RetryResourceClient:
        client = ResourceClient(
            self.options.base_url,
            template,
            http_client=self._http_client,
            headers=self.options.headers,
            token_provider=self.options.token_provider,
            repeat_params=False,
        )
        return RetryResourceClient(client, self.options.retry_policy)

    # Organizations

    def create(self, data: Any, *, callback: Optional[Callback] = None) -> Pending:
        """Create a new organization.

        Args:
            data: Organization data, e.g. ``{"name": "acme", "display_name": "Acme"}``
            callback: Optional completion handler ``callback(error, result)``
        """
        return self.organizations.create({}, data, callback=callback)

    def get_all(self, params: Params = None, *, callback: Optional[Callback] = None) -> Pending:
        """List organizations.

        Args:
            params: Query parameters such as ``per_page``, ``page`` (zero indexed)
                or ``include_totals``
            callback: Optional completion handler
        """
        return self.organizations.get_all(params, callback=callback)

    def get(self, params: Params, *, callback: Optional[Callback] = None) -> Pending:
        """Get an organization by ``params["id"]``."""
        return self.organizations.get(params, callback=callback)

    def update(self, params: Params, data: Any, *, callback: Optional[Callback] = None) -> Pending:
        """Partially update the organization identified by ``params["id"]``."""
        return self.organizations.update(params, data, callback=callback)

    def delete(self, params: Params, *, callback: Optional[Callback] = None) -> Pending:
        """Delete the organization identified by ``params["id"]``."""
        return self.organizations.delete(params, callback=callback)

    # Enabled connections

    def get_enabled_connections(self, params: Params, *, callback: Optional[Callback] = None) -> Pending:
        """List the connections enabled for organization ``params["id"]``."""
        return self.connections.get_all(params, callback=callback)

    def get_enabled_connection(self, params: Params, *, callback: Optional[Callback] = None) -> Pending:
        """Get one enabled connection by ``params["id"]`` and ``params["connection_id"]``."""
        return self.connections.get(params, callback=callback)

    def add_enabled_connection(
        self,
        params: Params,
        data: Any = None,
        *,
        callback: Optional[Callback] = None,
    ) -> Pending:
        """Enable a connection for an organization.

        Args:
            params: ``{"id": organization_id}``
            data: ``{"connection_id": ..., "assign_membership_on_login": bool}``
            callback: Optional completion handler

        Raises:
            ArgumentError: If ``params["id"]`` is missing or not a string
        """
        params = params or {}
        data = data or {}
        _require_string_param(params, "id", "organization ID")

        return self.connections.create(params, data, callback=callback)

    def update_enabled_connection(
        self,
        params: Params,
        data: Any,
        *,
        callback: Optional[Callback] = None,
    ) -> Pending:
        """Update how a connection is enabled for an organization.

        Raises:
            ArgumentError: If ``id`` or ``connection_id`` is missing or not a string
        """
        params = params or {}
        _require_string_param(params, "id", "organization ID")
        _require_string_param(params, "connection_id", "connection ID")

        return self.connections.update(params, data, callback=callback)

    def remove_enabled_connection(self, params: Params, *, callback: Optional[Callback] = None) -> Pending:
        """Disable a connection for an organization.

        Args:
            params: ``{"id": organization_id, "connection_id": connection_id}``
            callback: Optional completion handler

        Raises:
            ArgumentError: If ``id`` or ``connection_id`` is missing or not a string
        """
        params = params or {}
        _require_string_param(params, "id", "organization ID")
        _require_string_param(params, "connection_id", "connection ID")

        return self.connections.delete(params, {}, callback=callback)

    # Members

    def get_members(self, params: Params, *, callback: Optional[Callback] = None) -> Pending:
        """List the members of organization ``params["id"]``; accepts paging params."""
        return self.members.get_all(params, callback=callback)

    def add_members(self, params: Params, data: Any, *, callback: Optional[Callback] = None) -> Pending:
        """Add members, e.g. ``data={"members": ["user_1", "user_2"]}``."""
        return self.members.create(params, data, callback=callback)

    def remove_members(self, params: Params, data: Any, *, callback: Optional[Callback] = None) -> Pending:
        """Remove the members listed in ``data`` from the organization."""
        return self.members.delete(params, data, callback=callback)

    # Lifecycle

    async def aclose(self) -> None:
        """Close the shared HTTP client if the manager created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "OrganizationsManager":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
