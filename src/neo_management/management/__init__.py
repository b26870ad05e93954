"""Resource managers for the organization management API."""

from .organizations_manager import (
    OrganizationsManager,
    ORGANIZATIONS_TEMPLATE,
    ENABLED_CONNECTIONS_TEMPLATE,
    MEMBERS_TEMPLATE,
)

__all__ = [
    "OrganizationsManager",
    "ORGANIZATIONS_TEMPLATE",
    "ENABLED_CONNECTIONS_TEMPLATE",
    "MEMBERS_TEMPLATE",
]
