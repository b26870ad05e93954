"""Neo-Management - async client for the organization management API.

Templated REST clients with transparent retries, composed into resource
managers such as OrganizationsManager.
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .config import (
    ClientOptions,
    ManagementSettings,
    get_settings,
)

from .core.exceptions import (
    NeoManagementError,
    ConfigurationError,
    ValidationError,
    ArgumentError,
    ExternalServiceError,
    RequestError,
    create_error_response,
)

from .rest import (
    EndpointTemplate,
    ResolvedRequest,
    ResourceClient,
    RetryResourceClient,
    RetryPolicy,
    BackoffType,
    StaticTokenProvider,
    TokenProvider,
)

from .management import OrganizationsManager

__all__ = [
    "__version__",
    "setup_logging",
    "ClientOptions",
    "ManagementSettings",
    "get_settings",
    "NeoManagementError",
    "ConfigurationError",
    "ValidationError",
    "ArgumentError",
    "ExternalServiceError",
    "RequestError",
    "create_error_response",
    "EndpointTemplate",
    "ResolvedRequest",
    "ResourceClient",
    "RetryResourceClient",
    "RetryPolicy",
    "BackoffType",
    "StaticTokenProvider",
    "TokenProvider",
    "OrganizationsManager",
]
