"""Configuration for neo-management: client options, settings and logging."""

from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

from .options import (
    ClientOptions,
    DEFAULT_TIMEOUT_SECONDS,
)

from .settings import (
    ManagementSettings,
    get_settings,
)

__all__ = [
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    "ClientOptions",
    "DEFAULT_TIMEOUT_SECONDS",
    "ManagementSettings",
    "get_settings",
]
