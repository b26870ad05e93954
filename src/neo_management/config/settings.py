"""
Environment-driven settings for the management client.

Values come from ``NEO_MANAGEMENT_*`` environment variables or a ``.env`` file
and are turned into ClientOptions for the managers.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ArgumentError, ConfigurationError
from ..rest.retry import BackoffType, RetryPolicy
from ..rest.token_provider import StaticTokenProvider
from .options import DEFAULT_TIMEOUT_SECONDS, ClientOptions


class ManagementSettings(BaseSettings):
    """Settings for talking to the organization management API."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_MANAGEMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: Optional[str] = Field(default=None, description="Base URL of the management API")
    api_token: Optional[SecretStr] = Field(default=None, description="Pre-issued bearer token")
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    # Retry Configuration
    retry_enabled: bool = True
    retry_max_retries: int = Field(default=3, ge=0)
    retry_backoff_type: str = BackoffType.EXPONENTIAL.value
    retry_initial_delay_ms: int = Field(default=250, ge=0)
    retry_max_delay_ms: int = Field(default=10000, ge=0)

    def retry_policy(self) -> RetryPolicy:
        try:
            return RetryPolicy(
                enabled=self.retry_enabled,
                max_retries=self.retry_max_retries,
                backoff_type=BackoffType(self.retry_backoff_type.lower()),
                initial_delay_ms=self.retry_initial_delay_ms,
                max_delay_ms=self.retry_max_delay_ms,
            )
        except (ValueError, ArgumentError) as e:
            raise ConfigurationError(f"Invalid retry settings: {e}") from e

    def to_client_options(self) -> ClientOptions:
        """Build validated client options from these settings.

        Raises:
            ConfigurationError: If the settings do not form valid options
        """
        token_provider = None
        if self.api_token is not None:
            token_provider = StaticTokenProvider(self.api_token.get_secret_value())

        retry = self.retry_policy()
        try:
            return ClientOptions(
                base_url=self.base_url,
                token_provider=token_provider,
                retry=retry,
                timeout=self.timeout,
            )
        except ArgumentError as e:
            raise ConfigurationError(
                f"Invalid management settings: {e.message}",
                details={"base_url": self.base_url},
            ) from e


@lru_cache()
def get_settings() -> ManagementSettings:
    """Get cached settings instance."""
    return ManagementSettings()
