"""Tests for client options, environment settings and logging configuration."""

import logging

import pytest

from neo_management.config.logging_config import LoggingConfig, get_log_level_from_verbosity
from neo_management.config.options import ClientOptions
from neo_management.config.settings import ManagementSettings
from neo_management.core.exceptions import (
    ArgumentError,
    ConfigurationError,
    RequestError,
    create_error_response,
)
from neo_management.rest.retry import BackoffType, RetryPolicy
from neo_management.rest.token_provider import StaticTokenProvider, TokenProvider


class TestClientOptions:
    """Typed option validation."""

    def test_defaults(self):
        options = ClientOptions(base_url="https://api.example.com/")

        assert options.base_url == "https://api.example.com"
        assert options.headers == {}
        assert options.retry_policy == RetryPolicy()
        assert options.repeat_params is False

    def test_missing_base_url(self):
        with pytest.raises(ArgumentError, match="Must provide a base URL"):
            ClientOptions()

    @pytest.mark.parametrize("base_url", ["", 0, {"url": "x"}])
    def test_invalid_base_url(self, base_url):
        with pytest.raises(ArgumentError, match="invalid"):
            ClientOptions(base_url=base_url)

    def test_retry_mapping_becomes_policy(self):
        options = ClientOptions(base_url="https://api.example.com", retry={"max_retries": 1})
        assert isinstance(options.retry, RetryPolicy)
        assert options.retry.max_attempts == 2

    def test_invalid_retry_type(self):
        with pytest.raises(ArgumentError):
            ClientOptions(base_url="https://api.example.com", retry=3)

    def test_invalid_headers(self):
        with pytest.raises(ArgumentError):
            ClientOptions(base_url="https://api.example.com", headers=["X-Test"])

    def test_invalid_timeout(self):
        with pytest.raises(ArgumentError):
            ClientOptions(base_url="https://api.example.com", timeout=0)

    def test_from_dict_with_query_options(self):
        provider = StaticTokenProvider("abc")
        options = ClientOptions.from_dict({
            "baseUrl": "https://api.example.com",
            "tokenProvider": provider,
            "query": {"repeatParams": True},
        })

        assert options.token_provider is provider
        assert options.repeat_params is True

    def test_from_dict_requires_mapping(self):
        with pytest.raises(ArgumentError, match="Must provide manager options"):
            ClientOptions.from_dict(None)


class TestManagementSettings:
    """Environment driven settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NEO_MANAGEMENT_BASE_URL", "https://env.example.com")
        monkeypatch.setenv("NEO_MANAGEMENT_API_TOKEN", "env-token")
        monkeypatch.setenv("NEO_MANAGEMENT_RETRY_BACKOFF_TYPE", "LINEAR")
        monkeypatch.setenv("NEO_MANAGEMENT_RETRY_MAX_RETRIES", "6")

        options = ManagementSettings(_env_file=None).to_client_options()

        assert options.base_url == "https://env.example.com"
        assert isinstance(options.token_provider, StaticTokenProvider)
        assert options.retry.backoff_type == BackoffType.LINEAR
        assert options.retry.max_retries == 6

    @pytest.mark.asyncio
    async def test_token_is_handed_to_provider(self):
        settings = ManagementSettings(_env_file=None, base_url="https://api.example.com", api_token="s3cret")
        provider = settings.to_client_options().token_provider

        assert isinstance(provider, TokenProvider)
        assert await provider.get_access_token() == "s3cret"
        assert "s3cret" not in repr(provider)

    def test_invalid_backoff_type(self):
        settings = ManagementSettings(_env_file=None, base_url="https://api.example.com", retry_backoff_type="sideways")
        with pytest.raises(ConfigurationError, match="Invalid retry settings"):
            settings.to_client_options()

    def test_missing_base_url(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ManagementSettings(_env_file=None).to_client_options()
        assert isinstance(exc_info.value.__cause__, ArgumentError)


class TestLoggingConfig:
    """Environment driven logging setup."""

    @pytest.mark.parametrize("verbosity,level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("debug", "DEBUG"),
        ("nonsense", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_log_level_overrides_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")

        config = LoggingConfig.build()

        assert config["loggers"]["neo_management"]["level"] == "DEBUG"

    def test_http_libraries_kept_quiet(self, monkeypatch):
        monkeypatch.delenv("ENABLE_HTTP_LOGGING", raising=False)
        config = LoggingConfig.build()
        assert config["loggers"]["httpx"]["level"] == "ERROR"

        monkeypatch.setenv("ENABLE_HTTP_LOGGING", "true")
        assert "httpx" not in LoggingConfig.build()["loggers"]

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        config = LoggingConfig.build()
        assert config["formatters"]["default"]["format"].startswith('{"time"')

    def test_set_module_level(self):
        LoggingConfig.set_module_level("neo_management.tests", "info")
        assert logging.getLogger("neo_management.tests").level == logging.INFO


class TestErrors:
    """Error payload rendering."""

    def test_create_error_response(self):
        error = RequestError("No organization found", status_code=404, error_code="Not Found")

        assert create_error_response(error) == {
            "error": {
                "code": "Not Found",
                "message": "No organization found",
                "details": {},
                "type": "RequestError",
            }
        }

    def test_error_code_defaults_to_class_name(self):
        assert ArgumentError("bad").error_code == "ArgumentError"
