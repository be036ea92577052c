"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files.

Example:
    >>> from firecrawl_simple_mcp.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.api.url
    'http://localhost:3002/v1'
    >>> settings.server.transport_type
    'stdio'

    # Or with environment variables:
    # FIRECRAWL_API_URL=https://scraper.internal/v1
    # FIRECRAWL_API_KEY=fc-xxx
    # FIRECRAWL_TRANSPORT_TYPE=sse
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    SecretStr,
    ValidationError,
    computed_field,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("firecrawl_simple_mcp.config")

DEFAULT_API_URL = "http://localhost:3002/v1"

Transport = Literal["stdio", "sse"]
LogLevel = Literal["DEBUG", "INFO", "WARN", "ERROR"]


class ApiSettings(BaseSettings):
    """Remote Firecrawl Simple API connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="FIRECRAWL_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    url: str = Field(default=DEFAULT_API_URL, description="Base URL of the Firecrawl API")
    key: SecretStr | None = Field(default=None, description="Optional API key", repr=False)
    timeout: PositiveInt = Field(default=30000, description="Request timeout in milliseconds")

    @field_validator("url")
    @classmethod
    def _validate_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("key", mode="before")
    @classmethod
    def _blank_key_is_none(cls, v: object) -> object:
        return None if isinstance(v, str) and not v.strip() else v

    @computed_field
    @property
    def timeout_seconds(self) -> float:
        """Timeout converted for httpx."""
        return self.timeout / 1000


class ServerSettings(BaseSettings):
    """MCP server hosting settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    port: PositiveInt = Field(
        default=3003,
        validation_alias="FIRECRAWL_SERVER_PORT",
    )
    transport_type: Transport = Field(
        default="stdio",
        validation_alias="FIRECRAWL_TRANSPORT_TYPE",
    )
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias="FIRECRAWL_LOG_LEVEL",
    )

    @field_validator("transport_type", mode="before")
    @classmethod
    def _lower_transport(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v


class Settings(BaseModel):
    """Root settings for the Firecrawl Simple MCP server.

    Example environment variables:
        FIRECRAWL_API_URL=http://localhost:3002/v1
        FIRECRAWL_API_KEY=fc-xxx
        FIRECRAWL_API_TIMEOUT=30000
        FIRECRAWL_SERVER_PORT=3003
        FIRECRAWL_TRANSPORT_TYPE=stdio
        FIRECRAWL_LOG_LEVEL=INFO
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(default_factory=lambda: _package_version())
    api: ApiSettings = Field(default_factory=lambda: ApiSettings.model_construct())
    server: ServerSettings = Field(default_factory=lambda: ServerSettings.model_construct())


def _package_version() -> str:
    from firecrawl_simple_mcp import __version__
    return __version__


_SECTIONS: tuple[tuple[str, type[BaseSettings]], ...] = (
    ("api", ApiSettings),
    ("server", ServerSettings),
)


def load_settings() -> Settings:
    """Load settings from the environment, falling back to defaults.

    Invalid values never abort startup: every violation is logged as
    ``<section>.<field>: <message>`` and the declared defaults are used
    for the whole configuration instead.
    """
    loaded: dict[str, BaseSettings] = {}
    problems: list[str] = []
    for name, section in _SECTIONS:
        try:
            loaded[name] = section()
        except ValidationError as e:
            problems.extend(
                f"  - {name}.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )

    if not problems:
        return Settings(**loaded)

    details = "\n".join(problems)
    logger.error(f"Configuration validation errors:\n{details}")
    logger.info("Using default configuration")
    return Settings()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance (cached)."""
    return load_settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
