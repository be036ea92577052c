"""Tests for the lazily built client handle."""

from __future__ import annotations

from pydantic import SecretStr

from firecrawl_simple_mcp.client import ClientProvider, FirecrawlClient
from firecrawl_simple_mcp.client.provider import default_client_factory
from firecrawl_simple_mcp.foundation.config import ApiSettings


def _api(url: str = "http://firecrawl.test/v1", key: str | None = None) -> ApiSettings:
    return ApiSettings.model_construct(url=url, key=SecretStr(key) if key else None, timeout=30000)


def test_handle_built_lazily_and_reused() -> None:
    built: list[ApiSettings] = []

    def factory(api: ApiSettings) -> object:
        built.append(api)
        return object()

    provider = ClientProvider(_api(), factory=factory)
    assert built == []

    first = provider.get()
    assert provider.get() is first
    assert len(built) == 1


def test_reset_builds_fresh_handle() -> None:
    provider = ClientProvider(_api(), factory=lambda api: object())
    first = provider.get()

    provider.reset()

    assert provider.get() is not first


def test_reset_with_new_settings() -> None:
    provider = ClientProvider(_api())
    provider.get()

    provider.reset(_api("http://other.test/v1"))

    client = provider.get()
    assert isinstance(client, FirecrawlClient)
    assert client.api_url == "http://other.test/v1"
    assert provider.settings.url == "http://other.test/v1"


def test_default_factory_uses_settings() -> None:
    client = default_client_factory(_api(key="fc-abc"))
    assert isinstance(client, FirecrawlClient)
    assert client.api_url == "http://firecrawl.test/v1"
    assert client.has_api_key


def test_default_factory_without_key() -> None:
    assert not default_client_factory(_api()).has_api_key
