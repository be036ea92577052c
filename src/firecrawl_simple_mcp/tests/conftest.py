"""Shared fixtures: a recording stub for the remote client and a provider around it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from firecrawl_simple_mcp.client import ClientProvider
from firecrawl_simple_mcp.foundation.config import ApiSettings, clear_settings_cache


@dataclass
class StubClient:
    """In-memory stand-in for FirecrawlClient that records every payload."""

    scrape_result: Any = None
    map_result: Any = None
    raises: Exception | None = None
    scrape_calls: list[dict[str, object]] = field(default_factory=list)
    map_calls: list[dict[str, object]] = field(default_factory=list)

    @property
    def call_count(self) -> int:
        return len(self.scrape_calls) + len(self.map_calls)

    async def scrape_webpage(self, payload: dict[str, object]) -> Any:
        self.scrape_calls.append(payload)
        if self.raises is not None:
            raise self.raises
        return self.scrape_result

    async def generate_sitemap(self, payload: dict[str, object]) -> Any:
        self.map_calls.append(payload)
        if self.raises is not None:
            raise self.raises
        return self.map_result


@pytest.fixture
def stub_client() -> StubClient:
    return StubClient()


@pytest.fixture
def api_settings() -> ApiSettings:
    return ApiSettings.model_construct(url="http://firecrawl.test/v1", key=None, timeout=30000)


@pytest.fixture
def provider(api_settings: ApiSettings, stub_client: StubClient) -> ClientProvider:
    return ClientProvider(api_settings, factory=lambda _api: stub_client)


@pytest.fixture
def package_logger():
    """Restore the package root logger after a test installs handlers on it."""
    import logging

    root = logging.getLogger("firecrawl_simple_mcp")
    saved = (list(root.handlers), root.level, root.propagate)
    yield root
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    root.propagate = saved[2]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate tests from FIRECRAWL_* variables in the developer's shell."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("FIRECRAWL_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()
