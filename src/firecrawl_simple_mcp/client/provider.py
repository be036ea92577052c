"""Lazily built, reusable remote client handle.

The provider is passed to tool builders explicitly instead of living in
module state, so tests hand tools a provider backed by a stub factory.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

from .firecrawl import FirecrawlClient

if TYPE_CHECKING:
    from firecrawl_simple_mcp.foundation.config import ApiSettings

logger = logging.getLogger("firecrawl_simple_mcp.client")


class RemoteClient(Protocol):
    """Operations the tools require of the remote collaborator."""

    async def scrape_webpage(self, payload: dict[str, object]) -> Any: ...
    async def generate_sitemap(self, payload: dict[str, object]) -> Any: ...


ClientFactory = Callable[["ApiSettings"], RemoteClient]


def default_client_factory(api: ApiSettings) -> FirecrawlClient:
    """Build the HTTP client from loaded API settings."""
    return FirecrawlClient(
        api.url,
        api.key.get_secret_value() if api.key else None,
        timeout=api.timeout_seconds,
    )


class ClientProvider:
    """Holds at most one remote client handle, built on first use.

    Two concurrent first calls may each build a handle; either is valid
    because construction has no side effects. ``reset`` only drops the
    reference, so calls already holding the old handle finish with it.

    Example:
        >>> provider = ClientProvider(get_settings().api)
        >>> provider.get() is provider.get()
        True
        >>> provider.reset()  # next get() builds a fresh client
    """

    __slots__ = ("_api", "_factory", "_client")

    def __init__(self, api: ApiSettings, factory: ClientFactory | None = None) -> None:
        self._api = api
        self._factory: ClientFactory = factory or default_client_factory
        self._client: RemoteClient | None = None

    @property
    def settings(self) -> ApiSettings:
        return self._api

    def get(self) -> RemoteClient:
        """Return the shared handle, constructing it if none exists."""
        if self._client is None:
            logger.debug(f"Creating new Firecrawl client for {self._api.url}")
            self._client = self._factory(self._api)
        return self._client

    def reset(self, api: ApiSettings | None = None) -> None:
        """Discard the handle; optionally switch to new API settings."""
        if api is not None:
            self._api = api
        self._client = None
