"""Remote Firecrawl Simple API access."""

from .firecrawl import FirecrawlClient
from .provider import ClientFactory, ClientProvider, RemoteClient, default_client_factory

__all__ = ["ClientFactory", "ClientProvider", "FirecrawlClient", "RemoteClient", "default_client_factory"]
