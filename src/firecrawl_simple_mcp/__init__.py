"""Firecrawl Simple MCP - web scraping tools for language models over MCP.

Exposes two Firecrawl Simple operations as MCP tools:

- ``firecrawl_scrape``: scrape one URL as markdown, raw HTML or a screenshot
- ``firecrawl_map``: list a site's URLs as a markdown sitemap

Every tool validates its input, forwards it to the remote API, and returns
a ``{content, isError}`` envelope. Failures never raise; they come back as
error envelopes whose text starts with a category prefix such as
``Validation Error:`` or ``Network Error:``.

Quick Start:
    >>> from firecrawl_simple_mcp import ClientProvider, create_tools, get_settings
    >>>
    >>> tools = create_tools(ClientProvider(get_settings().api))
    >>> envelope = await tools[0].execute({"url": "https://example.com"})
    >>> envelope.is_error
    False

Serving over MCP:
    >>> from firecrawl_simple_mcp.ext.mcp import create_server
    >>> server = create_server(tools, transport_type="sse", port=3003)
    >>> await server.start()
"""

from __future__ import annotations

__version__ = "1.0.0"

from .client import ClientProvider, FirecrawlClient
from .foundation.config import Settings, get_settings, load_settings
from .foundation.core import ResponseEnvelope, TextContent, ToolDefinition, create_tool
from .foundation.errors import (
    ErrorCategory,
    FirecrawlApiError,
    FirecrawlError,
    FirecrawlNetworkError,
    FirecrawlTimeoutError,
    ValidationError,
    format_error_message,
)
from .tools import MapParams, ScrapeParams, create_tools

__all__ = [
    "__version__",
    # Client
    "ClientProvider", "FirecrawlClient",
    # Config
    "Settings", "get_settings", "load_settings",
    # Core
    "ResponseEnvelope", "TextContent", "ToolDefinition", "create_tool",
    # Errors
    "ErrorCategory", "FirecrawlError", "ValidationError", "FirecrawlApiError",
    "FirecrawlNetworkError", "FirecrawlTimeoutError", "format_error_message",
    # Tools
    "MapParams", "ScrapeParams", "create_tools",
]
