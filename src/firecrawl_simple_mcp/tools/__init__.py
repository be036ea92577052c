"""Firecrawl tools exposed over MCP.

Quick Start:
    >>> from firecrawl_simple_mcp.client import ClientProvider
    >>> from firecrawl_simple_mcp.foundation.config import get_settings
    >>> from firecrawl_simple_mcp.tools import create_tools
    >>>
    >>> tools = create_tools(ClientProvider(get_settings().api))
    >>> [t.name for t in tools]
    ['firecrawl_scrape', 'firecrawl_map']
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .map import MapParams, build_map_payload, build_map_tool, extract_links, format_sitemap
from .scrape import ScrapeParams, build_scrape_payload, build_scrape_tool

if TYPE_CHECKING:
    from pydantic import BaseModel

    from firecrawl_simple_mcp.client import ClientProvider
    from firecrawl_simple_mcp.foundation.core import ToolDefinition


def create_tools(clients: ClientProvider) -> list[ToolDefinition[BaseModel]]:
    """Build the tool catalog in its published order."""
    tools: list[ToolDefinition[BaseModel]] = [
        build_scrape_tool(clients),  # type: ignore[list-item]
        build_map_tool(clients),  # type: ignore[list-item]
    ]
    ensure_unique_names(tools)
    return tools


def ensure_unique_names(tools: list[ToolDefinition[BaseModel]]) -> None:
    """Raise ValueError if two tools share a name."""
    seen: set[str] = set()
    for tool in tools:
        if tool.name in seen:
            raise ValueError(f"Duplicate tool name detected: {tool.name}")
        seen.add(tool.name)


__all__ = [
    "MapParams",
    "ScrapeParams",
    "build_map_payload",
    "build_map_tool",
    "build_scrape_payload",
    "build_scrape_tool",
    "create_tools",
    "ensure_unique_names",
    "extract_links",
    "format_sitemap",
]
