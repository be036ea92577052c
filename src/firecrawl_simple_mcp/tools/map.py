"""Firecrawl map tool: list the URLs of a site as a markdown sitemap.

The remote map endpoint answers ``{"success": bool, "links": [...]}``.
That is the only result shape accepted; anything without a boolean
``success`` flag is rejected as a broken upstream contract.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from firecrawl_simple_mcp.client import ClientProvider
from firecrawl_simple_mcp.foundation.core import (
    ResponseEnvelope,
    ToolDefinition,
    check_absolute_url,
    create_tool,
    text_response,
)
from firecrawl_simple_mcp.foundation.errors import ValidationError

DEFAULT_MAP_LIMIT = 5000


class MapParams(BaseModel):
    """Input parameters for ``firecrawl_map``."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore", populate_by_name=True)

    url: str = Field(..., description="The URL to start mapping from (required)")
    search: str | None = Field(default=None, description="Search query to use for mapping")
    ignore_sitemap: bool = Field(default=True, alias="ignoreSitemap", description="Whether to ignore the website's sitemap")
    include_subdomains: bool = Field(
        default=False, alias="includeSubdomains", description="Include subdomains of the website"
    )
    limit: PositiveInt = Field(default=DEFAULT_MAP_LIMIT, description="Maximum number of links to return")

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: str) -> str:
        return check_absolute_url(v)


def build_map_payload(params: MapParams) -> dict[str, object]:
    return {
        "url": params.url,
        "search": params.search,
        "ignoreSitemap": params.ignore_sitemap,
        "includeSubdomains": params.include_subdomains,
        "limit": params.limit,
    }


def extract_links(result: object) -> list[str]:
    """Validate the map result shape and return its links in API order.

    Raises:
        ValidationError: No boolean ``success`` flag, or ``success`` is false.
    """
    if not isinstance(result, Mapping) or not isinstance(result.get("success"), bool):
        raise ValidationError("Invalid sitemap result: missing success flag")
    if not result["success"]:
        reason = result.get("error")
        if isinstance(reason, str) and reason:
            raise ValidationError(f"Sitemap generation failed: {reason}")
        raise ValidationError("Sitemap generation failed")

    links = result.get("links")
    if not isinstance(links, Sequence) or isinstance(links, (str, bytes)):
        return []
    return [str(link) for link in links]


def format_sitemap(url: str, links: Sequence[str]) -> str:
    """Render links as a numbered markdown list under a heading."""
    lines = [f"# Sitemap for {url}", ""]
    if not links:
        lines.append("No URLs found in the sitemap.")
    else:
        lines += [f"Found {len(links)} URLs:", ""]
        lines += [f"{i}. {link}" for i, link in enumerate(links, start=1)]
    return "\n".join(lines) + "\n"


def build_map_tool(clients: ClientProvider) -> ToolDefinition[MapParams]:
    """Create the ``firecrawl_map`` tool bound to a client provider."""

    async def execute(params: MapParams) -> ResponseEnvelope:
        result = await clients.get().generate_sitemap(build_map_payload(params))
        return text_response(format_sitemap(params.url, extract_links(result)))

    return create_tool(
        name="firecrawl_map",
        description="Generate a sitemap of a given site",
        schema=MapParams,
        execute=execute,
    )
