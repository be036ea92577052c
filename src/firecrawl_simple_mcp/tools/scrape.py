"""Firecrawl scrape tool: fetch one URL's content with JavaScript rendering support.

Defines the schema and implementation for ``firecrawl_scrape``, which
retrieves page content in one or more formats, optionally restricted to
specific HTML tags, with custom headers and a rendering delay.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, field_validator

from firecrawl_simple_mcp.client import ClientProvider
from firecrawl_simple_mcp.foundation.core import (
    ResponseEnvelope,
    ToolDefinition,
    check_absolute_url,
    create_tool,
    json_response,
)
from firecrawl_simple_mcp.foundation.errors import ValidationError

ScrapeFormat = Literal["markdown", "rawHtml", "screenshot"]

DEFAULT_SCRAPE_TIMEOUT_MS = 30000


class ScrapeParams(BaseModel):
    """Input parameters for ``firecrawl_scrape``."""

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        json_schema_extra={"examples": [{"url": "https://example.com", "formats": ["markdown"]}]},
    )

    url: str = Field(..., description="The URL to scrape (required)")
    formats: list[ScrapeFormat] = Field(
        default_factory=lambda: ["markdown"],
        min_length=1,
        description="Formats to include in the output",
    )
    include_tags: list[str] | None = Field(
        default=None, alias="includeTags", description="HTML tags to include in the scraped result"
    )
    exclude_tags: list[str] | None = Field(
        default=None, alias="excludeTags", description="HTML tags to exclude from the scraped result"
    )
    headers: dict[str, str] | None = Field(default=None, description="Custom HTTP headers to send with the request")
    wait_for: NonNegativeInt | None = Field(
        default=None, alias="waitFor", description="Milliseconds to wait for JavaScript execution before scraping"
    )
    timeout: PositiveInt = Field(default=DEFAULT_SCRAPE_TIMEOUT_MS, description="Request timeout in milliseconds")

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: str) -> str:
        return check_absolute_url(v)

    @field_validator("formats")
    @classmethod
    def _dedupe_formats(cls, v: list[ScrapeFormat]) -> list[ScrapeFormat]:
        return list(dict.fromkeys(v))


def build_scrape_payload(params: ScrapeParams) -> dict[str, object]:
    """Exactly the fields forwarded to the remote scrape call; unset optionals stay None."""
    return {
        "url": params.url,
        "formats": list(params.formats),
        "waitFor": params.wait_for,
        "timeout": params.timeout,
        "includeTags": params.include_tags,
        "excludeTags": params.exclude_tags,
        "headers": params.headers,
    }


def build_scrape_tool(clients: ClientProvider) -> ToolDefinition[ScrapeParams]:
    """Create the ``firecrawl_scrape`` tool bound to a client provider."""

    async def execute(params: ScrapeParams) -> ResponseEnvelope:
        result = await clients.get().scrape_webpage(build_scrape_payload(params))
        if not result:
            raise ValidationError("Failed to scrape webpage: No result returned")
        return json_response(result)

    return create_tool(
        name="firecrawl_scrape",
        description="Scrape content from a URL with JavaScript rendering support",
        schema=ScrapeParams,
        execute=execute,
    )
