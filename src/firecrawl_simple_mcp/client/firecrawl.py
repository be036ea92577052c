"""Async HTTP client for the Firecrawl Simple API.

Thin wrapper over httpx: one POST per operation, JSON in and out. Transport
failures are translated into package exceptions whose messages carry the
vocabulary the error classifier keys on ("API", "Network", "timed out").

Example:
    >>> client = FirecrawlClient("http://localhost:3002/v1", api_key="fc-xxx")
    >>> page = await client.scrape_webpage({"url": "https://example.com", "formats": ["markdown"]})
    >>> page["markdown"][:20]
    '# Example Domain\\n\\nT'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from firecrawl_simple_mcp import __version__
from firecrawl_simple_mcp.foundation.errors import (
    FirecrawlApiError,
    FirecrawlNetworkError,
    FirecrawlTimeoutError,
)

logger = logging.getLogger("firecrawl_simple_mcp.client")

USER_AGENT = f"firecrawl-simple-mcp/{__version__}"

# Longest error body fragment echoed back in exception messages
_MAX_DETAIL = 500

# Extra seconds httpx waits beyond the page timeout the API enforces itself
TIMEOUT_MARGIN = 5.0


class FirecrawlClient:
    """Client for the two Firecrawl Simple endpoints this server exposes.

    Holds only immutable connection settings; an ``httpx.AsyncClient`` is
    opened per request, so one instance can be shared across concurrent
    tool invocations.

    Args:
        api_url: Base URL, e.g. ``http://localhost:3002/v1``
        api_key: Optional bearer credential
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
    """

    __slots__ = ("_api_url", "_api_key", "_timeout", "_transport")

    def __init__(
        self,
        api_url: str,
        api_key: str | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._api_key = api_key or None
        self._timeout = timeout
        self._transport = transport

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def has_api_key(self) -> bool:
        return self._api_key is not None

    # ─────────────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────────────

    async def scrape_webpage(self, payload: Mapping[str, object]) -> Any:
        """Scrape one page. Returns the response's ``data`` object when present."""
        body = await self._post("/scrape", payload)
        if isinstance(body, dict):
            if body.get("success") is False:
                raise FirecrawlApiError(f"API reported scrape failure: {body.get('error') or 'no details'}")
            if "data" in body:
                return body["data"]
        return body

    async def generate_sitemap(self, payload: Mapping[str, object]) -> Any:
        """Map a site. Returns the decoded response body unchanged."""
        return await self._post("/map", payload)

    # ─────────────────────────────────────────────────────────────────
    # HTTP
    # ─────────────────────────────────────────────────────────────────

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _request_timeout(self, body: Mapping[str, object]) -> float:
        """Seconds to wait: the payload's own timeout (ms) plus a margin, never below the client default."""
        page_timeout = body.get("timeout")
        if isinstance(page_timeout, (int, float)) and not isinstance(page_timeout, bool):
            return max(self._timeout, page_timeout / 1000 + TIMEOUT_MARGIN)
        return self._timeout

    async def _post(self, path: str, payload: Mapping[str, object]) -> Any:
        url = f"{self._api_url}{path}"
        body = {k: v for k, v in payload.items() if v is not None}
        timeout = self._request_timeout(body)
        logger.debug(f"POST {url} (timeout {timeout:g}s)")

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                response = await client.post(url, json=body, headers=self._headers())
        except httpx.TimeoutException as e:
            raise FirecrawlTimeoutError(f"Request timed out after {timeout:g}s") from e
        except httpx.TransportError as e:
            raise FirecrawlNetworkError(f"Network error: {str(e) or type(e).__name__}") from e

        if response.is_error:
            raise FirecrawlApiError(
                f"API request failed with status {response.status_code}: {_error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise FirecrawlApiError(
                f"API returned invalid JSON (status {response.status_code})",
                status_code=response.status_code,
            ) from e


def _error_detail(response: httpx.Response) -> str:
    """Best-effort human-readable reason from an error response."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        for key in ("error", "message", "detail"):
            if isinstance(data.get(key), str) and data[key]:
                return data[key][:_MAX_DETAIL]
    text = response.text.strip()
    return text[:_MAX_DETAIL] if text else response.reason_phrase
