"""Tests for the firecrawl_map tool and sitemap rendering."""

from __future__ import annotations

import pytest

from firecrawl_simple_mcp.client import ClientProvider
from firecrawl_simple_mcp.foundation.errors import ValidationError
from firecrawl_simple_mcp.tools import build_map_tool, extract_links, format_sitemap


@pytest.mark.asyncio
async def test_map_single_link(provider: ClientProvider, stub_client) -> None:
    stub_client.map_result = {"success": True, "links": ["https://example.com"]}
    envelope = await build_map_tool(provider).execute({"url": "https://example.com", "limit": 5})

    assert not envelope.is_error
    assert "# Sitemap for https://example.com" in envelope.text
    assert "Found 1 URLs:" in envelope.text
    assert "1. https://example.com" in envelope.text
    assert stub_client.map_calls == [{
        "url": "https://example.com",
        "search": None,
        "ignoreSitemap": True,
        "includeSubdomains": False,
        "limit": 5,
    }]


@pytest.mark.asyncio
async def test_map_forwards_every_option(provider: ClientProvider, stub_client) -> None:
    stub_client.map_result = {"success": True, "links": []}
    await build_map_tool(provider).execute({
        "url": "https://example.com",
        "search": "blog",
        "ignoreSitemap": False,
        "includeSubdomains": True,
        "limit": 10,
    })

    assert stub_client.map_calls == [{
        "url": "https://example.com",
        "search": "blog",
        "ignoreSitemap": False,
        "includeSubdomains": True,
        "limit": 10,
    }]


@pytest.mark.asyncio
async def test_map_no_links(provider: ClientProvider, stub_client) -> None:
    stub_client.map_result = {"success": True, "links": []}
    envelope = await build_map_tool(provider).execute({"url": "https://example.com"})

    assert not envelope.is_error
    assert envelope.text == "# Sitemap for https://example.com\n\nNo URLs found in the sitemap.\n"


@pytest.mark.asyncio
async def test_map_missing_links_treated_as_empty(provider: ClientProvider, stub_client) -> None:
    stub_client.map_result = {"success": True}
    envelope = await build_map_tool(provider).execute({"url": "https://example.com"})

    assert "No URLs found in the sitemap." in envelope.text


@pytest.mark.asyncio
async def test_map_unsuccessful_result(provider: ClientProvider, stub_client) -> None:
    stub_client.map_result = {"success": False}
    envelope = await build_map_tool(provider).execute({"url": "https://example.com"})

    assert envelope.is_error
    assert envelope.text == "Error: Sitemap generation failed"


@pytest.mark.asyncio
async def test_map_result_without_success_flag(provider: ClientProvider, stub_client) -> None:
    stub_client.map_result = {"urls": ["https://example.com"]}
    envelope = await build_map_tool(provider).execute({"url": "https://example.com"})

    assert envelope.is_error
    assert envelope.text == "Error: Invalid sitemap result: missing success flag"


@pytest.mark.asyncio
async def test_map_client_failure_is_enveloped(provider: ClientProvider, stub_client) -> None:
    stub_client.raises = Exception("boom")
    envelope = await build_map_tool(provider).execute({"url": "https://example.com"})

    assert envelope.to_dict() == {"content": [{"type": "text", "text": "Error: boom"}], "isError": True}


@pytest.mark.asyncio
async def test_map_invalid_input_never_calls_client(provider: ClientProvider, stub_client) -> None:
    envelope = await build_map_tool(provider).execute({"url": "https://example.com", "limit": -3})

    assert envelope.is_error
    assert envelope.text.startswith("Validation Error:")
    assert "limit: " in envelope.text
    assert stub_client.call_count == 0


# ─────────────────────────────────────────────────────────────────────────────
# Rendering
# ─────────────────────────────────────────────────────────────────────────────


def test_format_sitemap_numbers_in_order() -> None:
    links = ["https://a.test/", "https://a.test/z", "https://a.test/b"]
    assert format_sitemap("https://a.test", links) == (
        "# Sitemap for https://a.test\n"
        "\n"
        "Found 3 URLs:\n"
        "\n"
        "1. https://a.test/\n"
        "2. https://a.test/z\n"
        "3. https://a.test/b\n"
    )


def test_extract_links_includes_upstream_reason() -> None:
    with pytest.raises(ValidationError, match="Sitemap generation failed: quota exceeded"):
        extract_links({"success": False, "error": "quota exceeded"})


@pytest.mark.parametrize("result", [None, [], "ok", {"success": "true"}])
def test_extract_links_requires_boolean_flag(result: object) -> None:
    with pytest.raises(ValidationError, match="missing success flag"):
        extract_links(result)


def test_extract_links_ignores_non_list_links() -> None:
    assert extract_links({"success": True, "links": "https://example.com"}) == []
