"""MCP (Model Context Protocol) hosting for the tool catalog.

Example:
    >>> from firecrawl_simple_mcp.ext.mcp import create_server
    >>> server = create_server(tools, transport_type="stdio")
    >>> await server.start()
"""

from .server import MCPServer, ServerError, Transport, create_server

__all__ = ["MCPServer", "ServerError", "Transport", "create_server"]
