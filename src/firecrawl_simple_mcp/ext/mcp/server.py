"""MCP server hosting the Firecrawl tool catalog.

Wraps a FastMCP instance: every ToolDefinition is registered with its own
JSON schema, and its envelope is mapped onto the MCP result. A success
envelope becomes text content; an error envelope is raised as fastmcp's
ToolError so the client receives ``isError: true`` with the classified
message.

Example:
    >>> server = create_server(tools, transport_type="sse", port=3003)
    >>> await server.start()
    >>> await server.wait()  # until stopped or the transport closes

Requires: fastmcp
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel

from firecrawl_simple_mcp.foundation.core import ResponseEnvelope, ToolDefinition, error_response
from firecrawl_simple_mcp.foundation.errors import FirecrawlError

if TYPE_CHECKING:
    from fastmcp import FastMCP

logger = logging.getLogger("firecrawl_simple_mcp.server")

Transport = Literal["stdio", "sse"]

SERVER_NAME = "Firecrawl Simple MCP"
SSE_ENDPOINT = "/sse"


class ServerError(FirecrawlError):
    """Raised when the server cannot be started or stopped."""


# ═══════════════════════════════════════════════════════════════════════════════
# Server
# ═══════════════════════════════════════════════════════════════════════════════


class MCPServer:
    """FastMCP-backed server for MCP clients (Claude Desktop, Cursor, etc).

    The FastMCP instance is created on first access, so the catalog can be
    inspected and invoked without touching the protocol layer.
    """

    __slots__ = ("_name", "_tools", "_port", "_host", "_transport", "_version", "_mcp", "_task")

    def __init__(
        self,
        tools: Sequence[ToolDefinition[BaseModel]],
        *,
        name: str = SERVER_NAME,
        port: int = 3003,
        host: str = "127.0.0.1",
        transport: Transport = "stdio",
        version: str = "1.0.0",
    ) -> None:
        self._name = name
        self._tools: dict[str, ToolDefinition[BaseModel]] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Tool '{tool.name}' already registered")
            self._tools[tool.name] = tool
        self._port = port
        self._host = host
        self._transport: Transport = transport
        self._version = version
        self._mcp: FastMCP | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def port(self) -> int:
        return self._port

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def tools(self) -> list[ToolDefinition[BaseModel]]:
        return list(self._tools.values())

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    # ─────────────────────────────────────────────────────────────────
    # Catalog
    # ─────────────────────────────────────────────────────────────────

    def list_tools(self) -> list[dict[str, object]]:
        """List all tools with their parameter schemas, in catalog order."""
        return [
            {"name": tool.name, "description": tool.description, "parameters": tool.input_schema()}
            for tool in self._tools.values()
        ]

    async def invoke(self, tool_name: str, arguments: Mapping[str, object]) -> ResponseEnvelope:
        """Invoke a tool by name. Never raises; failures come back as error envelopes."""
        tool = self._tools.get(tool_name)
        if tool is None:
            return error_response(f"Error: Tool '{tool_name}' not found")
        return await tool.execute(arguments)

    # ─────────────────────────────────────────────────────────────────
    # FastMCP Adapter
    # ─────────────────────────────────────────────────────────────────

    @property
    def fastmcp(self) -> FastMCP:
        """Underlying FastMCP instance, created and populated on first access."""
        if self._mcp is None:
            self._mcp = self._create_server()
        return self._mcp

    def _create_server(self) -> FastMCP:
        try:
            from fastmcp import FastMCP
        except ImportError as e:
            raise ImportError("MCP hosting requires fastmcp. Install with: pip install fastmcp") from e

        mcp = FastMCP(self._name, version=self._version)
        for tool in self._tools.values():
            mcp.add_tool(_as_fastmcp_tool(tool))
        return mcp

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────

    async def start(self) -> None:
        """Start serving in the background. A second call only warns."""
        if self.is_running:
            logger.warning("Server is already running")
            return

        try:
            mcp = self.fastmcp
            self._task = asyncio.create_task(self._serve(mcp), name=f"mcp-{self._transport}")
            await asyncio.sleep(0)
        except Exception as e:
            logger.error(f"Failed to start MCP Server: {e}")
            raise ServerError(f"Server start failed: {e}") from e

        logger.info(f"MCP Server started successfully with {self._transport} transport")
        if self._transport == "sse":
            logger.info(f"Server listening on port {self._port}")

    async def _serve(self, mcp: FastMCP) -> None:
        if self._transport == "sse":
            await mcp.run_async(transport="sse", host=self._host, port=self._port, path=SSE_ENDPOINT)
        else:
            await mcp.run_async(transport="stdio")

    async def wait(self) -> None:
        """Block until the serving task ends; surface an unexpected crash as ServerError."""
        task = self._task
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled() and (exc := task.exception()) is not None:
            raise ServerError(f"Server stopped unexpectedly: {exc}") from exc

    async def stop(self) -> None:
        """Stop serving. Warns if the server is not running."""
        task = self._task
        if task is None or task.done():
            logger.warning("Server is not running")
            return

        task.cancel()
        try:
            await asyncio.wait({task})
            if not task.cancelled() and (exc := task.exception()) is not None:
                raise exc
        except Exception as e:
            logger.error(f"Failed to stop MCP Server: {e}")
            raise ServerError(f"Server stop failed: {e}") from e
        finally:
            self._task = None
        logger.info("MCP Server stopped")


def _as_fastmcp_tool(definition: ToolDefinition[BaseModel]) -> Any:
    """Adapt a ToolDefinition to a fastmcp Tool using its own JSON schema."""
    from fastmcp.exceptions import ToolError
    from fastmcp.tools import Tool
    from fastmcp.tools.tool import ToolResult
    from mcp.types import TextContent
    from pydantic import PrivateAttr

    class DefinitionTool(Tool):
        _definition: ToolDefinition[BaseModel] = PrivateAttr()

        async def run(self, arguments: dict[str, Any]) -> ToolResult:
            logger.info(f"Executing tool: {self.name}")
            envelope = await self._definition.execute(arguments)
            if envelope.is_error:
                raise ToolError(envelope.text)
            return ToolResult(content=[TextContent(type="text", text=envelope.text)])

    tool = DefinitionTool(
        name=definition.name,
        description=definition.description,
        parameters=definition.input_schema(),
    )
    tool._definition = definition
    return tool


def create_server(
    tools: Sequence[ToolDefinition[BaseModel]],
    *,
    port: int = 3003,
    transport_type: Transport = "stdio",
    version: str = "1.0.0",
    host: str = "127.0.0.1",
) -> MCPServer:
    """Create an MCP server for the given catalog without starting it."""
    return MCPServer(tools, port=port, host=host, transport=transport_type, version=version)
