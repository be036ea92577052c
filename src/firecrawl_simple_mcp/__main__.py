"""Process entry point: ``python -m firecrawl_simple_mcp`` or ``firecrawl-simple-mcp``.

Configuration comes only from the environment (see
``foundation.config.settings``).
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys

from firecrawl_simple_mcp.client import ClientProvider
from firecrawl_simple_mcp.ext.mcp import MCPServer, ServerError, create_server
from firecrawl_simple_mcp.foundation.config import Settings, get_settings
from firecrawl_simple_mcp.runtime.observability import configure_logging
from firecrawl_simple_mcp.tools import create_tools

logger = logging.getLogger("firecrawl_simple_mcp")

BANNER = """
╔═══════════════════════════════════════════════════════════╗
║                                                           ║
║   Firecrawl Simple MCP Server                             ║
║   Web scraping capabilities for LLMs via MCP              ║
║                                                           ║
╚═══════════════════════════════════════════════════════════╝
"""


def _install_shutdown_handlers(server: MCPServer) -> None:
    """Stop the server on SIGINT/SIGTERM where the loop supports signal handlers."""
    loop = asyncio.get_running_loop()
    pending: set[asyncio.Task[None]] = set()

    def shutdown() -> None:
        logger.info("Shutting down MCP Server...")
        task = loop.create_task(server.stop())
        pending.add(task)
        task.add_done_callback(pending.discard)

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown)
        except (NotImplementedError, RuntimeError):
            # Windows event loops have no add_signal_handler; KeyboardInterrupt still applies.
            logger.debug(f"Signal handler for {sig.name} not supported on this platform")


async def serve(settings: Settings) -> int:
    """Build the catalog, run the server until it stops, and return an exit code."""
    logger.info(BANNER)
    logger.info("Starting Firecrawl Simple MCP Server")
    logger.info(f"API URL: {settings.api.url}")
    logger.info(f"Version: {settings.version}")

    tools = create_tools(ClientProvider(settings.api))
    server = create_server(
        tools,
        port=settings.server.port,
        transport_type=settings.server.transport_type,
        version=settings.version,
    )
    _install_shutdown_handlers(server)

    try:
        await server.start()
    except ServerError:
        logger.exception("Failed to start MCP Server")
        return 1

    logger.info("Available tools:")
    for tool in server.tools:
        logger.info(f"- {tool.name}: {tool.description or 'No description'}")

    try:
        await server.wait()
    except ServerError:
        logger.exception("MCP Server terminated with an error")
        return 1
    return 0


def main() -> None:
    # Handler first, so configuration fallback messages are formatted and kept.
    configure_logging()
    settings = get_settings()
    configure_logging(settings.server.log_level)
    try:
        code = asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Shutting down MCP Server...")
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
