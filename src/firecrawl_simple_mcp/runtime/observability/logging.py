"""Logging setup for the server process.

All loggers live under the ``firecrawl_simple_mcp`` namespace. Output goes
to stderr: with the stdio transport, stdout carries protocol frames.

Quick Start:
    >>> from firecrawl_simple_mcp.runtime.observability import configure_logging, get_logger
    >>> configure_logging("DEBUG")
    >>> log = get_logger("tools")
    >>> log.info("Executing %s tool", "firecrawl_scrape")
"""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

ROOT_LOGGER: Final[str] = "firecrawl_simple_mcp"
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_HANDLER_NAME: Final[str] = "firecrawl_simple_mcp.stderr"


def normalize_level(level: str | int) -> int:
    """Resolve a level name (``WARN`` included) to a logging constant, defaulting to INFO."""
    if isinstance(level, int):
        return level
    return _LEVELS.get(level.strip().upper(), logging.INFO)


def configure_logging(
    level: str | int = "INFO",
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Install a single stderr handler on the package root logger.

    Safe to call repeatedly; the previous handler is replaced rather than
    duplicated.
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(normalize_level(level))
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
