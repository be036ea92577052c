"""Observability: logging setup for the server process."""

from .logging import DEFAULT_LOG_FORMAT, ROOT_LOGGER, configure_logging, get_logger, normalize_level

__all__ = ["DEFAULT_LOG_FORMAT", "ROOT_LOGGER", "configure_logging", "get_logger", "normalize_level"]
