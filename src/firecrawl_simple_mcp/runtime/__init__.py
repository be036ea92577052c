"""Runtime support: observability for the server process."""

from .observability import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
