"""Error types and classification.

- FirecrawlError and subclasses: exceptions raised by tools and the client
- ErrorCategory: categories surfaced in formatted error messages
- format_error_message/classify_message: ordered substring classification
"""

from .errors import (
    UNKNOWN_ERROR_MESSAGE,
    ErrorCategory,
    FirecrawlApiError,
    FirecrawlError,
    FirecrawlNetworkError,
    FirecrawlTimeoutError,
    ValidationError,
    classify_message,
    format_error_message,
)

__all__ = [
    "ErrorCategory",
    "FirecrawlError", "ValidationError", "FirecrawlApiError",
    "FirecrawlNetworkError", "FirecrawlTimeoutError",
    "classify_message", "format_error_message", "UNKNOWN_ERROR_MESSAGE",
]
