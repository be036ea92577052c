"""Error types and message classification for tool failures.

Classification is message-driven: the category of a failure is
decided by an ordered list of substring rules applied to the lower-cased
message, not by the exception's type. The first matching rule wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCategory(StrEnum):
    """Categories surfaced in the prefix of a formatted error message."""
    VALIDATION = "validation"
    API = "api"
    NETWORK = "network"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


# ═══════════════════════════════════════════════════════════════════════════════
# Exceptions
# ═══════════════════════════════════════════════════════════════════════════════


class FirecrawlError(Exception):
    """Base class for errors raised by this package."""


class ValidationError(FirecrawlError):
    """Bad or missing tool input, or a malformed remote result."""


class FirecrawlApiError(FirecrawlError):
    """The remote API answered, but reported a failure."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FirecrawlNetworkError(FirecrawlError):
    """Connection-level failure talking to the remote API."""


class FirecrawlTimeoutError(FirecrawlError):
    """The remote API did not answer within the configured deadline."""


# ═══════════════════════════════════════════════════════════════════════════════
# Classification
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class _Rule:
    category: ErrorCategory
    patterns: tuple[str, ...]
    prefix: str
    hint: str = ""


# Order is precedence: validation and api win over network/timeout.
_RULES: tuple[_Rule, ...] = (
    _Rule(ErrorCategory.VALIDATION, ("validation",), "Validation Error"),
    _Rule(ErrorCategory.API, ("api",), "API Error"),
    _Rule(
        ErrorCategory.NETWORK,
        ("econnrefused", "econnreset", "socket hang up", "network"),
        "Network Error",
        "Please check your connection and try again.",
    ),
    _Rule(
        ErrorCategory.TIMEOUT,
        ("timeout", "timed out", "etimedout"),
        "Timeout Error",
        "Please try again with a longer timeout or a simpler request.",
    ),
)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


def _match(message: str) -> _Rule | None:
    haystack = message.lower()
    for rule in _RULES:
        if any(pattern in haystack for pattern in rule.patterns):
            return rule
    return None


def classify_message(message: str) -> ErrorCategory:
    """Map an error message to its category using the ordered rule table."""
    if not message:
        return ErrorCategory.UNKNOWN
    rule = _match(message)
    return rule.category if rule else ErrorCategory.UNKNOWN


def format_error_message(error: object) -> str:
    """Render any caught failure as a categorized, human-readable message.

    Args:
        error: The caught exception. Non-exception values are treated as
            carrying no message.

    Returns:
        Message prefixed with ``Validation Error:``, ``API Error:``,
        ``Network Error:``, ``Timeout Error:`` or ``Error:``.
    """
    if not isinstance(error, BaseException):
        return UNKNOWN_ERROR_MESSAGE
    message = str(error)
    if not message:
        return UNKNOWN_ERROR_MESSAGE

    rule = _match(message)
    if rule is None:
        return f"Error: {message}"
    if rule.hint:
        return f"{rule.prefix}: {message}. {rule.hint}"
    return f"{rule.prefix}: {message}"
