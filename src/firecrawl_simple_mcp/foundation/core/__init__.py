"""Core tool abstractions.

- ToolDefinition/ToolMetadata: named, schema-validated tools
- create_tool: bind a schema and executor with uniform error handling
- ResponseEnvelope/TextContent: the result shape every tool returns
- validate_params: generic schema interpretation with full violation reports
"""

from .base import (
    Executor,
    ResponseEnvelope,
    TextContent,
    ToolDefinition,
    ToolMetadata,
    create_tool,
    error_response,
    json_response,
    text_response,
)
from .validation import VALIDATION_HEADER, check_absolute_url, format_violations, validate_params

__all__ = [
    "Executor",
    "ResponseEnvelope",
    "TextContent",
    "ToolDefinition",
    "ToolMetadata",
    "create_tool",
    "error_response",
    "json_response",
    "text_response",
    "VALIDATION_HEADER",
    "check_absolute_url",
    "format_violations",
    "validate_params",
]
