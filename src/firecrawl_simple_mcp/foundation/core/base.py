"""Core tool abstractions: ToolMetadata, ToolDefinition and response envelopes.

A tool is a named, schema-validated async operation. Every invocation goes
through the same wrapper: validate, execute, and convert any failure into
an error envelope. Callers of a tool never see a raised exception.

Example:
    >>> class EchoParams(BaseModel):
    ...     text: str
    ...
    >>> async def echo(params: EchoParams) -> ResponseEnvelope:
    ...     return text_response(params.text)
    ...
    >>> echo_tool = create_tool(
    ...     name="echo",
    ...     description="Echo the given text back",
    ...     schema=EchoParams,
    ...     execute=echo,
    ... )
    >>> envelope = await echo_tool.execute({"text": "hi"})
    >>> envelope.text
    'hi'
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

import orjson
from pydantic import BaseModel, ConfigDict, Field

from firecrawl_simple_mcp.foundation.errors import format_error_message

from .validation import validate_params

logger = logging.getLogger("firecrawl_simple_mcp.tools")

TParams = TypeVar("TParams", bound=BaseModel)


# ─────────────────────────────────────────────────────────────────────────────
# Response Envelope
# ─────────────────────────────────────────────────────────────────────────────


class TextContent(BaseModel):
    """A single text block of tool output."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ResponseEnvelope(BaseModel):
    """Uniform tool result: content blocks plus an error flag.

    Serializes (``to_dict``) to the MCP shape
    ``{"content": [{"type": "text", "text": ...}], "isError": bool}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: tuple[TextContent, ...]
    is_error: bool = Field(default=False, alias="isError")

    @property
    def text(self) -> str:
        """Text of the first content block (every tool emits exactly one)."""
        return self.content[0].text if self.content else ""

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


def text_response(text: str) -> ResponseEnvelope:
    """Success envelope with one text block."""
    return ResponseEnvelope(content=(TextContent(text=text),), is_error=False)


def error_response(text: str) -> ResponseEnvelope:
    """Error envelope with one text block."""
    return ResponseEnvelope(content=(TextContent(text=text),), is_error=True)


def _json_default(obj: object) -> object:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def json_response(data: object) -> ResponseEnvelope:
    """Success envelope holding ``data`` as two-space indented JSON."""
    rendered = orjson.dumps(
        data,
        default=_json_default,
        option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS,
    )
    return text_response(rendered.decode())


# ─────────────────────────────────────────────────────────────────────────────
# Tool Definition
# ─────────────────────────────────────────────────────────────────────────────


class ToolMetadata(BaseModel):
    """Metadata describing a tool to the hosting server.

    Attributes:
        name: Unique identifier (snake_case, e.g., "firecrawl_scrape")
        description: What the tool does (shown to the model for selection)
        category: Grouping category
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    description: str = Field(..., min_length=10)
    category: str = Field(default="web")


Executor = Callable[[TParams], Awaitable[ResponseEnvelope]]


@dataclass(frozen=True, slots=True)
class ToolDefinition(Generic[TParams]):
    """A schema, a name/description and an executor bound into one invocable unit.

    Built once at startup and never mutated. ``execute`` is the wrapped
    entry point: it validates raw input, runs the executor, and turns every
    failure into an error envelope.
    """

    metadata: ToolMetadata
    params_schema: type[TParams]
    executor: Executor[TParams]

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def description(self) -> str:
        return self.metadata.description

    async def execute(self, raw: Mapping[str, object] | object) -> ResponseEnvelope:
        """Validate ``raw``, run the executor, and envelope any failure."""
        name = self.metadata.name
        try:
            params = validate_params(self.params_schema, raw)
            logger.info(f"Executing {name} tool", extra={"tool": name, "params": params.model_dump(by_alias=True)})
            return await self.executor(params)
        except Exception as e:
            return self._handle_error(e, raw)

    def _handle_error(self, error: Exception, raw: object) -> ResponseEnvelope:
        name = self.metadata.name
        logger.error(
            f"Error in {name} during execution: {error}",
            exc_info=error,
            extra={"tool": name, "operation": "execution", "input": raw},
        )
        return error_response(format_error_message(error))

    def input_schema(self) -> dict[str, object]:
        """JSON schema of the parameters, keyed by wire (camelCase) names."""
        schema = self.params_schema.model_json_schema(by_alias=True)
        schema.pop("title", None)
        properties = schema.get("properties", {})
        schema["properties"] = {
            key: {k: v for k, v in prop.items() if k != "title"}
            for key, prop in properties.items()
        }
        return schema


def create_tool(
    *,
    name: str,
    description: str,
    schema: type[TParams],
    execute: Executor[TParams],
    category: str = "web",
) -> ToolDefinition[TParams]:
    """Bind a schema and an executor into a tool with uniform error handling.

    Args:
        name: Unique snake_case tool name
        description: Human-readable description for tool selection
        schema: Pydantic model validating the tool's input
        execute: Async function receiving typed params, returning an envelope
        category: Grouping category

    Returns:
        ToolDefinition whose ``execute`` never raises
    """
    return ToolDefinition(
        metadata=ToolMetadata(name=name, description=description, category=category),
        params_schema=schema,
        executor=execute,
    )
