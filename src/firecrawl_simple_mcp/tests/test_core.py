"""Tests for the tool invocation wrapper and response envelopes.

Validates:
- create_tool runs validate → execute → envelope
- Exceptions from validation and execution never escape
- JSON rendering of success payloads
"""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ConfigDict, Field

from firecrawl_simple_mcp.foundation.core import (
    ResponseEnvelope,
    create_tool,
    error_response,
    json_response,
    text_response,
)


class EchoParams(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True)

    text: str
    repeat_count: int = Field(default=1, alias="repeatCount")


def _echo_tool(seen: list[EchoParams]):
    async def execute(params: EchoParams) -> ResponseEnvelope:
        seen.append(params)
        return text_response(params.text * params.repeat_count)

    return create_tool(name="echo", description="Echo the given text back", schema=EchoParams, execute=execute)


# ─────────────────────────────────────────────────────────────────────────────
# Wrapper
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_executor_receives_defaulted_params() -> None:
    seen: list[EchoParams] = []
    envelope = await _echo_tool(seen).execute({"text": "hi"})

    assert envelope.text == "hi"
    assert not envelope.is_error
    assert [p.model_dump() for p in seen] == [{"text": "hi", "repeat_count": 1}]


@pytest.mark.asyncio
async def test_validation_failure_skips_executor() -> None:
    seen: list[EchoParams] = []
    envelope = await _echo_tool(seen).execute({"repeatCount": "two"})

    assert envelope.is_error
    assert envelope.text.startswith("Validation Error: Input validation failed:")
    assert "text: Field required" in envelope.text
    assert "repeatCount: " in envelope.text
    assert seen == []


@pytest.mark.asyncio
async def test_non_object_input_is_validation_error() -> None:
    envelope = await _echo_tool([]).execute("hi")
    assert envelope.is_error
    assert envelope.text.startswith("Validation Error:")


@pytest.mark.asyncio
async def test_executor_exception_becomes_error_envelope() -> None:
    async def explode(params: EchoParams) -> ResponseEnvelope:
        raise TimeoutError("operation timed out")

    tool = create_tool(name="explode", description="Always fails loudly", schema=EchoParams, execute=explode)
    envelope = await tool.execute({"text": "x"})

    assert envelope.is_error
    assert envelope.text == (
        "Timeout Error: operation timed out. Please try again with a longer timeout or a simpler request."
    )


@pytest.mark.asyncio
async def test_messageless_exception_is_unknown() -> None:
    async def explode(params: EchoParams) -> ResponseEnvelope:
        raise RuntimeError()

    tool = create_tool(name="explode", description="Always fails quietly", schema=EchoParams, execute=explode)
    envelope = await tool.execute({"text": "x"})

    assert envelope.to_dict() == {
        "content": [{"type": "text", "text": "An unknown error occurred"}],
        "isError": True,
    }


def test_input_schema_uses_wire_names() -> None:
    schema = _echo_tool([]).input_schema()
    assert schema["type"] == "object"
    assert set(schema["properties"]) == {"text", "repeatCount"}
    assert schema["required"] == ["text"]
    assert "title" not in schema
    assert all("title" not in prop for prop in schema["properties"].values())


@pytest.mark.parametrize("name", ["Echo", "1echo", "echo-tool"])
def test_tool_name_must_be_snake_case(name: str) -> None:
    with pytest.raises(ValueError):
        create_tool(name=name, description="Echo the given text back", schema=EchoParams, execute=None)  # type: ignore[arg-type]


# ─────────────────────────────────────────────────────────────────────────────
# Envelopes
# ─────────────────────────────────────────────────────────────────────────────


def test_json_response_indents_two_spaces() -> None:
    envelope = json_response({"markdown": "# Test", "links": ("a", "b")})
    assert envelope.text == '{\n  "markdown": "# Test",\n  "links": [\n    "a",\n    "b"\n  ]\n}'


def test_error_response_shape() -> None:
    assert error_response("Error: boom").to_dict() == {
        "content": [{"type": "text", "text": "Error: boom"}],
        "isError": True,
    }


def test_envelope_accepts_wire_name() -> None:
    envelope = ResponseEnvelope.model_validate({"content": [{"type": "text", "text": "ok"}], "isError": False})
    assert envelope.text == "ok"
    assert not envelope.is_error
