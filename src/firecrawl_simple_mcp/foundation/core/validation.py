"""Generic parameter validation over declarative pydantic schemas.

Tool parameter schemas are plain pydantic models; this module interprets
them the same way for every tool and turns pydantic's error list into one
ValidationError whose message names every violated field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar
from urllib.parse import urlparse

import pydantic
from pydantic import BaseModel

from firecrawl_simple_mcp.foundation.errors import ValidationError

TModel = TypeVar("TModel", bound=BaseModel)

VALIDATION_HEADER = "Input validation failed:"

ALLOWED_URL_SCHEMES = ("http", "https")


def _dotted(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "(root)"


def format_violations(exc: pydantic.ValidationError) -> list[str]:
    """One ``<dotted.path>: <message>`` line per violation, in pydantic's order."""
    return [f"{_dotted(err['loc'])}: {err['msg']}" for err in exc.errors(include_url=False)]


def validate_params(schema: type[TModel], raw: object) -> TModel:
    """Validate untyped input against a schema, applying declared defaults.

    Args:
        schema: Pydantic model describing the tool's parameters.
        raw: Caller-supplied input, normally a mapping decoded from JSON.

    Returns:
        A typed, defaulted instance of ``schema``.

    Raises:
        ValidationError: Listing every violation, one per line.
    """
    if isinstance(raw, schema):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(
            f"{VALIDATION_HEADER}\n(root): expected an object, got {type(raw).__name__}"
        )
    try:
        return schema.model_validate(dict(raw))
    except pydantic.ValidationError as e:
        raise ValidationError("\n".join([VALIDATION_HEADER, *format_violations(e)])) from e


def check_absolute_url(value: str) -> str:
    """Field validator body: require an http or https URL with a host.

    Firecrawl only fetches over HTTP, so other schemes are rejected even
    when the URL is otherwise absolute.
    """
    parsed = urlparse(value)
    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        raise ValueError(
            f"Invalid url: scheme must be http or https, got {parsed.scheme or 'none'!r}"
        )
    if not parsed.netloc or not parsed.hostname:
        raise ValueError("Invalid url: missing host")
    return value
