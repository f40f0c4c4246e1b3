"""Unified tool response contract.

Every tool result crosses the MCP boundary as a ``ToolResponse``: a text
payload plus an error flag. Success payloads are the compact JSON encoding of
the result value; error and notice payloads are plain sentences.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ToolResponse(BaseModel):
    """Response shape shared by all documentation tools."""

    payload: str = Field(description="Serialized result or human-readable sentence")
    is_error: bool = Field(default=False, description="True when the request failed")
    error_code: str | None = Field(
        default=None, description="Stable machine-readable error code for failures"
    )

    @model_validator(mode="after")
    def _validate_coherence(self) -> "ToolResponse":
        if self.is_error and self.error_code is None:
            raise ValueError("is_error=true responses must include error_code")
        if not self.is_error and self.error_code is not None:
            raise ValueError("is_error=false responses must not include error_code")
        return self


def serialize_payload(value: Any) -> str:
    """Compact, deterministic JSON encoding of a result value."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def build_ok(value: Any) -> ToolResponse:
    """Build a success response carrying the serialized ``value``."""
    return ToolResponse(payload=serialize_payload(value))


def build_notice(message: str) -> ToolResponse:
    """Build a non-error response whose payload is a sentence."""
    return ToolResponse(payload=message)


def build_error(code: str, message: str) -> ToolResponse:
    """Build an error response."""
    return ToolResponse(payload=message, is_error=True, error_code=code)
