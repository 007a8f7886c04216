"""Canonical span record sent to the trace service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class SpanPayload(BaseModel):
    """One normalized lifecycle event.

    Optional fields left as None are dropped from the wire form by
    :meth:`to_wire`, so the service never sees explicit nulls.
    """

    model_config = ConfigDict(extra="forbid")
    span_id: str
    session_id: str
    parent_span_id: str | None = None
    timestamp: str
    duration_ms: int | None = None
    source: str
    kind: str
    event_type: str
    status: str
    tool_use_id: str | None = None
    tool_name: str | None = None
    tool_input: Any = None
    tool_response: Any = None
    error: Any = None
    is_interrupt: bool | None = None
    cwd: str | None = None
    model: str | None = None
    agent_name: str | None = None
    metadata: dict[str, Any] | None = None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
