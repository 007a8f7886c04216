"""Normalize host hook payloads into canonical spans.

Every event type shares a handful of common fields. The event type then
selects an extractor that pulls only the fields meaningful for that kind of
event; unknown event types keep just the common fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..models.span import SpanPayload

DEFAULT_KIND = "session"

EVENT_KINDS: dict[str, str] = {
    "pre_tool_use": "tool_use",
    "post_tool_use": "tool_use",
    "post_tool_use_failure": "tool_use",
    "session_start": "session",
    "session_end": "session",
    "stop": "session",
    "subagent_start": "agent_run",
    "subagent_stop": "agent_run",
    "user_prompt_submit": "user_prompt",
    "assistant_message": "llm_response",
    "notification": "notification",
}

ERROR_EVENT_TYPES = frozenset({"post_tool_use_failure"})

# tokens.<path> -> metadata.usage.<name>
_USAGE_FIELDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("input",), "input_tokens"),
    (("output",), "output_tokens"),
    (("reasoning",), "reasoning_tokens"),
    (("cache", "read"), "cache_read_tokens"),
    (("cache", "write"), "cache_write_tokens"),
)


def event_type_to_kind(event_type: str) -> str:
    return EVENT_KINDS.get(event_type, DEFAULT_KIND)


def event_type_to_status(event_type: str) -> str:
    return "error" if event_type in ERROR_EVENT_TYPES else "success"


@dataclass
class SpanFields:
    """Fields pulled out of one payload, before span identity is assigned."""

    session_id: str | None = None
    cwd: str | None = None
    tool_use_id: str | None = None
    tool_name: str | None = None
    tool_input: Any = None
    tool_response: Any = None
    error: Any = None
    is_interrupt: bool | None = None
    model: str | None = None
    agent_name: str | None = None
    metadata: dict[str, Any] | None = None
    source: str | None = None

    def into_span(
        self, span_id: str, timestamp: str, event_type: str, source: str
    ) -> SpanPayload | None:
        """Build the canonical span, or None when the session id is missing or blank."""
        if self.session_id is None or not self.session_id.strip():
            return None
        return SpanPayload(
            span_id=span_id,
            session_id=self.session_id,
            timestamp=timestamp,
            source=source,
            kind=event_type_to_kind(event_type),
            status=event_type_to_status(event_type),
            event_type=event_type,
            tool_use_id=self.tool_use_id,
            tool_name=self.tool_name,
            tool_input=self.tool_input,
            tool_response=self.tool_response,
            error=self.error,
            is_interrupt=self.is_interrupt,
            cwd=self.cwd,
            model=self.model,
            agent_name=self.agent_name,
            metadata=self.metadata,
        )

    def add_metadata(self, key: str, value: Any) -> None:
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value


def extract(event_type: str, payload: dict[str, Any]) -> SpanFields:
    fields = _extract_common(payload)
    extractor = _EXTRACTORS.get(event_type)
    if extractor is not None:
        extractor(payload, fields)
    return fields


def _str_field(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def _extract_common(payload: dict[str, Any]) -> SpanFields:
    return SpanFields(
        session_id=_str_field(payload, "session_id"),
        cwd=_str_field(payload, "cwd"),
        model=_str_field(payload, "model"),
        source=_str_field(payload, "source"),
    )


def _extract_tool_common(payload: dict[str, Any], fields: SpanFields) -> None:
    fields.tool_use_id = _str_field(payload, "tool_use_id")
    fields.tool_name = _str_field(payload, "tool_name")
    fields.tool_input = payload.get("tool_input")


def _extract_post_tool_use(payload: dict[str, Any], fields: SpanFields) -> None:
    _extract_tool_common(payload, fields)
    fields.tool_response = payload.get("tool_response")


def _extract_post_tool_use_failure(payload: dict[str, Any], fields: SpanFields) -> None:
    _extract_tool_common(payload, fields)
    fields.error = payload.get("error")
    is_interrupt = payload.get("is_interrupt")
    if isinstance(is_interrupt, bool):
        fields.is_interrupt = is_interrupt


def _extract_session_end(payload: dict[str, Any], fields: SpanFields) -> None:
    reason = _str_field(payload, "reason")
    if reason is not None:
        fields.add_metadata("reason", reason)


def _extract_subagent(payload: dict[str, Any], fields: SpanFields) -> None:
    fields.agent_name = _str_field(payload, "agent_type") or _str_field(payload, "agent_name")
    agent_id = _str_field(payload, "agent_id")
    if agent_id is not None:
        fields.add_metadata("agent_id", agent_id)


def _extract_user_prompt(payload: dict[str, Any], fields: SpanFields) -> None:
    prompt = _str_field(payload, "prompt")
    if prompt is not None:
        fields.add_metadata("prompt", prompt)


def _extract_notification(payload: dict[str, Any], fields: SpanFields) -> None:
    for key in ("message", "title"):
        value = _str_field(payload, key)
        if value is not None:
            fields.add_metadata(key, value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _extract_assistant_message(payload: dict[str, Any], fields: SpanFields) -> None:
    usage: dict[str, Any] = {}
    tokens = payload.get("tokens")
    if isinstance(tokens, dict):
        for path, name in _USAGE_FIELDS:
            value: Any = tokens
            for key in path:
                value = value.get(key) if isinstance(value, dict) else None
            if _is_number(value):
                usage[name] = value
    cost = payload.get("cost")
    if _is_number(cost):
        usage["cost"] = cost
    if usage:
        fields.add_metadata("usage", usage)


_EXTRACTORS: dict[str, Callable[[dict[str, Any], SpanFields], None]] = {
    "pre_tool_use": _extract_tool_common,
    "post_tool_use": _extract_post_tool_use,
    "post_tool_use_failure": _extract_post_tool_use_failure,
    "session_end": _extract_session_end,
    "subagent_start": _extract_subagent,
    "subagent_stop": _extract_subagent,
    "user_prompt_submit": _extract_user_prompt,
    "notification": _extract_notification,
    "assistant_message": _extract_assistant_message,
}
