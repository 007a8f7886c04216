"""Event normalization: host payload in, canonical span (or nothing) out."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from ..hooks.claude_code import CLAUDE_SOURCE
from ._extract import (
    DEFAULT_KIND,
    EVENT_KINDS,
    SpanFields,
    event_type_to_kind,
    event_type_to_status,
    extract,
)

if TYPE_CHECKING:
    from ..models.span import SpanPayload

DEFAULT_SOURCE = CLAUDE_SOURCE


def normalize_event(
    event_type: str,
    payload: Any,
    *,
    source: str | None = None,
    span_id: str | None = None,
    timestamp: str | None = None,
) -> SpanPayload | None:
    """Map one hook event to a span, or None if it cannot be emitted.

    Non-object payloads, blank event types and payloads without a session id
    are dropped rather than raised. The source label is ``source`` if given,
    else the payload's ``source`` field, else ``claude_code``.
    """
    event_type = event_type.strip()
    if not event_type or not isinstance(payload, dict):
        return None
    fields = extract(event_type, payload)
    source = (source or "").strip() or fields.source or DEFAULT_SOURCE
    return fields.into_span(
        span_id=span_id or str(uuid.uuid4()),
        timestamp=timestamp or datetime.now(timezone.utc).isoformat(),
        event_type=event_type,
        source=source,
    )


__all__ = [
    "DEFAULT_KIND",
    "DEFAULT_SOURCE",
    "EVENT_KINDS",
    "SpanFields",
    "event_type_to_kind",
    "event_type_to_status",
    "extract",
    "normalize_event",
]
