"""Ingestion entry point used by host hooks: ``pulse emit <event_type>``.

Emission must never disturb the host application, so every failure here is
logged at debug level and dropped.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from . import __version__
from .config import ConfigStore
from .errors import PulseError
from .http import TraceHttpClient
from .spans import normalize_event

if TYPE_CHECKING:
    from .models.config import PulseConfig
    from .models.span import SpanPayload

logger = logging.getLogger(__name__)


def emit_event(
    event_type: str,
    raw: str,
    *,
    source: str | None = None,
    config: PulseConfig | None = None,
    client: TraceHttpClient | None = None,
) -> SpanPayload | None:
    """Normalize one raw hook payload and send it. Returns the span sent, if any."""
    if not raw.strip():
        return None
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Dropping %s event: payload is not JSON", event_type)
        return None

    span = normalize_event(event_type, payload, source=source)
    if span is None:
        logger.debug("Dropping %r event: no span could be built", event_type)
        return None

    try:
        if config is None:
            config = ConfigStore().load()
        span.metadata = {
            **(span.metadata or {}),
            "cli_version": __version__,
            "project_id": config.project_id,
        }
        if client is None:
            with TraceHttpClient(config) as owned:
                owned.post_spans([span])
        else:
            client.post_spans([span])
    except (PulseError, OSError) as e:
        logger.debug("Dropping %s event: %s", event_type, e)
        return None
    return span
