"""pulse-cli: wire agent tools into the Pulse trace service."""

__version__ = "0.1.0"

from .config import ConfigStore
from .emit import emit_event
from .errors import (
    ConfigMissingError,
    LoadError,
    MalformedSettingsError,
    PulseError,
    TraceServiceError,
)
from .hooks import (
    HOOK_DEFINITIONS,
    ClaudeCodeHook,
    HookStatus,
    OpenClawHook,
    OpenCodeHook,
    TargetResult,
    ToolHook,
    connect_all,
    disconnect_all,
    registered_hooks,
    status_all,
)
from .http import TraceHttpClient
from .models import HookEntry, HookMatcher, PulseConfig, SpanPayload
from .spans import SpanFields, event_type_to_kind, event_type_to_status, extract, normalize_event

__all__ = [
    "HOOK_DEFINITIONS",
    "ClaudeCodeHook",
    "ConfigMissingError",
    "ConfigStore",
    "HookEntry",
    "HookMatcher",
    "HookStatus",
    "LoadError",
    "MalformedSettingsError",
    "OpenClawHook",
    "OpenCodeHook",
    "PulseConfig",
    "PulseError",
    "SpanFields",
    "SpanPayload",
    "TargetResult",
    "ToolHook",
    "TraceHttpClient",
    "TraceServiceError",
    "__version__",
    "connect_all",
    "disconnect_all",
    "emit_event",
    "event_type_to_kind",
    "event_type_to_status",
    "extract",
    "normalize_event",
    "registered_hooks",
    "status_all",
]
