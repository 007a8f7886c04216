from .config import PulseConfig
from .hook import HookEntry, HookEvent, HookMatcher
from .span import SpanPayload

__all__ = [
    "HookEntry",
    "HookEvent",
    "HookMatcher",
    "PulseConfig",
    "SpanPayload",
]
