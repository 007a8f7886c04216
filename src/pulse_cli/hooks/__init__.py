"""Host integrations: detect agent tools and wire pulse into their configuration."""

from __future__ import annotations

from pathlib import Path

from ._batch import TargetResult, connect_all, disconnect_all, status_all
from ._protocols import ToolHook
from ._status import HookStatus
from .claude_code import CLAUDE_SOURCE, HOOK_DEFINITIONS, ClaudeCodeHook
from .openclaw import OpenClawHook
from .opencode import OpenCodeHook


def registered_hooks(home: Path | None = None) -> list[ToolHook]:
    """Build every supported integration target, rooted at ``home``.

    home: defaults to the current user's home directory
    """
    home = Path(home) if home is not None else Path.home()
    return [ClaudeCodeHook(home), OpenCodeHook(home), OpenClawHook(home)]


__all__ = [
    "CLAUDE_SOURCE",
    "HOOK_DEFINITIONS",
    "ClaudeCodeHook",
    "HookStatus",
    "OpenClawHook",
    "OpenCodeHook",
    "TargetResult",
    "ToolHook",
    "connect_all",
    "disconnect_all",
    "registered_hooks",
    "status_all",
]
