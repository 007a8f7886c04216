"""Protocol (port) implemented by every supported host integration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ._status import HookStatus


class ToolHook(Protocol):
    """Detects a host application and installs or removes pulse's hooks in it.

    ``status`` never writes. ``connect`` and ``disconnect`` are idempotent and
    return a "not detected" status, rather than raising, when the host is absent.
    """

    @property
    def tool_name(self) -> str: ...
    def status(self) -> HookStatus: ...
    def connect(self) -> HookStatus: ...
    def disconnect(self) -> HookStatus: ...
