from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class HookStatus:
    """Reconciliation state of one integration target.

    Attributes:
        tool: Display name of the host application.
        detected: The host is present on this machine.
        connected: Every catalogue entry is installed.
        modified: The call that produced this status changed files on disk.
        path: File or directory that was inspected or modified.
        message: Human-readable caveat, e.g. an outdated install.
        installed_hooks: Number of catalogue entries found installed.
        total_hooks: Size of the catalogue.
        installed_hook_names: Installed catalogue entries, in catalogue order.
    """

    tool: str
    detected: bool
    connected: bool = False
    modified: bool = False
    path: Path | None = None
    message: str | None = None
    installed_hooks: int = 0
    total_hooks: int = 0
    installed_hook_names: list[str] = field(default_factory=list)

    @classmethod
    def not_detected(cls, tool: str, path: Path, total_hooks: int = 0) -> HookStatus:
        return cls(
            tool=tool,
            detected=False,
            path=path,
            message=f"Tool not detected. Expected settings at {path}",
            total_hooks=total_hooks,
        )

    @property
    def is_partial(self) -> bool:
        return self.detected and not self.connected and self.installed_hooks > 0
