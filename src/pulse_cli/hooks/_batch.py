"""Run one contract operation across every integration target.

A failing target does not stop the batch: its error is captured in its
:class:`TargetResult` and the remaining targets are still processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable

from ..errors import PulseError

if TYPE_CHECKING:
    from ._protocols import ToolHook
    from ._status import HookStatus

logger = logging.getLogger(__name__)


@dataclass
class TargetResult:
    tool: str
    status: HookStatus | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _run_all(
    hooks: Iterable[ToolHook], operation: Callable[[ToolHook], HookStatus], verb: str
) -> list[TargetResult]:
    results: list[TargetResult] = []
    for hook in hooks:
        try:
            status = operation(hook)
        except (PulseError, OSError) as e:
            logger.warning("Failed to %s %s: %s", verb, hook.tool_name, e)
            results.append(TargetResult(tool=hook.tool_name, error=e))
        else:
            results.append(TargetResult(tool=hook.tool_name, status=status))
    return results


def connect_all(hooks: Iterable[ToolHook]) -> list[TargetResult]:
    return _run_all(hooks, lambda hook: hook.connect(), "connect")


def disconnect_all(hooks: Iterable[ToolHook]) -> list[TargetResult]:
    return _run_all(hooks, lambda hook: hook.disconnect(), "disconnect")


def status_all(hooks: Iterable[ToolHook]) -> list[TargetResult]:
    return _run_all(hooks, lambda hook: hook.status(), "inspect")
