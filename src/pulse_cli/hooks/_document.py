"""Accessors for the untyped JSON tree in a host's settings.json.

The tree is never validated against a full schema. Only the nodes pulse owns
are inspected, and a node with the wrong JSON type raises
:class:`MalformedSettingsError` instead of being overwritten.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .._files import atomic_write_text
from ..errors import LoadError, MalformedSettingsError

if TYPE_CHECKING:
    from pathlib import Path

HOOKS_KEY = "hooks"


def read_document(path: Path) -> dict[str, Any] | None:
    """Parse ``path`` as a JSON object, or return None if the file does not exist."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {path}: {e}", path=path) from e
    if not isinstance(value, dict):
        raise MalformedSettingsError(f"{path} must contain a JSON object", path=path)
    return value


def write_document(path: Path, document: dict[str, Any]) -> None:
    atomic_write_text(path, json.dumps(document, indent=2) + "\n")


def hooks_section(document: dict[str, Any], path: Path) -> dict[str, Any] | None:
    """Return ``document["hooks"]``, or None when the key is absent.

    A present key must hold a JSON object; ``null`` counts as present.
    """
    if HOOKS_KEY not in document:
        return None
    hooks = document[HOOKS_KEY]
    if not isinstance(hooks, dict):
        raise MalformedSettingsError(f"`hooks` field in {path} must be a JSON object", path=path)
    return hooks


def ensure_hooks_section(document: dict[str, Any], path: Path) -> dict[str, Any]:
    hooks = hooks_section(document, path)
    if hooks is None:
        hooks = document[HOOKS_KEY] = {}
    return hooks


def event_groups(hooks: dict[str, Any], event: str, path: Path) -> list[Any] | None:
    """Return the matcher-group array for ``event`` (see :func:`hooks_section`)."""
    if event not in hooks:
        return None
    groups = hooks[event]
    if not isinstance(groups, list):
        raise MalformedSettingsError(
            f"Hook entries for {event} in {path} must be a JSON array", path=path
        )
    return groups


def ensure_event_groups(hooks: dict[str, Any], event: str, path: Path) -> list[Any]:
    groups = event_groups(hooks, event, path)
    if groups is None:
        groups = hooks[event] = []
    return groups


def _hook_list(group: Any) -> list[Any] | None:
    if not isinstance(group, dict):
        return None
    hooks = group.get("hooks")
    return hooks if isinstance(hooks, list) else None


def _is_command(hook: Any, command: str) -> bool:
    return isinstance(hook, dict) and hook.get("command") == command


def group_has_command(group: Any, command: str) -> bool:
    hooks = _hook_list(group)
    return hooks is not None and any(_is_command(h, command) for h in hooks)


def groups_have_command(groups: list[Any] | None, command: str) -> bool:
    return groups is not None and any(group_has_command(g, command) for g in groups)


def remove_command(group: Any, command: str) -> bool:
    """Drop hook records running exactly ``command`` from one group, in place."""
    hooks = _hook_list(group)
    if hooks is None:
        return False
    kept = [h for h in hooks if not _is_command(h, command)]
    if len(kept) == len(hooks):
        return False
    hooks[:] = kept
    return True
