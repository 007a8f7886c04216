"""Claude Code integration: pulse hooks in ~/.claude/settings.json.

Each catalogue entry becomes a matcher group of the form::

    {"matcher": "", "hooks": [{"type": "command", "command": "pulse emit stop", "async": true}]}

Groups and hook records that do not run one of pulse's exact commands belong
to the user or to other tools and are never counted, duplicated or removed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..models.hook import HookEvent, HookMatcher
from . import _document as doc
from ._status import HookStatus

logger = logging.getLogger(__name__)

CLAUDE_TOOL_NAME = "Claude Code"
CLAUDE_SOURCE = "claude_code"
CLAUDE_SETTINGS = Path(".claude") / "settings.json"

HOOK_DEFINITIONS: tuple[tuple[HookEvent, str], ...] = (
    ("PreToolUse", "pulse emit pre_tool_use"),
    ("PostToolUse", "pulse emit post_tool_use"),
    ("PostToolUseFailure", "pulse emit post_tool_use_failure"),
    ("SessionStart", "pulse emit session_start"),
    ("SessionEnd", "pulse emit session_end"),
    ("Stop", "pulse emit stop"),
    ("SubagentStart", "pulse emit subagent_start"),
    ("SubagentStop", "pulse emit subagent_stop"),
    ("UserPromptSubmit", "pulse emit user_prompt_submit"),
    ("Notification", "pulse emit notification"),
)


class ClaudeCodeHook:
    """Reconciles :data:`HOOK_DEFINITIONS` against a Claude Code settings file."""

    def __init__(
        self,
        home: Path | None = None,
        *,
        definitions: tuple[tuple[HookEvent, str], ...] = HOOK_DEFINITIONS,
    ) -> None:
        home = Path(home) if home is not None else Path.home()
        self.settings_path = home / CLAUDE_SETTINGS
        self.definitions = definitions

    @property
    def tool_name(self) -> str:
        return CLAUDE_TOOL_NAME

    def status(self) -> HookStatus:
        document = self._read()
        if document is None:
            return self._not_detected()
        return self._status_of(document, modified=False)

    def connect(self) -> HookStatus:
        document = self._read()
        if document is None:
            return self._not_detected()
        changed = self._insert_hooks(document)
        if changed:
            doc.write_document(self.settings_path, document)
            logger.info("Installed Claude Code hooks in %s", self.settings_path)
        else:
            logger.debug("Claude Code hooks already present in %s", self.settings_path)
        return self._status_of(self._read() or {}, modified=changed)

    def disconnect(self) -> HookStatus:
        document = self._read()
        if document is None:
            return self._not_detected()
        changed = self._remove_hooks(document)
        if changed:
            doc.write_document(self.settings_path, document)
            logger.info("Removed Claude Code hooks from %s", self.settings_path)
        else:
            logger.debug("No Claude Code hooks to remove in %s", self.settings_path)
        return self._status_of(self._read() or {}, modified=changed)

    # --- internal helpers ---

    def _read(self) -> dict[str, Any] | None:
        if not self.settings_path.exists():
            return None
        return doc.read_document(self.settings_path)

    def _not_detected(self) -> HookStatus:
        return HookStatus.not_detected(
            self.tool_name, self.settings_path, total_hooks=len(self.definitions)
        )

    def _insert_hooks(self, document: dict[str, Any]) -> bool:
        hooks = doc.ensure_hooks_section(document, self.settings_path)
        # Validate every catalogue event before touching anything.
        for event, _ in self.definitions:
            doc.event_groups(hooks, event, self.settings_path)

        changed = False
        for event, command in self.definitions:
            groups = doc.ensure_event_groups(hooks, event, self.settings_path)
            if doc.groups_have_command(groups, command):
                continue
            groups.append(HookMatcher.for_command(command).to_settings())
            changed = True
        return changed

    def _remove_hooks(self, document: dict[str, Any]) -> bool:
        hooks = doc.hooks_section(document, self.settings_path)
        if hooks is None:
            return False
        for event, _ in self.definitions:
            doc.event_groups(hooks, event, self.settings_path)

        changed = False
        for event, command in self.definitions:
            groups = doc.event_groups(hooks, event, self.settings_path)
            if groups is None:
                continue
            pruned = {id(g) for g in groups if doc.remove_command(g, command)}
            if not pruned:
                continue
            changed = True
            # Only groups emptied by this removal are dropped.
            groups[:] = [g for g in groups if not (id(g) in pruned and not g["hooks"])]
            if not groups:
                del hooks[event]

        if changed and not hooks:
            del document[doc.HOOKS_KEY]
        return changed

    def _status_of(self, document: dict[str, Any], *, modified: bool) -> HookStatus:
        hooks = doc.hooks_section(document, self.settings_path) or {}
        names = [
            event
            for event, command in self.definitions
            if doc.groups_have_command(doc.event_groups(hooks, event, self.settings_path), command)
        ]
        total = len(self.definitions)
        return HookStatus(
            tool=self.tool_name,
            detected=True,
            connected=len(names) == total,
            modified=modified,
            path=self.settings_path,
            installed_hooks=len(names),
            total_hooks=total,
            installed_hook_names=names,
        )
