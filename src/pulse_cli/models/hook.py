from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class HookEntry(BaseModel):
    """Single hook action inside a settings.json matcher group."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    type: Literal["command", "prompt", "agent"] = "command"
    command: str | None = None
    is_async: bool | None = Field(None, alias="async")


class HookMatcher(BaseModel):
    """Matcher group: a tool matcher and the hook entries it runs."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    matcher: str = ""
    hooks: list[HookEntry] = []

    @classmethod
    def for_command(cls, command: str) -> HookMatcher:
        """Group with a blank matcher and one async command hook."""
        return cls(matcher="", hooks=[HookEntry(type="command", command=command, is_async=True)])

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# Hook event names understood by Claude Code's settings.json.
HookEvent = Literal[
    "PreToolUse",
    "PostToolUse",
    "PostToolUseFailure",
    "SessionStart",
    "SessionEnd",
    "SubagentStart",
    "SubagentStop",
    "Stop",
    "Notification",
    "UserPromptSubmit",
]
