"""Plugin files shipped inside the package and copied into host directories."""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def load_asset(*parts: str) -> bytes:
    resource = files(__package__) / "assets"
    for part in parts:
        resource = resource / part
    return resource.read_bytes()


def file_matches(path: Path, content: bytes) -> bool:
    """True if ``path`` holds exactly ``content``; a missing file never matches."""
    try:
        return path.read_bytes() == content
    except FileNotFoundError:
        return False


OPENCODE_PLUGIN_SOURCE = load_asset("opencode", "pulse-plugin.ts")
OPENCLAW_HOOK_MD_SOURCE = load_asset("openclaw", "HOOK.md")
OPENCLAW_HANDLER_TS_SOURCE = load_asset("openclaw", "handler.ts")
