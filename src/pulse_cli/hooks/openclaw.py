"""OpenClaw integration: a hook directory holding HOOK.md and handler.ts.

The two files are versioned together and count as a single hook. Having only
one of them on disk reports the hook as not installed.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import frontmatter  # type: ignore[import-untyped]
import yaml

from ._assets import OPENCLAW_HANDLER_TS_SOURCE, OPENCLAW_HOOK_MD_SOURCE, file_matches
from ._status import HookStatus

logger = logging.getLogger(__name__)

OPENCLAW_TOOL_NAME = "OpenClaw"
OPENCLAW_CONFIG_DIR = ".openclaw"
OPENCLAW_HOOK_DIR = "pulse-hook"


def _manifest_version(content: bytes) -> str | None:
    try:
        version = frontmatter.loads(content.decode("utf-8")).metadata.get("version")
    except (UnicodeDecodeError, yaml.YAMLError, ValueError):
        return None
    return str(version) if version is not None else None


class OpenClawHook:
    """Installs and removes the ``pulse-hook`` directory as one unit."""

    def __init__(
        self,
        home: Path | None = None,
        *,
        hook_md_source: bytes = OPENCLAW_HOOK_MD_SOURCE,
        handler_ts_source: bytes = OPENCLAW_HANDLER_TS_SOURCE,
    ) -> None:
        home = Path(home) if home is not None else Path.home()
        self.config_dir = home / OPENCLAW_CONFIG_DIR
        self.hook_dir = self.config_dir / "hooks" / OPENCLAW_HOOK_DIR
        self.hook_md_path = self.hook_dir / "HOOK.md"
        self.handler_ts_path = self.hook_dir / "handler.ts"
        self._files = {
            self.hook_md_path: hook_md_source,
            self.handler_ts_path: handler_ts_source,
        }

    @property
    def tool_name(self) -> str:
        return OPENCLAW_TOOL_NAME

    def is_detected(self) -> bool:
        return self.config_dir.is_dir()

    def files_installed(self) -> bool:
        return all(path.exists() for path in self._files)

    def files_match(self) -> bool:
        return all(file_matches(path, content) for path, content in self._files.items())

    def status(self) -> HookStatus:
        if not self.is_detected():
            return HookStatus.not_detected(self.tool_name, self.config_dir)
        return self._current_status(modified=False)

    def connect(self) -> HookStatus:
        if not self.is_detected():
            return HookStatus.not_detected(self.tool_name, self.config_dir)
        already_current = self.files_match()
        if already_current:
            logger.debug("OpenClaw hook at %s is up to date", self.hook_dir)
        else:
            self.hook_dir.mkdir(parents=True, exist_ok=True)
            for path, content in self._files.items():
                path.write_bytes(content)
            logger.info("Wrote OpenClaw hook to %s", self.hook_dir)
        return self._current_status(modified=not already_current)

    def disconnect(self) -> HookStatus:
        if not self.is_detected():
            return HookStatus.not_detected(self.tool_name, self.config_dir)
        was_present = self.hook_dir.exists()
        if was_present:
            shutil.rmtree(self.hook_dir)
            logger.info("Removed OpenClaw hook directory %s", self.hook_dir)
        return self._current_status(modified=was_present)

    def _current_status(self, *, modified: bool) -> HookStatus:
        installed = self.files_installed()
        message = None
        if installed and not self.files_match():
            message = "Hook installed but outdated"
            current = _manifest_version(self._files[self.hook_md_path])
            on_disk = _manifest_version(self.hook_md_path.read_bytes())
            if current and on_disk and current != on_disk:
                message += f" (installed {on_disk}, current {current})"
        elif not installed and any(path.exists() for path in self._files):
            message = "Hook partially installed"
        return HookStatus(
            tool=self.tool_name,
            detected=True,
            connected=installed,
            modified=modified,
            path=self.hook_dir,
            message=message,
            installed_hooks=1 if installed else 0,
            total_hooks=1,
            installed_hook_names=[OPENCLAW_HOOK_DIR] if installed else [],
        )
