"""OpenCode integration: a single plugin file under ~/.config/opencode/plugins/."""

from __future__ import annotations

import logging
from pathlib import Path

from ._assets import OPENCODE_PLUGIN_SOURCE, file_matches
from ._status import HookStatus

logger = logging.getLogger(__name__)

OPENCODE_TOOL_NAME = "OpenCode"
OPENCODE_CONFIG_DIR = Path(".config") / "opencode"
OPENCODE_PLUGIN_FILENAME = "pulse-plugin.ts"
OPENCODE_PLUGIN_NAME = "pulse-plugin"


class OpenCodeHook:
    """Keeps ``pulse-plugin.ts`` byte-identical to the packaged copy."""

    def __init__(
        self, home: Path | None = None, *, plugin_source: bytes = OPENCODE_PLUGIN_SOURCE
    ) -> None:
        home = Path(home) if home is not None else Path.home()
        self.config_dir = home / OPENCODE_CONFIG_DIR
        self.plugin_path = self.config_dir / "plugins" / OPENCODE_PLUGIN_FILENAME
        self.plugin_source = plugin_source

    @property
    def tool_name(self) -> str:
        return OPENCODE_TOOL_NAME

    def is_detected(self) -> bool:
        return self.config_dir.is_dir()

    def status(self) -> HookStatus:
        if not self.is_detected():
            return HookStatus.not_detected(self.tool_name, self.config_dir)
        return self._current_status(modified=False)

    def connect(self) -> HookStatus:
        if not self.is_detected():
            return HookStatus.not_detected(self.tool_name, self.config_dir)
        already_current = file_matches(self.plugin_path, self.plugin_source)
        if already_current:
            logger.debug("OpenCode plugin at %s is up to date", self.plugin_path)
        else:
            self.plugin_path.parent.mkdir(parents=True, exist_ok=True)
            self.plugin_path.write_bytes(self.plugin_source)
            logger.info("Wrote OpenCode plugin to %s", self.plugin_path)
        return self._current_status(modified=not already_current)

    def disconnect(self) -> HookStatus:
        if not self.is_detected():
            return HookStatus.not_detected(self.tool_name, self.config_dir)
        was_installed = self.plugin_path.exists()
        if was_installed:
            self.plugin_path.unlink()
            logger.info("Removed OpenCode plugin %s", self.plugin_path)
        return self._current_status(modified=was_installed)

    def _current_status(self, *, modified: bool) -> HookStatus:
        installed = self.plugin_path.exists()
        outdated = installed and not file_matches(self.plugin_path, self.plugin_source)
        return HookStatus(
            tool=self.tool_name,
            detected=True,
            connected=installed,
            modified=modified,
            path=self.plugin_path,
            message="Plugin installed but outdated" if outdated else None,
            installed_hooks=1 if installed else 0,
            total_hooks=1,
            installed_hook_names=[OPENCODE_PLUGIN_NAME] if installed else [],
        )
