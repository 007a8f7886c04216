from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class PulseError(Exception):
    """Base class for every error raised by pulse-cli."""


class ConfigMissingError(PulseError):
    """Raised when the pulse configuration file has not been created yet."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        super().__init__("Pulse is not initialized. Run `pulse init` first.")


class LoadError(PulseError):
    """Raised when a configuration or settings file cannot be read or parsed.

    Attributes:
        path: The file that could not be loaded, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class MalformedSettingsError(LoadError):
    """Raised when a host settings file parses but violates the expected shape.

    The file is left untouched when this is raised.
    """


class TraceServiceError(PulseError):
    """Raised when a request to the trace service fails (network or HTTP status).

    Attributes:
        url: The URL that was requested, if applicable.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)
