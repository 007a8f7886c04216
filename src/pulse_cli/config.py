"""Pulse settings store: a flat JSON object at ~/.pulse/config.json.

Values from the environment (``PULSE_API_URL``, ``PULSE_API_KEY``,
``PULSE_PROJECT_ID``) override the file on load.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import ValidationError

from ._files import atomic_write_text
from .errors import ConfigMissingError, LoadError
from .models.config import PulseConfig

CONFIG_DIR = ".pulse"
CONFIG_FILE = "config.json"
ENV_PREFIX = "PULSE_"


class ConfigStore:
    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = Path(config_dir) if config_dir is not None else Path.home() / CONFIG_DIR

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE

    def exists(self) -> bool:
        return self.config_path.exists()

    def load(self) -> PulseConfig:
        path = self.config_path
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigMissingError(path) from e
        except json.JSONDecodeError as e:
            raise LoadError(f"Invalid JSON in {path}: {e}", path=path) from e
        if not isinstance(raw, dict):
            raise LoadError(f"{path} must contain a JSON object", path=path)

        for field in PulseConfig.model_fields:
            value = os.environ.get(ENV_PREFIX + field.upper())
            if value:
                raw[field] = value
        try:
            return PulseConfig.model_validate(raw).sanitized()
        except ValidationError as e:
            raise LoadError(f"Invalid configuration in {path}: {e}", path=path) from e

    def save(self, config: PulseConfig) -> Path:
        data = config.sanitized().model_dump()
        atomic_write_text(self.config_path, json.dumps(data, indent=2) + "\n")
        return self.config_path
