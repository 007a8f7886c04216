from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PulseConfig(BaseModel):
    """Contents of ~/.pulse/config.json."""

    model_config = ConfigDict(extra="ignore")
    api_url: str
    api_key: str
    project_id: str

    def sanitized(self) -> PulseConfig:
        return PulseConfig(
            api_url=self.api_url.strip().rstrip("/"),
            api_key=self.api_key.strip(),
            project_id=self.project_id.strip(),
        )
