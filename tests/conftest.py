import pytest

from pulse_cli.models.config import PulseConfig


@pytest.fixture(autouse=True)
def _clear_pulse_env(monkeypatch):
    for name in ("PULSE_API_URL", "PULSE_API_KEY", "PULSE_PROJECT_ID"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> PulseConfig:
    return PulseConfig(
        api_url="https://pulse.example.com",
        api_key="pk_test_123456",
        project_id="proj_1",
    )

