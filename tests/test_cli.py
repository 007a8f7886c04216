"""Tests for the pulse command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from pulse_cli.cli import _mask_key, app
from pulse_cli.config import ConfigStore
from pulse_cli.models.config import PulseConfig

runner = CliRunner()


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def initialized(home, config):
    ConfigStore(home / ".pulse").save(config)
    return home


def _claude_settings(home, data=None):
    path = home / ".claude" / "settings.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(data if data is not None else {}))
    return path


def test_mask_key():
    assert _mask_key("") == "(empty)"
    assert _mask_key("pk_live_abcdef") == "pk_l***"


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "pulse 0.1.0" in result.output


def test_init_saves_config_without_validation(home):
    result = runner.invoke(
        app,
        [
            "init",
            "--api-url",
            "https://pulse.example.com/",
            "--api-key",
            "pk_1",
            "--project-id",
            "proj_1",
            "--no-validate",
        ],
    )
    assert result.exit_code == 0, result.output
    saved = json.loads((home / ".pulse" / "config.json").read_text())
    assert saved == {
        "api_url": "https://pulse.example.com",
        "api_key": "pk_1",
        "project_id": "proj_1",
    }


def test_init_prompts_and_validates(home, httpx_mock):
    httpx_mock.add_response(url="https://pulse.example.com/health")
    result = runner.invoke(app, ["init"], input="https://pulse.example.com\npk_1\nproj_1\n")
    assert result.exit_code == 0, result.output
    assert (home / ".pulse" / "config.json").exists()


def test_init_fails_when_service_unreachable(home, httpx_mock):
    httpx_mock.add_response(url="https://pulse.example.com/health", status_code=500)
    result = runner.invoke(
        app,
        ["init", "--api-url", "https://pulse.example.com", "--api-key", "k", "--project-id", "p"],
    )
    assert result.exit_code == 1
    assert not (home / ".pulse" / "config.json").exists()


def test_connect_requires_init(home):
    result = runner.invoke(app, ["connect"])
    assert result.exit_code == 1
    assert "pulse init" in result.output


def test_connect_installs_into_detected_tools(initialized):
    settings = _claude_settings(initialized)
    (initialized / ".openclaw").mkdir()

    result = runner.invoke(app, ["connect"])

    assert result.exit_code == 0, result.output
    assert "Claude Code: hooks installed" in result.output
    assert "10/10 hooks installed" in result.output
    assert "OpenClaw: hooks installed" in result.output
    assert "OpenCode: Tool not detected" in result.output
    assert "PostToolUse" in json.loads(settings.read_text())["hooks"]

    again = runner.invoke(app, ["connect"])
    assert "Claude Code: already connected" in again.output


def test_connect_without_any_tool(initialized):
    result = runner.invoke(app, ["connect"])
    assert result.exit_code == 0
    assert "No supported tools detected" in result.output


def test_connect_reports_failure_and_continues(initialized):
    _claude_settings(initialized, {"hooks": "broken"})
    (initialized / ".config" / "opencode").mkdir(parents=True)

    result = runner.invoke(app, ["connect"])

    assert result.exit_code == 1
    assert "Claude Code: error:" in result.output
    assert "OpenCode: hooks installed" in result.output
    assert (initialized / ".config" / "opencode" / "plugins" / "pulse-plugin.ts").exists()


def test_disconnect_removes_hooks(initialized):
    settings = _claude_settings(initialized, {"model": "opus"})
    runner.invoke(app, ["connect"])

    result = runner.invoke(app, ["disconnect"])
    assert result.exit_code == 0, result.output
    assert "Claude Code: hooks removed" in result.output
    assert json.loads(settings.read_text()) == {"model": "opus"}

    again = runner.invoke(app, ["disconnect"])
    assert "Claude Code: no hooks to remove" in again.output


def test_status_uninitialized(home):
    result = runner.invoke(app, ["status"])
    assert result.exit_code == 0
    assert "not initialized" in result.output


def test_status_reports_config_connectivity_and_hooks(initialized, httpx_mock):
    httpx_mock.add_response(url="https://pulse.example.com/health")
    _claude_settings(initialized)
    runner.invoke(app, ["connect"])

    result = runner.invoke(app, ["status"])

    assert result.exit_code == 0, result.output
    assert "pk_t***" in result.output
    assert "pk_test_123456" not in result.output
    assert "Trace service reachable" in result.output
    assert "Claude Code: connected" in result.output


def test_status_unreachable_service(initialized, httpx_mock):
    httpx_mock.add_response(url="https://pulse.example.com/health", status_code=502)
    result = runner.invoke(app, ["status"])
    assert result.exit_code == 0
    assert "Unable to reach trace service" in result.output


def test_status_with_malformed_api_url(home):
    ConfigStore(home / ".pulse").save(
        PulseConfig(api_url="http://exa mple.com:abc", api_key="k", project_id="p")
    )
    result = runner.invoke(app, ["status"])
    assert result.exit_code == 0, result.output
    assert "Unable to reach trace service" in result.output


def test_emit_never_fails(home):
    result = runner.invoke(app, ["emit", "post_tool_use"], input="not json at all")
    assert result.exit_code == 0
    result = runner.invoke(app, ["emit", "stop"], input=json.dumps({"session_id": "s1"}))
    assert result.exit_code == 0


def test_emit_posts_span(initialized, httpx_mock):
    httpx_mock.add_response(method="POST", url="https://pulse.example.com/v1/spans/batch")
    payload = {"session_id": "s1", "tool_name": "Bash", "error": "denied", "is_interrupt": True}
    result = runner.invoke(
        app, ["emit", "post_tool_use_failure", "--source", "opencode"], input=json.dumps(payload)
    )
    assert result.exit_code == 0
    body = json.loads(httpx_mock.get_request().content)
    assert body[0]["status"] == "error"
    assert body[0]["source"] == "opencode"
    assert body[0]["is_interrupt"] is True
