"""
Pulse CLI - command-line entry point.

Commands:
    pulse init         Save the trace service URL, API key and project id
    pulse connect      Install hooks into every detected agent tool
    pulse disconnect   Remove pulse hooks from every agent tool
    pulse status       Show configuration, connectivity and hook state
    pulse emit TYPE    Forward one hook event read from stdin (used by the hooks)
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console

from pulse_cli import __version__
from pulse_cli.config import ConfigStore
from pulse_cli.emit import emit_event
from pulse_cli.errors import ConfigMissingError, PulseError
from pulse_cli.hooks import (
    HookStatus,
    TargetResult,
    connect_all,
    disconnect_all,
    registered_hooks,
    status_all,
)
from pulse_cli.http import TraceHttpClient
from pulse_cli.models.config import PulseConfig

app = typer.Typer(
    name="pulse",
    help="Pulse CLI for agentic tool observability",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pulse {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    _configure_logging(verbose)


def _load_config_or_exit(store: ConfigStore) -> PulseConfig:
    try:
        return store.load()
    except ConfigMissingError as e:
        console.print(f"[yellow]{e}[/yellow]")
        raise typer.Exit(1) from e
    except PulseError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _path_suffix(status: HookStatus) -> str:
    return f" [dim]({status.path})[/dim]" if status.path else ""


def _print_not_detected(status: HookStatus, indent: str = "") -> None:
    message = status.message or "Tool not detected on this machine"
    console.print(f"{indent}- {status.tool}: [dim]{message}[/dim]")


def _print_hook_details(status: HookStatus) -> None:
    if status.total_hooks == 0:
        return
    console.print(f"    {status.installed_hooks}/{status.total_hooks} hooks installed")
    if status.installed_hook_names:
        console.print(f"    {', '.join(status.installed_hook_names)}")
    if status.installed_hooks < status.total_hooks:
        console.print("    Run `pulse connect` to install missing hooks")


def _print_error(result: TargetResult, indent: str = "") -> None:
    console.print(f"{indent}- {result.tool}: [red]error:[/red] {result.error}")


def _print_connect_summary(status: HookStatus) -> None:
    if not status.detected:
        _print_not_detected(status)
        return
    if status.connected and status.modified:
        console.print(f"- {status.tool}: [green]hooks installed[/green]{_path_suffix(status)}")
    elif status.connected:
        console.print(f"- {status.tool}: already connected{_path_suffix(status)}")
    else:
        console.print(f"- {status.tool}: [red]unable to inject hooks[/red]{_path_suffix(status)}")
    _print_hook_details(status)


def _print_disconnect_summary(status: HookStatus) -> None:
    if not status.detected:
        _print_not_detected(status)
    elif status.connected:
        console.print(
            f"- {status.tool}: [yellow]hooks still present[/yellow]{_path_suffix(status)}"
        )
    elif status.modified:
        console.print(f"- {status.tool}: [green]hooks removed[/green]{_path_suffix(status)}")
    else:
        console.print(f"- {status.tool}: no hooks to remove{_path_suffix(status)}")


def _print_hook_status(status: HookStatus) -> None:
    if not status.detected:
        _print_not_detected(status, indent="  ")
        return
    if status.connected:
        state = "[green]connected[/green]"
    elif status.is_partial:
        state = f"[yellow]partial ({status.installed_hooks}/{status.total_hooks})[/yellow]"
    else:
        state = "disconnected"
    console.print(f"  - {status.tool}: {state}{_path_suffix(status)}")
    if status.message:
        console.print(f"    [yellow]{status.message}[/yellow]")


def _mask_key(key: str) -> str:
    if not key:
        return "(empty)"
    return f"{key[:4]}***"


@app.command(name="init")
def init(
    api_url: str | None = typer.Option(
        None, "--api-url", help="Trace service URL (e.g. https://pulse.example.com)"
    ),
    api_key: str | None = typer.Option(None, "--api-key", help="API key for authentication"),
    project_id: str | None = typer.Option(None, "--project-id", help="Project ID"),
    no_validate: bool = typer.Option(False, "--no-validate", help="Skip health check validation"),
) -> None:
    """Save trace service credentials to ~/.pulse/config.json."""
    if api_url is None:
        console.print("[bold]Pulse CLI setup[/bold]")
        api_url = typer.prompt("Trace service URL (e.g. https://pulse.example.com)")
    if api_key is None:
        api_key = typer.prompt("API key", hide_input=True)
    if project_id is None:
        project_id = typer.prompt("Project ID")

    config = PulseConfig(api_url=api_url, api_key=api_key, project_id=project_id).sanitized()

    if not no_validate:
        console.print("Validating credentials...")
        try:
            with TraceHttpClient(config) as client:
                client.health_check()
        except PulseError as e:
            console.print(
                f"[red]Error:[/red] Failed to contact trace service at {config.api_url}: {e}"
            )
            raise typer.Exit(1) from e

    path = ConfigStore().save(config)
    console.print(f"[green]✓[/green] Configuration saved to {path}")


@app.command(name="connect")
def connect() -> None:
    """Install pulse hooks into every detected agent tool."""
    _load_config_or_exit(ConfigStore())

    console.print("Detecting supported tools...")
    results = connect_all(registered_hooks())
    any_connected = False
    for result in results:
        if result.status is None:
            _print_error(result)
            continue
        _print_connect_summary(result.status)
        any_connected = any_connected or (result.status.detected and result.status.connected)

    if not any_connected:
        console.print(
            "No supported tools detected. "
            "Launch Claude Code at least once so we can locate its settings."
        )
    if not all(result.ok for result in results):
        raise typer.Exit(1)


@app.command(name="disconnect")
def disconnect() -> None:
    """Remove pulse hooks, leaving every other hook in place."""
    _load_config_or_exit(ConfigStore())

    console.print("Removing hooks...")
    results = disconnect_all(registered_hooks())
    for result in results:
        if result.status is None:
            _print_error(result)
        else:
            _print_disconnect_summary(result.status)

    if not all(result.ok for result in results):
        raise typer.Exit(1)


@app.command(name="status")
def status() -> None:
    """Show configuration, trace service connectivity and hook state."""
    store = ConfigStore()
    try:
        config = store.load()
    except ConfigMissingError:
        console.print("Pulse is not initialized. Run `pulse init` first.")
        return
    except PulseError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    console.print("[bold]Configuration[/bold]")
    console.print(f"  API URL     : {config.api_url}")
    console.print(f"  Project ID  : {config.project_id}")
    console.print(f"  Config file : {store.config_path}")
    console.print(f"  API key     : {_mask_key(config.api_key)}")

    console.print("\n[bold]Connectivity[/bold]")
    try:
        with TraceHttpClient(config) as client:
            client.health_check()
        console.print("  [green]Trace service reachable[/green]")
    except PulseError as e:
        console.print(f"  [red]Unable to reach trace service:[/red] {e}")

    console.print("\n[bold]Hooks[/bold]")
    results = status_all(registered_hooks())
    for result in results:
        if result.status is None:
            _print_error(result, indent="  ")
        else:
            _print_hook_status(result.status)

    if not all(result.ok for result in results):
        raise typer.Exit(1)


@app.command(name="emit")
def emit(
    event_type: str = typer.Argument(..., help="Event type (e.g. post_tool_use, stop)"),
    source: str | None = typer.Option(
        None, "--source", help="Override the event source label (defaults to claude_code)"
    ),
) -> None:
    """Forward one hook event from stdin. Never fails, so hosts are never disrupted."""
    try:
        raw = sys.stdin.read()
    except (OSError, UnicodeDecodeError):
        return
    emit_event(event_type, raw, source=source)


if __name__ == "__main__":
    app()
