"""Typer CLI for cheatsheet."""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path

import typer

from cheatsheet.config import (
    APP_VERSION,
    DEFAULT_CONTENT_PATH,
    DEFAULT_STYLE_PATH,
    LaunchConfig,
    load_settings,
)
from cheatsheet.logging import configure_logging

app = typer.Typer(
    add_completion=False,
    help="Show a Pango markup cheatsheet as a layer-shell overlay on Wayland.",
)


def launch(config: LaunchConfig) -> int:
    """Start the overlay and block until it is dismissed."""

    # GTK is loaded here so the diagnostic commands run without a display
    from cheatsheet.main import main

    return main(config)


def _toolkit_info() -> dict[str, object]:
    try:
        from cheatsheet.ui import gtk
    except (ImportError, ValueError) as exc:
        return {"available": False, "error": str(exc)}
    return {"available": True, **gtk.describe()}


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"cheatsheet {APP_VERSION}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    style: Path = typer.Option(DEFAULT_STYLE_PATH, "--style", "-s", help="Path to the CSS file to apply"),
    file: Path = typer.Option(
        DEFAULT_CONTENT_PATH, "--file", "-f", help="Path to the Pango markup file to display"
    ),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_print_version, is_eager=True, help="Print the version and exit"
    ),
) -> None:
    """Launch the overlay."""

    if ctx.invoked_subcommand is not None:
        return
    exit_code = launch(LaunchConfig(style_path=style, content_path=file))
    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command()
def doctor() -> None:
    """Print environment diagnostics."""

    settings = load_settings()
    configure_logging(settings)
    info = {
        "version": APP_VERSION,
        "python": platform.python_version(),
        "platform": platform.platform(),
        "wayland_display": os.getenv("WAYLAND_DISPLAY"),
        "toolkit": _toolkit_info(),
        "paths": {
            "home": str(settings.paths.base_dir),
            "logs": str(settings.paths.logs_dir),
        },
    }
    typer.echo(json.dumps(info, indent=2))


@app.command()
def settings(key: str | None = typer.Argument(None)) -> None:
    """Display current settings or a specific section."""

    data = load_settings().model_dump()
    if key:
        data = data.get(key, {})
    typer.echo(json.dumps(data, indent=2, default=str))
