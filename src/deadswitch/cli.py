"""CLI for deadswitch - dead-man's-switch file deletion service."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import Configuration, get_config_path, load_config
from .constants import DEFAULT_HOST, DEFAULT_PORT
from .errors import ConfigError
from .logging import set_debug

console = Console(stderr=True)

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Config file (default: $DEADSWITCH_CONFIG or ./config.ini)",
)


def _load_or_exit(config_path: str | None) -> Configuration:
    """Load configuration, exiting with a readable error on failure."""
    try:
        return load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def _describe_root(path: Path) -> tuple[str, bool]:
    """Return (kind, ok) for a deletion root."""
    if not os.path.lexists(path):
        return "missing", False
    if path.is_dir():
        return "directory", True
    return "file", True


@click.group()
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="deadswitch")
def cli(debug: bool) -> None:
    """deadswitch - delete code trees unless the countdown is left alone.

    Arm the countdown over HTTP; when it expires every file under the
    configured directories is removed.
    """
    if debug:
        set_debug(True)


@cli.command()
@config_option
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Bind address")
@click.option("--port", "-p", default=DEFAULT_PORT, show_default=True, type=int, help="Port")
def serve(config_path: str | None, host: str, port: int) -> None:
    """Run the HTTP control surface."""
    config = _load_or_exit(config_path)

    # Lazy import: Flask is only needed when serving
    from .countdown import CountdownController
    from .server import create_app

    roots = ", ".join(escape(str(root)) for root in config.roots)
    console.print(
        Panel.fit(
            f"[bold]deadswitch[/bold] listening on http://{host}:{port}\n"
            f"Time limit: [cyan]{config.time_limit_seconds}s[/cyan]\n"
            f"Roots: {roots}",
            border_style="red",
        )
    )

    controller = CountdownController()
    app = create_app(controller, config)
    try:
        app.run(host=host, port=port, debug=False, threaded=True)
    finally:
        controller.shutdown()


@cli.command()
@config_option
def check(config_path: str | None) -> None:
    """Validate the configuration and show what would be deleted."""
    config = _load_or_exit(config_path)

    table = Table(title=f"Configuration ({escape(str(get_config_path(config_path)))})")
    table.add_column("Setting")
    table.add_column("Value", style="cyan")
    table.add_column("Status", no_wrap=True)

    for name, root in (
        ("local_code_path", config.local_code_path),
        ("git_repo_path", config.git_repo_path),
    ):
        kind, ok = _describe_root(root)
        status = f"[green]{kind}[/green]" if ok else f"[red]{kind}[/red]"
        table.add_row(name, escape(str(root)), status)
    table.add_row("time_limit_seconds", str(config.time_limit_seconds), "[green]OK[/green]")

    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    cli()
