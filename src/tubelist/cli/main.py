"""
Main CLI entry point for tubelist.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from tubelist import __version__
from tubelist.cli.constants import EXIT_USER_ERROR
from tubelist.cli.errors import ErrorCategory, display_error_panel
from tubelist.cli.playlist_commands import playlist_app
from tubelist.container import container

console = Console()

app = typer.Typer(
    name="tubelist",
    help="YouTube playlist lookup and search",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(playlist_app, name="playlist", help="Playlist commands")


def configure_logging(level: str) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]tubelist[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: LOG_LEVEL setting)"
    ),
) -> None:
    """
    tubelist - YouTube playlist lookup and search.

    Fetch playlists by ID, search playlists by text and list the entries
    of a playlist through the YouTube Data API.
    """
    if version:
        console.print(f"tubelist v{__version__}")
        raise typer.Exit(code=0)

    try:
        settings = container.settings
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]).upper() for err in e.errors() if err["loc"])
        display_error_panel(
            ErrorCategory.VALIDATION,
            f"Invalid configuration: {fields or 'settings'}",
            hint="Check the environment variables and .env file",
        )
        raise typer.Exit(code=EXIT_USER_ERROR)

    configure_logging(log_level or settings.log_level)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'tubelist --help' for available commands[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
