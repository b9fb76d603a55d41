"""
Playlist CLI commands for tubelist.

- `get`: Show one playlist by ID
- `search`: Search playlists by text
- `items`: List the entries of a playlist

Every command supports table and JSON output and maps tubelist errors
onto the standard exit codes.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Dict, List, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from tubelist.cli.constants import (
    DESCRIPTION_PREVIEW_LENGTH,
    EXIT_CANCELLED,
    EXIT_USER_ERROR,
)
from tubelist.cli.errors import (
    ErrorCategory,
    categorize_error,
    display_error_panel,
    get_exit_code_for_category,
)
from tubelist.container import container
from tubelist.exceptions import TubelistError
from tubelist.models.playlist import PageInfo, Playlist
from tubelist.services.playlist_client import PlaylistClient

console = Console()
logger = logging.getLogger(__name__)

T = TypeVar("T")

playlist_app = typer.Typer(
    name="playlist",
    help="Look up, search and list YouTube playlists",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for playlist commands."""

    TABLE = "table"
    JSON = "json"


def _run(action: Callable[[PlaylistClient], Awaitable[T]]) -> T:
    """
    Run ``action`` against the container's playlist client.

    Converts tubelist errors into an error panel and a typer exit code,
    and always closes the HTTP gateway afterwards.
    """
    if not container.settings.has_api_key:
        display_error_panel(
            ErrorCategory.VALIDATION,
            "No YouTube API key configured",
            hint="Set YOUTUBE_API_KEY in the environment or in .env",
        )
        raise typer.Exit(code=EXIT_USER_ERROR)

    async def _invoke() -> T:
        try:
            return await action(container.playlist_client)
        finally:
            await container.aclose()

    try:
        return asyncio.run(_invoke())
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(code=EXIT_CANCELLED)
    except ValueError as e:
        display_error_panel(ErrorCategory.VALIDATION, str(e))
        raise typer.Exit(code=EXIT_USER_ERROR)
    except TubelistError as e:
        category = categorize_error(e)
        logger.debug("Command failed: %r", e)
        display_error_panel(category, e.message)
        raise typer.Exit(code=get_exit_code_for_category(category))


def _build_options(
    part: Optional[str] = None,
    max_results: Optional[int] = None,
    page_token: Optional[str] = None,
) -> Dict[str, Any]:
    """Collect the query options given on the command line."""
    options: Dict[str, Any] = {}
    if part is not None:
        options["part"] = part
    if max_results is not None:
        options["maxResults"] = max_results
    if page_token is not None:
        options["pageToken"] = page_token
    return options


def _preview(text: Optional[str]) -> str:
    if not text:
        return ""
    first_line = text.splitlines()[0]
    if len(first_line) > DESCRIPTION_PREVIEW_LENGTH:
        return first_line[: DESCRIPTION_PREVIEW_LENGTH - 3] + "..."
    return first_line


def _output_json(
    playlists: List[Playlist], page_info: Optional[PageInfo] = None
) -> None:
    """Print playlists (and page info, for list commands) as JSON."""
    output: Dict[str, Any] = {
        "playlists": [p.model_dump() for p in playlists],
    }
    if page_info is not None:
        output["page_info"] = page_info
    console.print(
        json.dumps(output, indent=2, default=str),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _output_table(
    playlists: List[Playlist],
    page_info: Optional[PageInfo],
    title: str,
    show_item_id: bool = False,
) -> None:
    """Print playlists as a Rich table, followed by pagination hints."""
    table = Table(title=title, show_header=True, header_style="bold blue")
    if show_item_id:
        table.add_column("Video", style="cyan", no_wrap=True)
    else:
        table.add_column("Playlist ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Channel", style="green")
    table.add_column("Published", style="yellow")
    table.add_column("Description", style="dim")

    for playlist in playlists:
        table.add_row(
            (playlist.video_id or playlist.id or "") if show_item_id else (playlist.playlist_id or ""),
            playlist.title or "",
            playlist.channel_title or "",
            (playlist.published_at or "")[:10],
            _preview(playlist.description),
        )

    console.print(table)

    if page_info is None:
        return
    total = page_info.get("totalResults")
    if total is not None:
        console.print(f"[dim]Showing {len(playlists)} of {total} result(s)[/dim]")
    if page_info.get("nextPageToken"):
        console.print(f"[dim]Next page: --page-token {page_info['nextPageToken']}[/dim]")
    if page_info.get("prevPageToken"):
        console.print(f"[dim]Previous page: --page-token {page_info['prevPageToken']}[/dim]")


@playlist_app.command("get")
def get_playlist(
    playlist_id: str = typer.Argument(..., help="YouTube playlist ID"),
    part: Optional[str] = typer.Option(
        None, "--part", help="Resource parts to request (default: snippet)"
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format"
    ),
) -> None:
    """Show a single playlist."""
    options = _build_options(part=part)
    playlist = _run(lambda client: client.get(playlist_id, options))

    if format == OutputFormat.JSON:
        _output_json([playlist])
    else:
        _output_table([playlist], None, title="Playlist")


@playlist_app.command("search")
def search_playlists(
    query: str = typer.Argument(..., help="Search text"),
    max_results: Optional[int] = typer.Option(
        None, "--max-results", "-n", min=0, max=50, help="Results per page"
    ),
    page_token: Optional[str] = typer.Option(
        None, "--page-token", help="Page token from a previous search"
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format"
    ),
) -> None:
    """Search playlists by text."""
    options = _build_options(max_results=max_results, page_token=page_token)
    playlists, page_info = _run(lambda client: client.search(query, options))

    if format == OutputFormat.JSON:
        _output_json(playlists, page_info)
    else:
        _output_table(playlists, page_info, title=f"Playlists matching '{query}'")


@playlist_app.command("items")
def list_items(
    playlist_id: str = typer.Argument(..., help="YouTube playlist ID"),
    max_results: Optional[int] = typer.Option(
        None, "--max-results", "-n", min=0, max=50, help="Items per page"
    ),
    page_token: Optional[str] = typer.Option(
        None, "--page-token", help="Page token from a previous listing"
    ),
    all_pages: bool = typer.Option(
        False, "--all", help="Follow page tokens and list every item"
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format"
    ),
) -> None:
    """List the entries of a playlist."""
    options = _build_options(max_results=max_results, page_token=page_token)

    page_info: Optional[PageInfo]
    if all_pages:

        async def collect(client: PlaylistClient) -> List[Playlist]:
            return [item async for item in client.iter_items(playlist_id, options)]

        items = _run(collect)
        page_info = None
    else:
        items, page_info = _run(lambda client: client.get_items(playlist_id, options))

    if format == OutputFormat.JSON:
        _output_json(items, page_info)
    else:
        _output_table(
            items, page_info, title=f"Items of {playlist_id}", show_item_id=True
        )
