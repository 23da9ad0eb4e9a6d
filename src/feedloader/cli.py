"""CLI entry point."""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.table import Table

from feedloader.core.config import get_settings
from feedloader.core.exceptions import ConfigurationError
from feedloader.models.result import LoadFailure, LoadResult

app = typer.Typer(
    name="feedloader",
    help="Load remote image feeds",
    no_args_is_help=True,
)
console = Console()


async def _load(url: str, timeout: float, user_agent: str) -> LoadResult:
    from feedloader.api.remote import RemoteFeedLoader, load_async
    from feedloader.http.client import HttpxHTTPClient

    async with HttpxHTTPClient(timeout=timeout, user_agent=user_agent) as client:
        return await load_async(RemoteFeedLoader(url, client))


def _resolve_url(url: str | None, default: str | None) -> str:
    resolved = url or default
    if not resolved:
        raise ConfigurationError("No feed URL given and FEEDLOADER_FEED_URL is not set")
    return resolved


@app.command()
def load(
    url: str | None = typer.Argument(None, help="Feed URL (default: FEEDLOADER_FEED_URL)"),
) -> None:
    """Load a feed and list its items."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        url = _resolve_url(url, settings.feed_url)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2) from e

    result = asyncio.run(_load(url, settings.request_timeout, settings.user_agent))

    if isinstance(result, LoadFailure):
        console.print(f"[red]Failed to load {url}:[/red] {result.error.value}")
        raise typer.Exit(code=1)

    table = Table(title=f"{len(result.items)} items")
    table.add_column("ID")
    table.add_column("Description")
    table.add_column("Location")
    table.add_column("Image")
    for item in result.items:
        table.add_row(
            str(item.id),
            item.description or "",
            item.location or "",
            str(item.image_url),
        )
    console.print(table)


@app.command()
def version() -> None:
    """Show version."""
    from feedloader import __version__

    console.print(f"feedloader {__version__}")


if __name__ == "__main__":
    app()
