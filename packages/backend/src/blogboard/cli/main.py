"""Blogboard CLI — create the schema, run the server, peek at boards.

Usage:
    blogboard init-db                         # Create tables from the ORM models
    blogboard init-db --database-url sqlite+aiosqlite:///./blog.db
    blogboard serve --port 8080 --reload      # Run the API with uvicorn
    blogboard boards                          # List boards from a running server
"""

from __future__ import annotations

import asyncio
import os
import sys
from typing import Optional

import click
import httpx

from blogboard import __version__
from blogboard.config import settings

DEFAULT_API_URL = "http://localhost:8080"


def _api_url() -> str:
    return os.environ.get("BLOGBOARD_API_URL", DEFAULT_API_URL).rstrip("/")


async def _create_tables(database_url: str, drop: bool) -> None:
    from blogboard.db.engine import build_engine
    from blogboard.db.models import Base

    engine = build_engine(database_url)
    try:
        async with engine.begin() as conn:
            if drop:
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


def _print_table(rows: list[dict], columns: list[tuple[str, str, int]]):
    """Print a simple ASCII table.

    columns: list of (header, dict_key, width)
    """
    header = "  ".join(h.ljust(w) for h, _, w in columns)
    click.secho(header, bold=True)
    click.echo("-" * len(header))
    for row in rows:
        line = "  ".join(str(row.get(k, "—"))[:w].ljust(w) for _, k, w in columns)
        click.echo(line)


@click.group()
@click.version_option(version=__version__, prog_name="blogboard")
def main():
    """Blogboard — blog board backend."""


@main.command("init-db")
@click.option("--database-url", default=None, help="Overrides BLOGBOARD_DATABASE_URL")
@click.option("--drop", is_flag=True, help="Drop existing tables first")
def init_db(database_url: Optional[str], drop: bool):
    """Create the users, boards and replies tables."""
    url = database_url or settings.database_url
    if drop:
        click.confirm("Drop all tables first?", abort=True)
    asyncio.run(_create_tables(url, drop))
    click.secho("Tables created.", fg="green")


@main.command()
@click.option("--host", default=None, help="Bind host (default from settings)")
@click.option("--port", default=None, type=int, help="Bind port (default from settings)")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "blogboard.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@main.command()
def boards():
    """List boards (newest first) from a running server."""
    try:
        resp = httpx.get(f"{_api_url()}/api/v1/boards", timeout=10.0)
    except httpx.ConnectError:
        click.secho(f"Error: backend not reachable at {_api_url()}", fg="red", err=True)
        sys.exit(1)
    resp.raise_for_status()

    rows = [
        {"id": b["id"], "title": b["title"], "author": b["user"]["username"]}
        for b in resp.json()
    ]
    if not rows:
        click.echo("No boards yet.")
        return
    _print_table(rows, [("ID", "id", 6), ("TITLE", "title", 40), ("AUTHOR", "author", 20)])


if __name__ == "__main__":
    main()
