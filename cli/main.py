"""Quote scraper CLI — entry-point for serving and one-off scrapes.

Usage:
    python cli/main.py --help

Commands:
    serve     → run the HTTP server (GET /quotes)
    scrape    → scrape once and print the JSON array to stdout
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import Optional

import typer

from backend.config import settings
from backend.logging_setup import setup_logging

logger = logging.getLogger("cli")

app = typer.Typer(
    name="quotes",
    help="Quote scraper CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, help="Root log level."),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(log_level.upper())


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Interface to listen on."),
    port: int = typer.Option(settings.port, help="TCP port to listen on."),
) -> None:
    """Start the HTTP server and block until it stops."""
    import uvicorn

    from backend.api.app import create_app

    logger.info("Server is running on http://localhost:%d", port)
    # uvicorn logs bind failures and exits with status 1.
    uvicorn.run(create_app(), host=host, port=port)


# ---------------------------------------------------------------------------
# One-off scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: Optional[str] = typer.Option(None, help="Page to scrape (default: configured target)."),
    limit: int = typer.Option(settings.max_quotes, help="Maximum number of quotes to print."),
) -> None:
    """Scrape the page once and print its quotes as a JSON array."""
    from backend.scraper import ScrapeError, scrape_quotes

    try:
        quotes = scrape_quotes(url)
    except ScrapeError as exc:
        typer.echo(f"[scrape] {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(json.dumps([q.to_dict() for q in quotes[:limit]], ensure_ascii=False))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
