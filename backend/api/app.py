"""FastAPI application factory.

Routers
-------
    /quotes    — scrape the target page and return its quotes as JSON
"""

from __future__ import annotations

from fastapi import FastAPI

from backend.api.routers import quotes as quotes_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Quote Scraper API",
        description=(
            "Scrapes quotes.toscrape.com on every request and returns the "
            "quotes (text, author, tag links) as a JSON array."
        ),
        version="0.1.0",
    )

    app.include_router(quotes_router.router, prefix="/quotes", tags=["quotes"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app
app = create_app()
