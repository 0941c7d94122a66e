"""Quotes endpoint — scrape the target page and return its quotes as JSON.

Routes
------
ANY /quotes    → JSON array of {"quote", "author", "tags"}, at most ``settings.max_quotes``

Every request re-scrapes the page.  A scrape failure is fatal to the whole
process: it is logged and the process exits without writing a response.
"""

from __future__ import annotations

import logging
import os
from typing import Any, List, NoReturn

from fastapi import APIRouter
from pydantic import BaseModel

from backend.config import settings
from backend.scraper import ScrapeError, scrape_quotes

logger = logging.getLogger(__name__)

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class QuoteResponse(BaseModel):
    quote: str
    author: str
    tags: List[str]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _terminate(exc: ScrapeError) -> NoReturn:
    """Log *exc* and kill the process immediately with exit status 1."""
    logger.critical("%s", exc)
    logging.shutdown()
    os._exit(1)


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.api_route("", methods=ALL_METHODS, response_model=List[QuoteResponse])
def list_quotes() -> list[dict[str, Any]]:
    """Scrape the target page and return up to ``settings.max_quotes`` quotes."""
    try:
        quotes = scrape_quotes()
    except ScrapeError as exc:
        _terminate(exc)

    return [q.to_dict() for q in quotes[: settings.max_quotes]]
