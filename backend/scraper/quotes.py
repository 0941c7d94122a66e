"""Fetch-and-extract pipeline for the quotes page."""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from backend.config import settings
from backend.scraper.errors import ScrapeError
from backend.scraper.extractor import extract_quotes
from backend.scraper.fetcher import fetch_url
from backend.scraper.models import Quote

logger = logging.getLogger(__name__)


def scrape_quotes(url: Optional[str] = None) -> List[Quote]:
    """Fetch *url* (default: ``settings.target_url``) and return its quotes.

    Raises:
        ScrapeError: If the page cannot be fetched.  No partial result is
            ever returned.
    """
    target = url or settings.target_url
    try:
        raw = fetch_url(target)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ScrapeError(target, str(exc) or type(exc).__name__) from exc

    quotes = extract_quotes(raw)
    logger.debug("Extracted %d quotes from %s", len(quotes), target)
    return quotes
