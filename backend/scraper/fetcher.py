"""HTTP fetcher for the target page."""

from __future__ import annotations

import logging

import httpx

from backend.config import settings
from backend.scraper.models import RawPage

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (compatible; QuoteScraper/1.0; +https://quotes.toscrape.com)"
    )
}


def fetch_url(url: str) -> RawPage:
    """Fetch *url* with a single GET and return a :class:`RawPage`.

    Redirects are followed.  The timeout comes from
    ``settings.request_timeout``; ``None`` waits for the upstream indefinitely.
    No retry is attempted.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.RequestError: On connection errors, timeouts and bad schemes.
        httpx.InvalidURL: If *url* cannot be parsed.
    """
    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        html = response.text
        status_code = response.status_code

    logger.info("Fetched %s (HTTP %d, %d bytes)", url, status_code, len(html))
    return RawPage(url=url, html=html, status_code=status_code)
