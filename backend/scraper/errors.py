"""Scraper exceptions."""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for scraper failures."""


class ScrapeError(ScraperError):
    """The target page could not be fetched (network error, timeout, 4xx/5xx)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to scrape {url}: {reason}")
        self.url = url
        self.reason = reason
