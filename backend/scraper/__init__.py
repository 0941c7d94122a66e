"""Scraper package — quotes page fetch & extraction."""

from backend.scraper.errors import ScrapeError, ScraperError
from backend.scraper.extractor import extract_quotes
from backend.scraper.fetcher import fetch_url
from backend.scraper.models import Quote, RawPage
from backend.scraper.quotes import scrape_quotes

__all__ = [
    "fetch_url",
    "extract_quotes",
    "scrape_quotes",
    "Quote",
    "RawPage",
    "ScrapeError",
    "ScraperError",
]
