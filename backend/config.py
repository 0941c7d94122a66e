"""Centralised settings for the quote scraper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  With no overrides the
service scrapes ``https://quotes.toscrape.com`` and listens on port 8080.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_TARGET_URL = "https://quotes.toscrape.com"


def _optional_float(name: str) -> Optional[float]:
    """Read *name* from the environment as a float, or ``None`` when unset/empty."""
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Scraper
    # ------------------------------------------------------------------
    target_url: str = field(
        default_factory=lambda: os.environ.get("QUOTES_TARGET_URL", DEFAULT_TARGET_URL)
    )
    # ``None`` means the outbound fetch waits indefinitely.
    request_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("QUOTES_REQUEST_TIMEOUT")
    )

    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("QUOTES_HOST", "0.0.0.0")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("QUOTES_PORT", "8080"))
    )
    max_quotes: int = field(
        default_factory=lambda: int(os.environ.get("QUOTES_MAX", "100"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("QUOTES_LOG_LEVEL", "INFO").upper()
    )

    def __post_init__(self) -> None:
        if self.max_quotes < 0:
            raise ValueError(f"QUOTES_MAX must be >= 0, got {self.max_quotes}")


# Module-level singleton — import this everywhere:
#   from backend.config import settings
settings = Settings()
