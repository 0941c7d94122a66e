"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class Quote:
    """One quote scraped from a ``.quote`` container.

    ``tags`` holds the ``href`` of each tag link (e.g. ``/tag/life/page/1/``),
    not the link's visible text.
    """

    text: str = ""
    author: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape served by ``/quotes``."""
        return {"quote": self.text, "author": self.author, "tags": list(self.tags)}
