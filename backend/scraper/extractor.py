"""Quote extraction: turns a :class:`RawPage` into a list of :class:`Quote`."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from backend.scraper.models import Quote, RawPage

QUOTE_SELECTOR = ".quote"
TEXT_SELECTOR = ".text"
AUTHOR_SELECTOR = ".author"
TAG_LINK_SELECTOR = ".tags a.tag"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _child_text(container: Tag, selector: str) -> str:
    """Return the trimmed text of every descendant matching *selector*.

    Matches are concatenated in document order; no match gives ``""``.
    """
    return "".join(el.get_text() for el in container.select(selector)).strip()


def _child_attrs(container: Tag, selector: str, attr: str) -> List[str]:
    """Return *attr* of each descendant matching *selector*, in document order.

    Values are whitespace-trimmed; elements that do not carry the attribute
    are skipped.
    """
    values: List[str] = []
    for el in container.select(selector):
        value = el.get(attr)
        if value is None:
            continue
        values.append(value.strip())
    return values


def _parse_quote(container: Tag) -> Quote:
    return Quote(
        text=_child_text(container, TEXT_SELECTOR),
        author=_child_text(container, AUTHOR_SELECTOR),
        tags=tuple(_child_attrs(container, TAG_LINK_SELECTOR, "href")),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_quotes(raw: RawPage) -> List[Quote]:
    """Extract one :class:`Quote` per ``.quote`` container in *raw*.

    Quotes are returned in document order.  A page without containers (or an
    empty body) yields an empty list.
    """
    soup = BeautifulSoup(raw.html, "html.parser")
    return [_parse_quote(container) for container in soup.select(QUOTE_SELECTOR)]
