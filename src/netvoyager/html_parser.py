"""Parse HTML pages and run CSS selections against them."""

from __future__ import annotations

import logging

from netvoyager.exceptions import InvalidSelectorError, ParseError
from netvoyager.html_utils import joined_text, split_lines

try:
    from bs4 import BeautifulSoup, ParserRejectedMarkup
    from soupsieve import SelectorSyntaxError
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def parse_html(html: str | bytes) -> BeautifulSoup:
    """Parse ``html`` leniently into a traversable document.

    Raises:
        ParseError: If the body is empty or yields no elements.
    """
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"Expected HTML text, got {type(html).__name__}")
    if not html.strip():
        raise ParseError("Document is empty")

    try:
        soup = BeautifulSoup(html, "lxml")
    except (ParserRejectedMarkup, ValueError) as exc:
        raise ParseError(f"Could not parse document: {exc}") from exc

    if soup.find() is None:
        raise ParseError("Document contains no elements")
    return soup


def select_lines(document: BeautifulSoup, selector: str) -> list[str]:
    """Return the newline-split text of every node matching ``selector``.

    The text of all matches is joined before splitting, so a line can span
    node boundaries. Zero matches yield an empty list.

    Raises:
        InvalidSelectorError: If ``selector`` is not valid CSS.
    """
    try:
        nodes = document.select(selector)
    except SelectorSyntaxError as exc:
        raise InvalidSelectorError(f"Invalid CSS selector {selector!r}: {exc}") from exc

    logger.debug("Selector %r matched %d nodes", selector, len(nodes))
    return split_lines(joined_text(nodes))
