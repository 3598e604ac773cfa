"""Shared text helpers for selected HTML nodes."""

from __future__ import annotations

from typing import Iterable

try:
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def joined_text(nodes: Iterable[Tag]) -> str:
    """Concatenate the text content of ``nodes`` with no separator."""
    return "".join(node.get_text() for node in nodes)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines, dropping trailing empty fragments.

    Empty fragments in the middle are kept so line positions stay intact;
    an empty string yields an empty list.
    """
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines
