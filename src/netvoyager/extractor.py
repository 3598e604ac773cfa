"""Fetch -> parse -> select -> reduce -> write pipeline for one page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

import httpx
from bs4 import BeautifulSoup

from netvoyager.extraction import reduce_lines
from netvoyager.fetch import fetch_page
from netvoyager.html_parser import parse_html, select_lines
from netvoyager.output_formatter import format_row, write_rows
from netvoyager.schemas import ExtractionMode, ExtractionResult, ExtractorConfig

logger = logging.getLogger(__name__)


class PageExtractor:
    """Extract text from one page into a CSV file.

    Each step can be called on its own; ``run`` chains them. Every step
    raises its own ``NetvoyagerError`` subclass, and the output file is only
    touched once everything before ``write`` has succeeded.

    Args:
        config: Target URL, selector, mode and output settings.
        client: Optional httpx.Client to reuse for the fetch.
    """

    def __init__(self, config: ExtractorConfig, *, client: httpx.Client | None = None) -> None:
        self.config = config
        self.client = client

    def fetch(self, url: str | None = None) -> str:
        return fetch_page(url or self.config.url, client=self.client)

    def parse(self, html: str | bytes) -> BeautifulSoup:
        return parse_html(html)

    def select(self, document: BeautifulSoup, selector: str | None = None) -> list[str]:
        return select_lines(document, selector or self.config.selector)

    def reduce(self, lines: Sequence[str], mode: ExtractionMode | None = None) -> list[str]:
        return reduce_lines(lines, mode or self.config.mode)

    def write(self, rows: Iterable[Sequence[str]], path: Path | None = None) -> int:
        return write_rows(rows, path or self.config.output_path)

    def extract(self) -> ExtractionResult:
        """Run every step except ``write``."""
        config = self.config
        html = self.fetch()
        document = self.parse(html)
        lines = self.select(document)
        reduced = self.reduce(lines)
        logger.debug(
            "Extracted %d line(s) from %s with %r (%s)",
            len(reduced),
            config.url,
            config.selector,
            config.mode.value,
        )
        return ExtractionResult(
            url=config.url,
            selector=config.selector,
            mode=config.mode,
            lines=reduced,
        )

    def run(self) -> ExtractionResult:
        """Extract and write a single CSV row to the configured output."""
        result = self.extract()
        self.write([format_row(result, self.config.cell_format)])
        return result


def extract_page(config: ExtractorConfig, *, client: httpx.Client | None = None) -> ExtractionResult:
    """Convenience wrapper around ``PageExtractor(config).run()``."""
    return PageExtractor(config, client=client).run()
