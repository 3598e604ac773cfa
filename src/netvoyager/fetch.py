"""Fetch a single HTML page."""

from __future__ import annotations

import logging

import httpx

from netvoyager.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)


def fetch_page(url: str, *, client: httpx.Client | None = None) -> str:
    """Fetch the HTML body of ``url`` as text.

    Args:
        url: Page to fetch.
        client: Optional httpx.Client to reuse.

    Returns:
        The decoded response body.

    Raises:
        FetchError: On network failure, timeout, or a non-2xx status.
    """
    logger.info("Fetching %s", url)
    html = fetch_with_retries(url, client=client)
    logger.debug("Fetched %d characters from %s", len(html), url)
    return html
