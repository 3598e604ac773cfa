"""HTTP utilities for fetching pages with optional retry logic."""

from __future__ import annotations

import logging
import time
from typing import Final

import httpx

from netvoyager.config import (
    NETVOYAGER_FETCH_BACKOFF_S,
    NETVOYAGER_FETCH_MAX_RETRIES,
    NETVOYAGER_FETCH_TIMEOUT_S,
    NETVOYAGER_USER_AGENT,
)
from netvoyager.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def fetch_with_retries(url: str, *, client: httpx.Client | None = None) -> str:
    """Fetch the text of a URL, retrying transient failures if configured.

    With the default ``NETVOYAGER_FETCH_MAX_RETRIES`` of 0 exactly one
    request is made.

    Args:
        url: The URL to fetch.
        client: Optional httpx.Client to reuse. If not provided, a new client
            is created for this request and closed afterwards. Timeout,
            User-Agent and redirect following are applied per request either
            way; the redirect limit is the supplied client's own.

    Returns:
        The decoded response body.

    Raises:
        FetchError: If the response is 404, any other non-2xx status, or the
            request keeps failing.
    """
    timeout = httpx.Timeout(NETVOYAGER_FETCH_TIMEOUT_S)
    headers = {"User-Agent": NETVOYAGER_USER_AGENT}
    last_exc: Exception | None = None

    def do_fetch(http_client: httpx.Client) -> str:
        nonlocal last_exc

        for attempt in range(NETVOYAGER_FETCH_MAX_RETRIES + 1):
            try:
                response = http_client.get(
                    url, headers=headers, timeout=timeout, follow_redirects=True
                )

                if response.status_code == 404:
                    raise FetchError(f"Page not found at {url}")

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except httpx.HTTPStatusError as exc:
                raise FetchError(
                    f"HTTP {exc.response.status_code} from {url}"
                ) from exc
            except httpx.RequestError as exc:
                last_exc = exc

            if attempt < NETVOYAGER_FETCH_MAX_RETRIES:
                backoff = NETVOYAGER_FETCH_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Attempt %d for %s failed (%s), retrying in %.2fs",
                    attempt + 1,
                    url,
                    last_exc,
                    backoff,
                )
                time.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return do_fetch(client)

    with httpx.Client(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return do_fetch(new_client)
