"""HTTP utilities for fetching content with retry logic."""

from __future__ import annotations

import logging
import time
from typing import Final

import httpx

from doc2epub.config import (
    DOC2EPUB_FETCH_BACKOFF_S,
    DOC2EPUB_FETCH_MAX_RETRIES,
    DOC2EPUB_FETCH_TIMEOUT_S,
    DOC2EPUB_USER_AGENT,
)
from doc2epub.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def fetch_with_retries(
    url: str,
    *,
    client: httpx.Client | None = None,
) -> str:
    """Fetch content from a URL with retry logic for transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.Client to reuse. If not provided, a new client
            is created for this request and closed afterwards.

    Returns:
        The decoded response body.

    Raises:
        FetchError: If the fetch fails after all retries or returns 404.
    """
    timeout = httpx.Timeout(DOC2EPUB_FETCH_TIMEOUT_S)
    headers = {"User-Agent": DOC2EPUB_USER_AGENT}

    def do_fetch(http_client: httpx.Client) -> str:
        last_exc: Exception | None = None

        for attempt in range(DOC2EPUB_FETCH_MAX_RETRIES + 1):
            try:
                response = http_client.get(url)

                if response.status_code == 404:
                    raise FetchError(f"Resource not found at {url}")

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < DOC2EPUB_FETCH_MAX_RETRIES:
                backoff = DOC2EPUB_FETCH_BACKOFF_S * (2**attempt)
                logger.debug("Retrying %s in %.2fs after: %s", url, backoff, last_exc)
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
