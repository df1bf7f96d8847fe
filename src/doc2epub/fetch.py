"""Fetch and cache the source HTML document."""

from __future__ import annotations

import logging
from pathlib import Path

from doc2epub.cache_utils import cache_dir_for, is_cache_fresh
from doc2epub.config import DOC2EPUB_CACHE_PATH, DOC2EPUB_CACHE_TTL_SECONDS
from doc2epub.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)


def fetch_source_html(
    url: str,
    *,
    use_cache: bool = True,
    cache_path: Path = DOC2EPUB_CACHE_PATH,
    ttl_seconds: int = DOC2EPUB_CACHE_TTL_SECONDS,
) -> str:
    """Fetch the source HTML and cache it locally.

    Args:
        url: URL of the document.
        use_cache: Whether to use cached HTML if available.
        cache_path: Base cache directory.
        ttl_seconds: Cache lifetime; <= 0 keeps entries forever.

    Returns:
        The HTML content as a string.

    Raises:
        FetchError: If the document cannot be fetched.
    """
    cache_dir = cache_dir_for(url, cache_path)
    html_path = cache_dir / "source.html"

    if use_cache and is_cache_fresh(html_path, ttl_seconds):
        logger.debug("Using cached source %s", html_path)
        return html_path.read_text(encoding="utf-8")

    html_text = fetch_with_retries(url)

    cache_dir.mkdir(parents=True, exist_ok=True)
    html_path.write_text(html_text, encoding="utf-8")
    return html_text
