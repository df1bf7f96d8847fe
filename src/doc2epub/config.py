"""Local configuration for doc2epub."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_SOURCE_URL = "https://golang.org/doc/effective_go.html"
DEFAULT_BOOK_TITLE = "Effective Go"
DEFAULT_BOUNDARY_TAG = "h2"
DEFAULT_OUTPUT_PATH = "Effective Go.epub"
DEFAULT_TITLE_FILENAME = "title.xhtml"
DEFAULT_CACHE_DIR = ".doc2epub_cache"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "doc2epub/0.1"

DOC2EPUB_SOURCE_URL = os.getenv("DOC2EPUB_SOURCE_URL", DEFAULT_SOURCE_URL)
DOC2EPUB_BOOK_TITLE = os.getenv("DOC2EPUB_BOOK_TITLE", DEFAULT_BOOK_TITLE)
DOC2EPUB_BOUNDARY_TAG = os.getenv("DOC2EPUB_BOUNDARY_TAG", DEFAULT_BOUNDARY_TAG)
DOC2EPUB_OUTPUT_PATH = Path(os.getenv("DOC2EPUB_OUTPUT_PATH", DEFAULT_OUTPUT_PATH))

# Local-only cache directory for fetched source documents.
DOC2EPUB_CACHE_PATH = Path(os.getenv("DOC2EPUB_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
DOC2EPUB_CACHE_TTL_SECONDS = int(os.getenv("DOC2EPUB_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
DOC2EPUB_FETCH_TIMEOUT_S = float(os.getenv("DOC2EPUB_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
DOC2EPUB_FETCH_MAX_RETRIES = int(os.getenv("DOC2EPUB_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
DOC2EPUB_FETCH_BACKOFF_S = float(os.getenv("DOC2EPUB_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
DOC2EPUB_USER_AGENT = os.getenv("DOC2EPUB_USER_AGENT", DEFAULT_USER_AGENT)
