"""Cache utilities for managing local file caching."""

from __future__ import annotations

import hashlib
import re
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlsplit

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9._-]+")


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Check if a cached file is still fresh based on its modification time.

    Args:
        path: Path to the cached file.
        ttl_seconds: Time-to-live in seconds. If <= 0, cache is considered
            fresh indefinitely (cache forever mode).

    Returns:
        True if the cache is fresh and usable, False otherwise.
    """
    if not path.exists():
        return False
    if ttl_seconds <= 0:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - mtime).total_seconds()
    return age_seconds <= ttl_seconds


def cache_dir_for(url: str, base_path: Path) -> Path:
    """Get the cache directory path for a source URL.

    The directory name combines a readable host/path prefix with a short hash
    of the full URL, so different query strings never share a cache entry.

    Args:
        url: The source document URL.
        base_path: The base cache directory path.

    Returns:
        Path to the cache directory for this URL.
    """
    parts = urlsplit(url)
    readable = _UNSAFE_RE.sub("_", f"{parts.netloc}{parts.path}").strip("_") or "source"
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:12]
    return base_path / f"{readable}__{digest}"
