"""Tests for cache utilities module."""

from __future__ import annotations

import os
import time
from pathlib import Path

from doc2epub.cache_utils import cache_dir_for, is_cache_fresh


class TestIsCacheFresh:
    """Tests for is_cache_fresh function."""

    def test_returns_false_when_path_missing(self, tmp_path: Path) -> None:
        """Returns False when file does not exist."""
        path = tmp_path / "nonexistent"
        assert not is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_true_when_file_is_new(self, tmp_path: Path) -> None:
        """Returns True when file is within TTL."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        assert is_cache_fresh(path, ttl_seconds=86400)

    def test_returns_false_when_file_is_old(self, tmp_path: Path) -> None:
        """Returns False when file is older than TTL."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert not is_cache_fresh(path, ttl_seconds=1)

    def test_returns_true_when_ttl_is_zero(self, tmp_path: Path) -> None:
        """Returns True when TTL is 0 (cache forever)."""
        path = tmp_path / "cache_file"
        path.write_text("test content")

        old_time = time.time() - 100000
        os.utime(path, (old_time, old_time))

        assert is_cache_fresh(path, ttl_seconds=0)


class TestCacheDirFor:
    """Tests for cache_dir_for function."""

    def test_is_under_base_path(self, tmp_path: Path) -> None:
        result = cache_dir_for("https://go.dev/doc/effective_go", tmp_path)
        assert result.parent == tmp_path
        assert result.name.startswith("go.dev_doc_effective_go__")

    def test_is_stable(self, tmp_path: Path) -> None:
        url = "https://go.dev/doc/effective_go"
        assert cache_dir_for(url, tmp_path) == cache_dir_for(url, tmp_path)

    def test_query_strings_do_not_collide(self, tmp_path: Path) -> None:
        """URLs differing only in query get separate directories."""
        first = cache_dir_for("https://example.com/doc?v=1", tmp_path)
        second = cache_dir_for("https://example.com/doc?v=2", tmp_path)
        assert first != second

    def test_no_path_separators_in_name(self, tmp_path: Path) -> None:
        result = cache_dir_for("https://example.com/a/b/../c", tmp_path)
        assert "/" not in result.name
