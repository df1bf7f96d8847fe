"""Tests for the command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from doc2epub.__main__ import main
from doc2epub.builder import convert_document
from doc2epub.exceptions import FetchError, MalformedSectionError


@pytest.fixture(autouse=True)
def _release_captured_warnings():
    yield
    logging.captureWarnings(False)


class TestMain:
    """Tests for main."""

    def test_success(self, tmp_path: Path) -> None:
        output = tmp_path / "book.epub"
        with patch("doc2epub.__main__.build_book", return_value=output) as mock_build:
            code = main(["--output", str(output), "--boundary-tag", "h3", "--no-cache"])

        assert code == 0
        config = mock_build.call_args[0][0]
        assert config.output_path == output
        assert config.boundary_tag == "h3"
        assert config.cover_image_path is None
        assert mock_build.call_args[1] == {"use_cache": False}

    def test_passes_assets(self, tmp_path: Path) -> None:
        with patch("doc2epub.__main__.build_book", return_value=tmp_path / "b.epub") as mock_build:
            main(["--cover", "c.png", "--stylesheet", "s.css", "--font", "f.ttf", "--url", "https://x.test/doc"])

        config = mock_build.call_args[0][0]
        assert config.cover_image_path == Path("c.png")
        assert config.stylesheet_path == Path("s.css")
        assert config.font_path == Path("f.ttf")
        assert config.source_url == "https://x.test/doc"

    @pytest.mark.parametrize(
        ("error", "stage"),
        [(FetchError("offline"), "fetch"), (MalformedSectionError("bad heading"), "sectioning")],
    )
    def test_failure_reports_stage(self, error, stage: str, caplog: pytest.LogCaptureFixture) -> None:
        with patch("doc2epub.__main__.build_book", side_effect=error):
            with caplog.at_level(logging.ERROR, logger="doc2epub"):
                code = main([])

        assert code == 1
        assert f"Build failed during {stage}: {error}" in caplog.text

    def test_each_dangling_link_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        html = '<div class="container"><p><a href="#missing">a</a> <a href="#missing">b</a></p></div>'

        def _convert_only(config, *, use_cache):
            convert_document(html, config.model_copy(update={"page": None, "footer": None}))
            return tmp_path / "book.epub"

        with patch("doc2epub.__main__.build_book", side_effect=_convert_only):
            with caplog.at_level(logging.WARNING):
                code = main([])

        assert code == 0
        records = [r for r in caplog.records if r.name == "py.warnings"]
        assert len(records) == 2
        assert all("#missing" in r.getMessage() for r in records)
