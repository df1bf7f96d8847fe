"""Test setup for doc2epub."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


EFFECTIVE_GO_HTML = """<!DOCTYPE html>
<html>
<head><title>Effective Go</title></head>
<body>
<div id="topbar">Go</div>
<div id="page">
<div class="container">
<h1>Effective Go</h1>
<div id="nav"></div>
<h2 id="introduction">Introduction</h2>
<p>See <a href="#formatting">formatting</a> and <a href="https://go.dev/ref/spec">the spec</a>.</p>
<h2 id="formatting">Formatting</h2>
<p id="gofmt">Use gofmt. Back to <a href="#introduction">the intro</a>. <a href="#nowhere">Broken</a></p>
<h2 id="control-structures">Control structures</h2>
<h3 id="if">If</h3>
<p>Braces are mandatory, see <a href="#gofmt">gofmt</a>.</p>
<div id="footer">Build version go1.<br>Except as noted, the content of this page is licensed.<br><a href="/doc/tos.html">Terms of Service</a></div>
</div>
</div>
</body>
</html>
"""

SOURCE_URL = "https://go.dev/doc/effective_go"


@pytest.fixture
def effective_go_html() -> str:
    """A trimmed-down page shaped like Effective Go."""
    return EFFECTIVE_GO_HTML


@pytest.fixture
def source_url() -> str:
    return SOURCE_URL
