"""Test setup for netvoyager."""

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


@pytest.fixture
def paragraphs_html() -> str:
    """Page whose joined <p> text spans several lines, one of them empty."""
    return (
        "<html><body>"
        "<h2>Properties</h2>"
        "<p>Hello\n</p><p></p><p>\nWorld</p>"
        "<h2>History</h2>"
        "</body></html>"
    )
