"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src is on path when running tests without installed package
src = Path(__file__).resolve().parent.parent / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def departures_html() -> str:
    """Captured CHC departures page."""
    return (FIXTURES / "chc_departures.html").read_text(encoding="utf-8")


@pytest.fixture
def arrivals_html() -> str:
    """Captured CHC arrivals page."""
    return (FIXTURES / "chc_arrivals.html").read_text(encoding="utf-8")
