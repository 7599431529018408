"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest

from hookxml.diagnostics import clear_last_error


FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def load_fixture():
    """Return a loader for payload files under tests/fixtures."""
    def _load(filename: str) -> str:
        return (FIXTURES_DIR / filename).read_text(encoding="utf-8")
    return _load


@pytest.fixture(autouse=True)
def reset_last_error():
    """Keep the process-global diagnostic slot from leaking between tests."""
    clear_last_error()
    yield
    clear_last_error()
