"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the caller's log level setting."""
    monkeypatch.delenv("RECORD_FILTER_LOG_LEVEL", raising=False)


@pytest.fixture
def sample_records() -> tuple:
    """Mixed-variant demonstration records."""
    from query.sample_records import build_sample_records

    return build_sample_records()
