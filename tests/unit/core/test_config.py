"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RecordFilterConfig
from core.errors import RecordFilterConfigError


def test_from_env_defaults_to_info_level() -> None:
    """Config should default to info logging when unset."""
    config = RecordFilterConfig.from_env()

    assert config.log_level == "info"


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept mixed-case level names with padding."""
    monkeypatch.setenv("RECORD_FILTER_LOG_LEVEL", " DEBUG ")

    config = RecordFilterConfig.from_env()

    assert config.log_level == "debug"


def test_from_env_raises_for_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported level names."""
    monkeypatch.setenv("RECORD_FILTER_LOG_LEVEL", "chatty")

    with pytest.raises(RecordFilterConfigError, match="RECORD_FILTER_LOG_LEVEL"):
        RecordFilterConfig.from_env()
