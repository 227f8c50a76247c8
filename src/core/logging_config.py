"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
Events go to stderr so command output on stdout stays parseable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import RecordFilterConfigError


def configure_logging(log_level: str = DEFAULT_LOG_LEVEL) -> None:
    """Install the structured logging processor chain.

    Args:
        log_level: Minimum level name, e.g. ``info`` or ``debug``.

    Raises:
        RecordFilterConfigError: If the level name is not supported.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(log_level)),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Create a print logger bound to the current stderr stream."""
    return structlog.PrintLogger(file=sys.stderr)


def _level_number(log_level: str) -> int:
    """Map a supported level name onto the stdlib numeric level."""
    normalized = log_level.strip().lower()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported_text = ", ".join(SUPPORTED_LOG_LEVELS)
        raise RecordFilterConfigError(
            f"Unsupported log level '{log_level}'. Supported levels: {supported_text}."
        )
    return getattr(logging, normalized.upper())
