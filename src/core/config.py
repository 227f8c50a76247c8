"""Runtime configuration model for the record filter.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, SUPPORTED_LOG_LEVELS
from core.errors import RecordFilterConfigError


@dataclass(frozen=True)
class RecordFilterConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum structured log level, lower-case.
    """

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "RecordFilterConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RecordFilterConfigError: If environment values are invalid.
        """
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(log_level=_parse_log_level(log_level_value))


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized lower-case level name.

    Raises:
        RecordFilterConfigError: If value is not a supported level.
    """
    normalized = raw_value.strip().lower()
    if normalized in SUPPORTED_LOG_LEVELS:
        return normalized
    supported_text = ", ".join(SUPPORTED_LOG_LEVELS)
    raise RecordFilterConfigError(
        f"Invalid {LOG_LEVEL_ENV_VAR} value: "
        f"expected one of {supported_text}, got '{raw_value}'. "
        f"Set {LOG_LEVEL_ENV_VAR} to a supported level."
    )
