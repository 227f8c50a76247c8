"""Core constants used across record filter modules.

This module centralizes tag, field, and configuration literals.
Keeping values here avoids magic strings in filtering logic.
"""

from __future__ import annotations

DISCRIMINANT_FIELD = "kind"
USER_TAG = "user"
ADMIN_TAG = "admin"
SUPPORTED_RECORD_TAGS = (USER_TAG, ADMIN_TAG)
WHERE_ARGUMENT_SEPARATOR = "="
LOG_LEVEL_ENV_VAR = "RECORD_FILTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
