"""Record filter exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Validation failures reject a whole call before any record is examined.
"""

from __future__ import annotations


class RecordFilterError(Exception):
    """Base exception for all record filter failures."""


class RecordFilterConfigError(RecordFilterError):
    """Raised for invalid runtime configuration."""


class InvalidTagError(RecordFilterError):
    """Raised when a requested tag is not a recognized record variant."""


class InvalidFieldError(RecordFilterError):
    """Raised when a constraint key is not a field of the selected variant."""


class ConstraintValueError(RecordFilterError):
    """Raised when a constraint value cannot be parsed or has the wrong kind."""
