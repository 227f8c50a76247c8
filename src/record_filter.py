"""Public SDK surface for the record filter.

This module provides a stable import path for library users.
It re-exports the filter function, typed record models, and errors.
"""

from __future__ import annotations

from core.errors import InvalidFieldError, InvalidTagError, RecordFilterError
from core.types import Admin, AdminConstraint, Record, RecordTag, User, UserConstraint
from query.constraint_validation import (
    supported_constraint_fields,
    supported_record_tags,
    validate_constraint,
)
from query.record_filtering import filter_records
from query.record_formatting import format_record, format_records

__all__ = [
    "Admin",
    "AdminConstraint",
    "InvalidFieldError",
    "InvalidTagError",
    "Record",
    "RecordFilterError",
    "RecordTag",
    "User",
    "UserConstraint",
    "filter_records",
    "format_record",
    "format_records",
    "supported_constraint_fields",
    "supported_record_tags",
    "validate_constraint",
]
