"""Type-safe parsing of ``--where FIELD=VALUE`` arguments.

This module turns raw command-line strings into a constraint mapping whose
keys are legal for the selected tag and whose values carry the field's
declared type, so numeric fields compare numerically.
"""

from __future__ import annotations

import re
from typing import Sequence

from core.constants import WHERE_ARGUMENT_SEPARATOR
from core.errors import ConstraintValueError
from query.constraint_validation import constraint_field_type, validate_record_tag

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_where_arguments(tag: str, items: Sequence[str]) -> dict[str, object]:
    """Parse repeated ``FIELD=VALUE`` items into a typed constraint.

    Args:
        tag: Requested variant tag.
        items: Raw ``FIELD=VALUE`` strings; later duplicates win.

    Returns:
        Constraint mapping with coerced values.

    Raises:
        InvalidTagError: If the tag is not a recognized variant.
        InvalidFieldError: If a field is not legal for the tag.
        ConstraintValueError: If an item is malformed or its value
            cannot be coerced to the field type.
    """
    record_tag = validate_record_tag(tag)
    constraint: dict[str, object] = {}
    for item in items:
        field_name, raw_value = _split_item(item)
        field_type = constraint_field_type(record_tag, field_name)
        constraint[field_name] = _coerce_value(field_name, raw_value, field_type)
    return constraint


def _split_item(item: str) -> tuple[str, str]:
    field_name, separator, raw_value = item.partition(WHERE_ARGUMENT_SEPARATOR)
    field_name = field_name.strip()
    if not separator or not field_name:
        raise ConstraintValueError(
            f"Invalid --where argument '{item}': expected FIELD{WHERE_ARGUMENT_SEPARATOR}VALUE."
        )
    return field_name, raw_value


def _coerce_value(field_name: str, raw_value: str, field_type: type) -> object:
    if field_type is int:
        stripped = raw_value.strip()
        if not _INTEGER_PATTERN.fullmatch(stripped):
            raise ConstraintValueError(
                f"Invalid value for field '{field_name}': "
                f"expected integer, got '{raw_value}'."
            )
        return int(stripped)
    return raw_value
