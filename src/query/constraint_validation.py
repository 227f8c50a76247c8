"""Runtime validation of record tags and constraint keys.

This module holds the tag-to-field table that mirrors the static
``UserConstraint`` and ``AdminConstraint`` shapes. Callers whose inputs
bypass static checking, such as parsed command-line arguments or
deserialized payloads, get the same key restriction at runtime.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Mapping, cast, get_type_hints

from core.constants import ADMIN_TAG, DISCRIMINANT_FIELD, SUPPORTED_RECORD_TAGS, USER_TAG
from core.errors import ConstraintValueError, InvalidFieldError, InvalidTagError
from core.types import Admin, RecordTag, User

_RECORD_TYPES_BY_TAG: Mapping[str, type] = {
    USER_TAG: User,
    ADMIN_TAG: Admin,
}


def _constraint_field_types(record_type: type) -> dict[str, type]:
    """Collect non-discriminant field types for one record variant."""
    type_hints = get_type_hints(record_type)
    return {
        record_field.name: type_hints[record_field.name]
        for record_field in fields(record_type)
        if record_field.name != DISCRIMINANT_FIELD
    }


_CONSTRAINT_FIELD_TYPES_BY_TAG: Mapping[str, Mapping[str, type]] = {
    tag: _constraint_field_types(record_type)
    for tag, record_type in _RECORD_TYPES_BY_TAG.items()
}


def supported_record_tags() -> tuple[str, ...]:
    """Return recognized record variant tags."""
    return SUPPORTED_RECORD_TAGS


def validate_record_tag(tag: object) -> RecordTag:
    """Validate a requested variant tag.

    Args:
        tag: Candidate tag value.

    Returns:
        The tag, narrowed to a known variant.

    Raises:
        InvalidTagError: If the tag is not a recognized variant.
    """
    if isinstance(tag, str) and tag in _CONSTRAINT_FIELD_TYPES_BY_TAG:
        return cast(RecordTag, tag)
    supported_text = ", ".join(SUPPORTED_RECORD_TAGS)
    raise InvalidTagError(
        f"Unsupported record tag {tag!r}. Supported tags: {supported_text}."
    )


def supported_constraint_fields(tag: str) -> tuple[str, ...]:
    """Return legal constraint keys for a tag, in declaration order.

    Raises:
        InvalidTagError: If the tag is not a recognized variant.
    """
    record_tag = validate_record_tag(tag)
    return tuple(_CONSTRAINT_FIELD_TYPES_BY_TAG[record_tag])


def constraint_field_type(tag: str, field_name: str) -> type:
    """Return the declared value type of one constraint field.

    Raises:
        InvalidTagError: If the tag is not a recognized variant.
        InvalidFieldError: If the field is not legal for the tag.
    """
    record_tag = validate_record_tag(tag)
    field_types = _CONSTRAINT_FIELD_TYPES_BY_TAG[record_tag]
    if field_name not in field_types:
        raise _invalid_field_error(record_tag, [field_name])
    return field_types[field_name]


def validate_constraint(
    tag: object,
    constraint: Mapping[str, object] | None,
) -> dict[str, object]:
    """Validate a constraint mapping against the variant selected by tag.

    Args:
        tag: Requested variant tag.
        constraint: Optional field-to-value mapping.

    Returns:
        Plain dict copy of the constraint, empty when none was given.

    Raises:
        InvalidTagError: If the tag is not a recognized variant.
        InvalidFieldError: If any key is not legal for the variant,
            including the discriminant field.
        ConstraintValueError: If a boolean is given for an integer field.
    """
    record_tag = validate_record_tag(tag)
    if constraint is None:
        return {}
    field_types = _CONSTRAINT_FIELD_TYPES_BY_TAG[record_tag]
    unknown_fields = [key for key in constraint if key not in field_types]
    if unknown_fields:
        raise _invalid_field_error(record_tag, unknown_fields)
    for key, value in constraint.items():
        if field_types[key] is int and isinstance(value, bool):
            raise ConstraintValueError(
                f"Invalid value for field '{key}': expected integer, got boolean {value!r}."
            )
    return dict(constraint)


def _invalid_field_error(tag: RecordTag, unknown_fields: list[object]) -> InvalidFieldError:
    """Build a field error naming offending keys and the legal set."""
    unknown_text = ", ".join(repr(key) for key in unknown_fields)
    legal_text = ", ".join(_CONSTRAINT_FIELD_TYPES_BY_TAG[tag])
    return InvalidFieldError(
        f"Invalid constraint field(s) {unknown_text} for tag '{tag}'. "
        f"Allowed fields: {legal_text}."
    )
