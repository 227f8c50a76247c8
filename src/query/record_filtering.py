"""Tag-narrowed record filtering.

This module selects records of one variant that match every given field
constraint. Type checkers narrow the result and the legal constraint keys
from the literal tag; the same restriction is enforced at runtime before
any record is examined, so invalid calls never yield partial results.
"""

from __future__ import annotations

from typing import Iterable, Literal, Mapping, overload

from core.errors import RecordFilterError
from core.logging_config import get_logger
from core.types import Admin, AdminConstraint, Record, User, UserConstraint
from query.constraint_validation import validate_constraint

_LOGGER = get_logger(__name__)


@overload
def filter_records(
    records: Iterable[Record],
    tag: Literal["user"],
    constraint: UserConstraint | None = None,
) -> list[User]: ...


@overload
def filter_records(
    records: Iterable[Record],
    tag: Literal["admin"],
    constraint: AdminConstraint | None = None,
) -> list[Admin]: ...


def filter_records(
    records: Iterable[Record],
    tag: str,
    constraint: Mapping[str, object] | None = None,
) -> list[User] | list[Admin]:
    """Filter records by variant tag and field constraints.

    Args:
        records: Input records, possibly mixed-variant; read in one pass.
        tag: Variant to select, ``"user"`` or ``"admin"``.
        constraint: Optional field-to-value mapping; every key must be a
            non-discriminant field of the selected variant. Empty or
            omitted matches every record of the variant.

    Returns:
        Matching records in input order. Record objects are not copied.

    Raises:
        InvalidTagError: If the tag is not a recognized variant.
        InvalidFieldError: If a constraint key is not legal for the tag.
        ConstraintValueError: If a boolean is given for an integer field.
    """
    try:
        criteria = validate_constraint(tag, constraint)
    except RecordFilterError as error:
        _LOGGER.warning("record_filter_rejected", tag=tag, reason=str(error))
        raise
    matched: list[Record] = []
    input_count = 0
    for record in records:
        input_count += 1
        if record.kind == tag and _matches_criteria(record, criteria):
            matched.append(record)
    _LOGGER.debug(
        "records_filtered",
        tag=tag,
        constraint_fields=sorted(criteria),
        input_count=input_count,
        matched_count=len(matched),
    )
    return matched  # type: ignore[return-value]


def _matches_criteria(record: Record, criteria: Mapping[str, object]) -> bool:
    """Return whether every constrained field equals the record's value."""
    return all(getattr(record, key) == value for key, value in criteria.items())
