"""Human-readable rendering of filtered records."""

from __future__ import annotations

from typing import Iterable

from core.types import Admin, Record, User


def format_record(record: Record) -> str:
    """Render one record as ``name (age, occupation-or-role)``."""
    return f"{record.name} ({record.age}, {_variant_detail(record)})"


def format_records(records: Iterable[Record]) -> list[str]:
    """Render records in order, one line each."""
    return [format_record(record) for record in records]


def _variant_detail(record: Record) -> str:
    if isinstance(record, User):
        return record.occupation
    if isinstance(record, Admin):
        return record.role
    raise TypeError(f"Unsupported record type: {type(record).__name__}")
