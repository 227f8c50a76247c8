"""Built-in demonstration records.

This module supplies a small in-memory, mixed-variant collection used by
the CLI. It is a literal record source, not a loader.
"""

from __future__ import annotations

from core.types import Admin, Record, User


def build_sample_records() -> tuple[Record, ...]:
    """Return the demonstration records in a stable order."""
    return (
        User(name="Kate Müller", age=23, occupation="Astronaut"),
        User(name="Wilson", age=23, occupation="Ball"),
        Admin(name="Agent Smith", age=23, role="Anti-virus engineer"),
        Admin(name="Bruce Willis", age=64, role="Manager"),
    )
