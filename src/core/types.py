"""Shared typed models.

This module defines the immutable record variants and the per-variant
constraint shapes consumed by the filtering layer. The ``kind`` field is
the discriminant and is fixed by the variant class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypedDict

RecordTag = Literal["user", "admin"]


@dataclass(frozen=True)
class User:
    """Regular user record.

    Attributes:
        kind: Discriminant, always ``"user"``.
        name: Display name.
        age: Age in whole years.
        occupation: Free-text occupation.
    """

    kind: Literal["user"] = field(default="user", init=False)
    name: str
    age: int
    occupation: str


@dataclass(frozen=True)
class Admin:
    """Administrator record.

    Attributes:
        kind: Discriminant, always ``"admin"``.
        name: Display name.
        age: Age in whole years.
        role: Administrative role title.
    """

    kind: Literal["admin"] = field(default="admin", init=False)
    name: str
    age: int
    role: str


Record = User | Admin


class UserConstraint(TypedDict, total=False):
    """Optional field constraints legal for user records."""

    name: str
    age: int
    occupation: str


class AdminConstraint(TypedDict, total=False):
    """Optional field constraints legal for admin records."""

    name: str
    age: int
    role: str
