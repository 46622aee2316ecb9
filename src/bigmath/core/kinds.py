"""
Kind and ordering enumerations.

`NumericKind` replaces class-identity dispatch: callers say which kind they
want and construction/conversion match on it.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class NumericKind(Enum):
    """The three mutually convertible number representations."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    RATIONAL = "rational"


class Ordering(IntEnum):
    """Result of a three-way comparison; usable wherever -1/0/1 is expected."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


__all__ = [
    "NumericKind",
    "Ordering",
]
