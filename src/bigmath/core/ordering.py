"""
Comparison protocol over any mix of kinds.

Everything here reduces to `BigNumber.compare_to`, the single three-way
primitive: equality and ordering predicates, sign predicates, variadic
min/max and stable sorting. Inputs go through `of()` first, so literals and
native numbers are accepted wherever a number is.

Notes:
- Comparisons are exact (cross-multiplied fractions); never via float.
- min_of/max_of keep the first of several equal extremes.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List, Optional

from .exc import InvalidArgumentError
from .factory import of
from .kinds import NumericKind, Ordering
from .numbers import BigNumber


# ----------------------------
# Primitive
# ----------------------------

def compare(a, b) -> Ordering:
    """Three-way comparison of two numbers (or literals)."""
    return of(a).compare_to(b)


def sign(x) -> Ordering:
    """Same as compare(x, 0)."""
    return compare(x, 0)


# ----------------------------
# Derived predicates
# ----------------------------

def is_equal_to(a, b) -> bool:
    return compare(a, b) == Ordering.EQUAL


def is_less_than(a, b) -> bool:
    return compare(a, b) < 0


def is_less_than_or_equal_to(a, b) -> bool:
    return compare(a, b) <= 0


def is_greater_than(a, b) -> bool:
    return compare(a, b) > 0


def is_greater_than_or_equal_to(a, b) -> bool:
    return compare(a, b) >= 0


def is_zero(x) -> bool:
    return sign(x) == 0


def is_negative(x) -> bool:
    return sign(x) < 0


def is_negative_or_zero(x) -> bool:
    return sign(x) <= 0


def is_positive(x) -> bool:
    return sign(x) > 0


def is_positive_or_zero(x) -> bool:
    return sign(x) >= 0


# ----------------------------
# Variadic extremes
# ----------------------------

def min_of(*values, kind: Optional[NumericKind] = None) -> BigNumber:
    """Smallest of `values`, each built with `of(value, kind)`.

    Raises InvalidArgumentError if no values are given.
    """
    result = None
    for value in values:
        number = of(value, kind)
        if result is None or number.is_less_than(result):
            result = number
    if result is None:
        raise InvalidArgumentError("min_of", "expects at least one value.")
    return result


def max_of(*values, kind: Optional[NumericKind] = None) -> BigNumber:
    """Largest of `values`, each built with `of(value, kind)`.

    Raises InvalidArgumentError if no values are given.
    """
    result = None
    for value in values:
        number = of(value, kind)
        if result is None or number.is_greater_than(result):
            result = number
    if result is None:
        raise InvalidArgumentError("max_of", "expects at least one value.")
    return result


# ----------------------------
# Stable sort
# ----------------------------

def _cmp_numbers(a: BigNumber, b: BigNumber) -> int:
    return a.compare_to(b)


def sorted_numbers(
    values: Iterable,
    *,
    reverse: bool = False,
    kind: Optional[NumericKind] = None,
) -> List[BigNumber]:
    """Coerce each value, then sort by exact value (ascending unless `reverse`).

    Python's built-in sort is stable, so equal values (e.g. "1", "1.0", "2/2")
    retain their original order, also with reverse=True.
    """
    numbers = [of(v, kind) for v in values]
    return sorted(numbers, key=cmp_to_key(_cmp_numbers), reverse=reverse)


__all__ = [
    "compare",
    "sign",
    "is_equal_to",
    "is_less_than",
    "is_less_than_or_equal_to",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_zero",
    "is_negative",
    "is_negative_or_zero",
    "is_positive",
    "is_positive_or_zero",
    "min_of",
    "max_of",
    "sorted_numbers",
]
