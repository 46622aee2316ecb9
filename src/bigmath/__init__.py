# Top-level API for bigmath.
"""
Top-level API for bigmath (arbitrary-precision integer, decimal and rational).

This module exposes the stable interface:
  - of(value, kind): build the right kind from an int, float, str,
    decimal.Decimal, fractions.Fraction or an existing number
  - BigInteger / BigDecimal / BigRational and their common base BigNumber
  - convert, compare, min_of, max_of and the comparison predicates
  - the error types

Everything is re-exported from `bigmath.core`.
"""

from __future__ import annotations

from .core import (
    NumericKind,
    Ordering,
    BigNumber,
    BigInteger,
    BigDecimal,
    BigRational,
    of,
    convert,
    compare,
    min_of,
    max_of,
    sorted_numbers,
    BigMathError,
    NumberFormatError,
    DivisionByZeroError,
    RoundingNecessaryError,
    InvalidArgumentError,
)

__version__ = "0.1.0"

__all__ = [
    "NumericKind",
    "Ordering",
    "BigNumber",
    "BigInteger",
    "BigDecimal",
    "BigRational",
    "of",
    "convert",
    "compare",
    "min_of",
    "max_of",
    "sorted_numbers",
    "BigMathError",
    "NumberFormatError",
    "DivisionByZeroError",
    "RoundingNecessaryError",
    "InvalidArgumentError",
]
