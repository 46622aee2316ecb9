"""
Parse-and-dispatch: build the right numeric kind from any supported input.

Flow: raw value -> stringify -> classify -> canonicalize -> construct the
natural kind -> (optionally) convert to the requested kind.

Natural kinds:
- BigNumber instances are returned as is
- int -> BigInteger (no parsing)
- decimal.Decimal -> BigDecimal, fractions.Fraction -> BigRational (no parsing)
- float -> repr() -> grammar (always BigDecimal)
- str with '/' -> BigRational
- str with '.' or an exponent -> BigDecimal
- str with only an optionally signed digit run -> BigInteger
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from typing import Optional

from .exc import DivisionByZeroError, InvalidArgumentError, NumberFormatError
from .kinds import NumericKind
from .literals import (
    DecimalLiteral,
    IntegerLiteral,
    NumberLiteral,
    RationalLiteral,
    canonicalize,
    classify,
    parse_digits,
)
from .numbers import BigDecimal, BigInteger, BigNumber, BigRational

# Debug printing control
DEBUG_FACTORY = False

def _dbg(msg: str, *args) -> None:
    if DEBUG_FACTORY:
        print(msg % args if args else msg)


# ----------------------------
# Cross-kind converter
# ----------------------------

def convert(value: BigNumber, kind: NumericKind) -> BigNumber:
    """Exact conversion of `value` to `kind`.

    Same kind returns `value` itself. Lossy conversions raise
    RoundingNecessaryError (Decimal->Integer with a fractional part,
    Rational->Integer with a remainder, Rational->Decimal that does not
    terminate).
    """
    if not isinstance(value, BigNumber):
        raise InvalidArgumentError("convert", f"expects a BigNumber, got {type(value).__name__}")
    if kind is NumericKind.INTEGER:
        return value.to_integer()
    if kind is NumericKind.DECIMAL:
        return value.to_decimal()
    if kind is NumericKind.RATIONAL:
        return value.to_rational()
    raise InvalidArgumentError("convert", f"expects a NumericKind, got {kind!r}")


# ----------------------------
# Variant constructor
# ----------------------------

def construct(literal: NumberLiteral, kind: Optional[NumericKind] = None) -> BigNumber:
    """Build the natural kind of a classified literal, then convert if asked."""
    if isinstance(literal, RationalLiteral):
        numerator = canonicalize(literal.sign + literal.numerator)
        denominator = literal.denominator.lstrip("0")
        if denominator == "":
            raise DivisionByZeroError.denominator_must_not_be_zero()
        # Not reduced: BigRational.simplified() owns reduction.
        result: BigNumber = BigRational(parse_digits(numerator), parse_digits(denominator))

    elif isinstance(literal, DecimalLiteral):
        unscaled = canonicalize(literal.sign + literal.integral + literal.fractional)
        scale = len(literal.fractional) - literal.exponent
        if scale < 0:
            if unscaled != "0":
                unscaled += "0" * -scale
            scale = 0
        result = BigDecimal(parse_digits(unscaled), scale)

    elif isinstance(literal, IntegerLiteral):
        result = BigInteger(parse_digits(canonicalize(literal.sign + literal.digits)))

    else:
        raise InvalidArgumentError("construct", f"expects a number literal, got {type(literal).__name__}")

    _dbg("construct: %s -> %r", literal, result)
    if kind is None:
        return result
    return convert(result, kind)


# ----------------------------
# Non-string inputs
# ----------------------------

def _from_stdlib_decimal(x: Decimal) -> BigDecimal:
    if not x.is_finite():
        raise NumberFormatError(x, "is not a finite number")
    sign, digits, exponent = x.as_tuple()
    unscaled = parse_digits("".join(str(d) for d in digits) or "0")
    if sign:
        unscaled = -unscaled
    if exponent >= 0:
        return BigDecimal(unscaled * 10 ** exponent, 0)
    return BigDecimal(unscaled, -exponent)


def _to_literal_text(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise NumberFormatError(value, "is not a finite number")
        # repr is the shortest string that round-trips to the same float
        return repr(value)
    raise NumberFormatError(value, f"has unsupported type {type(value).__name__}")


# ----------------------------
# Unified entry point
# ----------------------------

def of(value, kind: Optional[NumericKind] = None) -> BigNumber:
    """Create a number from `value`, optionally converted to `kind`.

    Raises
    ------
    NumberFormatError
        `value` is not a valid number literal or has an unsupported type.
    DivisionByZeroError
        `value` is a rational literal with a zero denominator.
    RoundingNecessaryError
        `value` is valid but cannot be represented exactly as `kind`.
    """
    if kind is not None and not isinstance(kind, NumericKind):
        raise InvalidArgumentError("of", f"expects a NumericKind or None, got {kind!r}")

    if isinstance(value, BigNumber):
        return value if kind is None else convert(value, kind)

    if isinstance(value, int) and not isinstance(value, bool):
        if kind is NumericKind.DECIMAL:
            return BigDecimal(value, 0)
        if kind is NumericKind.RATIONAL:
            return BigRational(value, 1)
        return BigInteger(value)

    if isinstance(value, Decimal):
        result = _from_stdlib_decimal(value)
        return result if kind is None else convert(result, kind)

    if isinstance(value, Fraction):
        result = BigRational(value.numerator, value.denominator)
        return result if kind is None else convert(result, kind)

    return construct(classify(_to_literal_text(value)), kind)


__all__ = [
    "of",
    "construct",
    "convert",
]
