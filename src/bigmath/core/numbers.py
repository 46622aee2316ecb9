"""
Number primitives: BigInteger, BigDecimal (unscaled/scale) and BigRational (n/d).

- All three are frozen dataclasses over native Python ints (arbitrary precision).
- Constructors are the *trusted* path: they take already-normalised fields and
  never parse. Parsing and kind dispatch live in `factory.py`.
- Conversions between kinds are exact or raise RoundingNecessaryError; nothing
  here rounds.
- Comparison has a single primitive, `compare_to`, defined once on BigNumber.
  Every predicate, operator and the sign are derived from it.

Arithmetic keeps the receiver's kind: the operand is coerced to that kind
first (`BigInteger("7").plus("0.5")` raises RoundingNecessaryError). The Python
operators instead widen both operands to the wider kind
(INTEGER < DECIMAL < RATIONAL) before delegating.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from math import gcd
from typing import ClassVar, Optional, Tuple

from .exc import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvariantViolation,
    RoundingNecessaryError,
)
from .kinds import NumericKind, Ordering
from .literals import format_digits

# Debug printing control
DEBUG_NUMBERS = False

def _dbg(msg: str, *args) -> None:
    if DEBUG_NUMBERS:
        print(msg % args if args else msg)


# ----------------------------
# Internal helpers
# ----------------------------

def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


def _require_int(owner: str, name: str, v) -> None:
    if not isinstance(v, int) or isinstance(v, bool):
        raise InvariantViolation(f"{owner}.{name} must be int, got {type(v).__name__}")


def _coerce(value, kind: Optional[NumericKind] = None) -> "BigNumber":
    # factory imports this module; resolve lazily
    from .factory import of
    return of(value, kind)


def _exact_decimal(n: int, d: int) -> Optional[Tuple[int, int]]:
    """(unscaled, scale) for n/d (d > 0) if it terminates in base 10, else None.

    The scale is the smallest one that represents the value exactly.
    """
    g = gcd(n, d)
    n //= g
    d //= g
    twos = fives = 0
    r = d
    while r % 2 == 0:
        r //= 2
        twos += 1
    while r % 5 == 0:
        r //= 5
        fives += 1
    if r != 1:
        return None
    scale = max(twos, fives)
    return n * (_ten_pow(scale) // d), scale


_KIND_RANK = {
    NumericKind.INTEGER: 0,
    NumericKind.DECIMAL: 1,
    NumericKind.RATIONAL: 2,
}


def _operand(other) -> Optional["BigNumber"]:
    """Coerce the right-hand side of a Python operator, or None if unsupported.

    Only exact native types are accepted; floats and strings must go through
    `of()` explicitly.
    """
    if isinstance(other, BigNumber):
        return other
    if isinstance(other, bool):
        return None
    if isinstance(other, (int, Fraction)):
        return _coerce(other)
    if isinstance(other, Decimal) and other.is_finite():
        return _coerce(other)
    return None


def _widen(a: "BigNumber", b: "BigNumber") -> Tuple["BigNumber", "BigNumber"]:
    kind = a.KIND if _KIND_RANK[a.KIND] >= _KIND_RANK[b.KIND] else b.KIND
    return _coerce(a, kind), _coerce(b, kind)


# ----------------------------
# Common base
# ----------------------------

class BigNumber:
    """Common interface of the three numeric kinds.

    Subclasses provide the trusted constructor, `as_fraction_parts`, the three
    `to_*` conversion hooks, the arithmetic operations and `__str__`.
    """

    #: Kind of the concrete class; None on the base means "natural kind".
    KIND: ClassVar[Optional[NumericKind]] = None

    # ------------- factory entry points -------------

    @classmethod
    def of(cls, value) -> "BigNumber":
        """Build a number of `cls.KIND` (natural kind on BigNumber itself)."""
        return _coerce(value, cls.KIND)

    @classmethod
    def min(cls, *values) -> "BigNumber":
        from .ordering import min_of
        return min_of(*values, kind=cls.KIND)

    @classmethod
    def max(cls, *values) -> "BigNumber":
        from .ordering import max_of
        return max_of(*values, kind=cls.KIND)

    # ------------- kind-specific hooks -------------

    def as_fraction_parts(self) -> Tuple[int, int]:
        """Exact value as (numerator, denominator) with denominator > 0."""
        raise NotImplementedError

    def to_integer(self) -> "BigInteger":
        raise NotImplementedError

    def to_decimal(self) -> "BigDecimal":
        raise NotImplementedError

    def to_rational(self) -> "BigRational":
        raise NotImplementedError

    def plus(self, that) -> "BigNumber":
        raise NotImplementedError

    def minus(self, that) -> "BigNumber":
        raise NotImplementedError

    def multiplied_by(self, that) -> "BigNumber":
        raise NotImplementedError

    def divided_by(self, that) -> "BigNumber":
        """Exact quotient; RoundingNecessaryError if not representable in this kind."""
        raise NotImplementedError

    def power(self, exponent: int) -> "BigNumber":
        raise NotImplementedError

    def negated(self) -> "BigNumber":
        raise NotImplementedError

    def abs(self) -> "BigNumber":
        return self.negated() if self.is_negative() else self

    # ------------- comparison primitive -------------

    def compare_to(self, that) -> Ordering:
        """Three-way comparison on exact values; `that` goes through `of()`."""
        other = that if isinstance(that, BigNumber) else _coerce(that)
        n1, d1 = self.as_fraction_parts()
        n2, d2 = other.as_fraction_parts()
        lhs = n1 * d2
        rhs = n2 * d1
        return Ordering((lhs > rhs) - (lhs < rhs))

    # ------------- derived predicates -------------

    def is_equal_to(self, that) -> bool:
        return self.compare_to(that) == Ordering.EQUAL

    def is_less_than(self, that) -> bool:
        return self.compare_to(that) < 0

    def is_less_than_or_equal_to(self, that) -> bool:
        return self.compare_to(that) <= 0

    def is_greater_than(self, that) -> bool:
        return self.compare_to(that) > 0

    def is_greater_than_or_equal_to(self, that) -> bool:
        return self.compare_to(that) >= 0

    def sign(self) -> Ordering:
        """-1, 0 or 1; same as `compare_to(0)`."""
        return self.compare_to(0)

    def is_zero(self) -> bool:
        return self.sign() == 0

    def is_negative(self) -> bool:
        return self.sign() < 0

    def is_negative_or_zero(self) -> bool:
        return self.sign() <= 0

    def is_positive(self) -> bool:
        return self.sign() > 0

    def is_positive_or_zero(self) -> bool:
        return self.sign() >= 0

    # ------------- Python protocol -------------

    def __eq__(self, other: object) -> bool:
        o = _operand(other)
        if o is None:
            return NotImplemented
        return self.compare_to(o) == Ordering.EQUAL

    def __lt__(self, other) -> bool:
        o = _operand(other)
        if o is None:
            return NotImplemented
        return self.compare_to(o) < 0

    def __le__(self, other) -> bool:
        o = _operand(other)
        if o is None:
            return NotImplemented
        return self.compare_to(o) <= 0

    def __gt__(self, other) -> bool:
        o = _operand(other)
        if o is None:
            return NotImplemented
        return self.compare_to(o) > 0

    def __ge__(self, other) -> bool:
        o = _operand(other)
        if o is None:
            return NotImplemented
        return self.compare_to(o) >= 0

    def __hash__(self) -> int:
        # Equal values hash alike across kinds, and like the equal int/Fraction.
        n, d = self.as_fraction_parts()
        return hash(Fraction(n, d))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "BigNumber":
        return self.negated()

    def __pos__(self) -> "BigNumber":
        return self

    def __abs__(self) -> "BigNumber":
        return self.abs()

    def __add__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        a, b = _widen(self, o)
        return a.plus(b)

    def __radd__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        a, b = _widen(o, self)
        return a.plus(b)

    def __sub__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        a, b = _widen(self, o)
        return a.minus(b)

    def __rsub__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        a, b = _widen(o, self)
        return a.minus(b)

    def __mul__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        a, b = _widen(self, o)
        return a.multiplied_by(b)

    def __rmul__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        a, b = _widen(o, self)
        return a.multiplied_by(b)

    def __truediv__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        a, b = _widen(self, o)
        return a.divided_by(b)

    def __rtruediv__(self, other):
        o = _operand(other)
        if o is None:
            return NotImplemented
        a, b = _widen(o, self)
        return a.divided_by(b)

    def __pow__(self, exponent):
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.power(exponent)


def _check_exponent(exponent: int) -> None:
    if not isinstance(exponent, int) or isinstance(exponent, bool) or exponent < 0:
        raise InvalidArgumentError("power", f"expects a non-negative int exponent, got {exponent!r}")


# ----------------------------
# BigInteger
# ----------------------------

@dataclass(frozen=True, eq=False)
class BigInteger(BigNumber):
    """Arbitrary-precision integer."""
    value: int

    KIND: ClassVar[NumericKind] = NumericKind.INTEGER

    def __post_init__(self):
        _require_int("BigInteger", "value", self.value)

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "BigInteger":
        return BigInteger(0)

    @staticmethod
    def one() -> "BigInteger":
        return BigInteger(1)

    @staticmethod
    def ten() -> "BigInteger":
        return BigInteger(10)

    # ------------- conversions -------------

    def as_fraction_parts(self) -> Tuple[int, int]:
        return self.value, 1

    def to_integer(self) -> "BigInteger":
        return self

    def to_decimal(self) -> "BigDecimal":
        return BigDecimal(self.value, 0)

    def to_rational(self) -> "BigRational":
        return BigRational(self.value, 1)

    # ------------- arithmetic -------------

    def plus(self, that) -> "BigInteger":
        return BigInteger(self.value + BigInteger.of(that).value)

    def minus(self, that) -> "BigInteger":
        return BigInteger(self.value - BigInteger.of(that).value)

    def multiplied_by(self, that) -> "BigInteger":
        return BigInteger(self.value * BigInteger.of(that).value)

    def divided_by(self, that) -> "BigInteger":
        divisor = BigInteger.of(that).value
        if divisor == 0:
            raise DivisionByZeroError.division_by_zero()
        q, r = divmod(self.value, divisor)
        if r != 0:
            raise RoundingNecessaryError(
                self, message=f"Rounding is necessary to divide {self} by {divisor} as integer."
            )
        return BigInteger(q)

    def power(self, exponent: int) -> "BigInteger":
        _check_exponent(exponent)
        return BigInteger(self.value ** exponent)

    def negated(self) -> "BigInteger":
        return BigInteger(-self.value)

    def __str__(self) -> str:
        return format_digits(self.value)

    def __repr__(self) -> str:
        return f"BigInteger(value={format_digits(self.value)})"


# ----------------------------
# BigDecimal (unscaled * 10^-scale)
# ----------------------------

@dataclass(frozen=True, eq=False)
class BigDecimal(BigNumber):
    """Arbitrary-precision decimal: unscaled * 10^-scale, scale >= 0.

    The scale is part of the representation ("1.0" keeps scale 1) but not of
    the value: `BigDecimal(10, 1) == BigDecimal(1, 0)`.
    """
    unscaled: int
    scale: int = 0

    KIND: ClassVar[NumericKind] = NumericKind.DECIMAL

    def __post_init__(self):
        _require_int("BigDecimal", "unscaled", self.unscaled)
        _require_int("BigDecimal", "scale", self.scale)
        if self.scale < 0:
            raise InvariantViolation(f"BigDecimal scale must be >= 0, got {self.scale}")

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "BigDecimal":
        return BigDecimal(0, 0)

    @staticmethod
    def one() -> "BigDecimal":
        return BigDecimal(1, 0)

    @staticmethod
    def ten() -> "BigDecimal":
        return BigDecimal(10, 0)

    @classmethod
    def of_unscaled_value(cls, value, scale: int = 0) -> "BigDecimal":
        """Build from an integer-convertible unscaled value and a scale."""
        if not isinstance(scale, int) or isinstance(scale, bool) or scale < 0:
            raise InvalidArgumentError("of_unscaled_value", f"expects a non-negative int scale, got {scale!r}")
        return cls(BigInteger.of(value).value, scale)

    @property
    def unscaled_value(self) -> BigInteger:
        return BigInteger(self.unscaled)

    # ------------- conversions -------------

    def as_fraction_parts(self) -> Tuple[int, int]:
        return self.unscaled, _ten_pow(self.scale)

    def to_integer(self) -> BigInteger:
        if self.scale == 0:
            return BigInteger(self.unscaled)
        q, r = divmod(self.unscaled, _ten_pow(self.scale))
        if r != 0:
            raise RoundingNecessaryError(self, NumericKind.DECIMAL, NumericKind.INTEGER)
        return BigInteger(q)

    def to_decimal(self) -> "BigDecimal":
        return self

    def to_rational(self) -> "BigRational":
        # Not reduced: BigRational.simplified() owns reduction.
        return BigRational(self.unscaled, _ten_pow(self.scale))

    def strip_trailing_zeros(self) -> "BigDecimal":
        """Same value with the smallest scale."""
        if self.unscaled == 0:
            return BigDecimal.zero()
        m, s = self.unscaled, self.scale
        while s > 0 and m % 10 == 0:
            m //= 10
            s -= 1
        return BigDecimal(m, s)

    # ------------- arithmetic -------------

    def _aligned(self, other: "BigDecimal") -> Tuple[int, int, int]:
        s = max(self.scale, other.scale)
        return (
            self.unscaled * _ten_pow(s - self.scale),
            other.unscaled * _ten_pow(s - other.scale),
            s,
        )

    def plus(self, that) -> "BigDecimal":
        a, b, s = self._aligned(BigDecimal.of(that))
        return BigDecimal(a + b, s)

    def minus(self, that) -> "BigDecimal":
        a, b, s = self._aligned(BigDecimal.of(that))
        return BigDecimal(a - b, s)

    def multiplied_by(self, that) -> "BigDecimal":
        o = BigDecimal.of(that)
        return BigDecimal(self.unscaled * o.unscaled, self.scale + o.scale)

    def divided_by(self, that) -> "BigDecimal":
        o = BigDecimal.of(that)
        if o.unscaled == 0:
            raise DivisionByZeroError.division_by_zero()
        num = self.unscaled * _ten_pow(o.scale)
        den = o.unscaled * _ten_pow(self.scale)
        if den < 0:
            num, den = -num, -den
        exact = _exact_decimal(num, den)
        if exact is None:
            raise RoundingNecessaryError(
                self, message=f"Rounding is necessary to divide {self} by {o} as decimal."
            )
        result = BigDecimal(*exact)
        _dbg("decimal divide: %s / %s -> %s", self, o, result)
        return result

    def power(self, exponent: int) -> "BigDecimal":
        _check_exponent(exponent)
        return BigDecimal(self.unscaled ** exponent, self.scale * exponent)

    def negated(self) -> "BigDecimal":
        return BigDecimal(-self.unscaled, self.scale)

    def __str__(self) -> str:
        if self.scale == 0:
            return format_digits(self.unscaled)
        sign = "-" if self.unscaled < 0 else ""
        digits = format_digits(abs(self.unscaled)).rjust(self.scale + 1, "0")
        return f"{sign}{digits[:-self.scale]}.{digits[-self.scale:]}"

    def __repr__(self) -> str:
        return f"BigDecimal(unscaled={format_digits(self.unscaled)}, scale={self.scale})"


# ----------------------------
# BigRational (numerator / denominator)
# ----------------------------

@dataclass(frozen=True, eq=False)
class BigRational(BigNumber):
    """Exact fraction numerator/denominator.

    The constructor keeps the denominator positive (moving the sign to the
    numerator) but does not reduce; use `simplified()` for lowest terms.
    """
    numerator: int
    denominator: int = 1

    KIND: ClassVar[NumericKind] = NumericKind.RATIONAL

    def __post_init__(self):
        _require_int("BigRational", "numerator", self.numerator)
        _require_int("BigRational", "denominator", self.denominator)
        if self.denominator == 0:
            raise DivisionByZeroError.denominator_must_not_be_zero()
        if self.denominator < 0:
            object.__setattr__(self, "numerator", -self.numerator)
            object.__setattr__(self, "denominator", -self.denominator)

    # ------------- constructors -------------

    @classmethod
    def nd(cls, numerator, denominator) -> "BigRational":
        """Build from two integer-convertible values."""
        return cls(BigInteger.of(numerator).value, BigInteger.of(denominator).value)

    @staticmethod
    def zero() -> "BigRational":
        return BigRational(0, 1)

    @staticmethod
    def one() -> "BigRational":
        return BigRational(1, 1)

    @staticmethod
    def ten() -> "BigRational":
        return BigRational(10, 1)

    def simplified(self) -> "BigRational":
        """Same value in lowest terms (0 is 0/1)."""
        g = gcd(self.numerator, self.denominator)
        return BigRational(self.numerator // g, self.denominator // g)

    def reciprocal(self) -> "BigRational":
        if self.numerator == 0:
            raise DivisionByZeroError.division_by_zero()
        return BigRational(self.denominator, self.numerator)

    # ------------- conversions -------------

    def as_fraction_parts(self) -> Tuple[int, int]:
        return self.numerator, self.denominator

    def to_integer(self) -> BigInteger:
        q, r = divmod(self.numerator, self.denominator)
        if r != 0:
            raise RoundingNecessaryError(self, NumericKind.RATIONAL, NumericKind.INTEGER)
        return BigInteger(q)

    def to_decimal(self) -> BigDecimal:
        exact = _exact_decimal(self.numerator, self.denominator)
        if exact is None:
            raise RoundingNecessaryError(self, NumericKind.RATIONAL, NumericKind.DECIMAL)
        result = BigDecimal(*exact)
        _dbg("rational->decimal: %s -> %s", self, result)
        return result

    def to_rational(self) -> "BigRational":
        return self

    # ------------- arithmetic -------------

    def plus(self, that) -> "BigRational":
        o = BigRational.of(that)
        return BigRational(
            self.numerator * o.denominator + o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def minus(self, that) -> "BigRational":
        o = BigRational.of(that)
        return BigRational(
            self.numerator * o.denominator - o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def multiplied_by(self, that) -> "BigRational":
        o = BigRational.of(that)
        return BigRational(self.numerator * o.numerator, self.denominator * o.denominator)

    def divided_by(self, that) -> "BigRational":
        o = BigRational.of(that)
        if o.numerator == 0:
            raise DivisionByZeroError.division_by_zero()
        return BigRational(self.numerator * o.denominator, self.denominator * o.numerator)

    def power(self, exponent: int) -> "BigRational":
        _check_exponent(exponent)
        return BigRational(self.numerator ** exponent, self.denominator ** exponent)

    def negated(self) -> "BigRational":
        return BigRational(-self.numerator, self.denominator)

    def __str__(self) -> str:
        if self.denominator == 1:
            return format_digits(self.numerator)
        return f"{format_digits(self.numerator)}/{format_digits(self.denominator)}"

    def __repr__(self) -> str:
        return (
            f"BigRational(numerator={format_digits(self.numerator)}, "
            f"denominator={format_digits(self.denominator)})"
        )


__all__ = [
    "BigNumber",
    "BigInteger",
    "BigDecimal",
    "BigRational",
]
