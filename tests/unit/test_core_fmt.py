import pytest
from decimal import Decimal
from fractions import Fraction

from bigmath.core.numbers import BigDecimal, BigRational
from bigmath.core.exc import RoundingNecessaryError, NumberFormatError
from bigmath.core.fmt import to_fraction, to_stdlib_decimal, to_float, fmt_sci


# -----------------------------
# to_fraction
# -----------------------------

def test_to_fraction_exact():
    print("[to_fraction] 1.25 -> 5/4; 10/5 -> 2; -0.001 -> -1/1000")
    assert to_fraction("1.25") == Fraction(5, 4)
    assert to_fraction(BigRational(10, 5)) == Fraction(2)
    assert to_fraction(BigDecimal(-1, 3)) == Fraction(-1, 1000)


# -----------------------------
# to_stdlib_decimal
# -----------------------------

def test_to_stdlib_decimal_keeps_scale():
    print("[to_stdlib_decimal] 1.50 keeps its trailing zero; 3/8 -> 0.375")
    d = to_stdlib_decimal("1.50")
    print("1.50 ->", d)
    assert d == Decimal("1.50")
    assert str(d) == "1.50"
    assert to_stdlib_decimal("3/8") == Decimal("0.375")
    assert to_stdlib_decimal(-7) == Decimal(-7)


def test_to_stdlib_decimal_is_exact_beyond_context_precision():
    print("[to_stdlib_decimal] 42 significant digits survive (context precision is 28)")
    text = "1" + "0" * 40 + ".5"
    assert str(to_stdlib_decimal(text)) == text


def test_to_stdlib_decimal_non_terminating_raises():
    print("[to_stdlib_decimal] 1/3 -> RoundingNecessaryError")
    with pytest.raises(RoundingNecessaryError):
        to_stdlib_decimal("1/3")


# -----------------------------
# to_float / fmt_sci
# -----------------------------

def test_to_float_display_only():
    print("[to_float] 1/4 -> 0.25; -2.5 -> -2.5")
    assert to_float("1/4") == 0.25
    assert to_float("-2.5") == -2.5


def test_fmt_sci_scientific_formatting():
    print("[fmt_sci] check scientific formatting stability")
    s1 = fmt_sci("1")
    s2 = fmt_sci("123456")
    s3 = fmt_sci("1e-9")
    s4 = fmt_sci("1/3")
    print("fmt_sci(1) ->", s1)
    print("fmt_sci(123456) ->", s2)
    print("fmt_sci(1e-9) ->", s3)
    print("fmt_sci(1/3) ->", s4)
    assert s1 == "1.000000000000000000E+0"
    assert s2 == "1.234560000000000000E+5"
    assert s3 == "1.000000000000000000E-9"
    assert s4 == "3.333333333333333333E-1"


def test_fmt_sci_places_sign_and_zero():
    print("[fmt_sci] -1/8 with 3 places; zero with 2 and 0 places")
    assert fmt_sci("-1/8", places=3) == "-1.250E-1"
    assert fmt_sci("0.000", places=2) == "0.00E+0"
    assert fmt_sci(0, places=0) == "0E+0"


def test_bridges_reject_invalid_literals():
    print("[bridges-invalid] malformed literal -> NumberFormatError")
    with pytest.raises(NumberFormatError):
        to_fraction("1..2")
    with pytest.raises(NumberFormatError):
        fmt_sci("x")
