"""
Literal classification and canonicalisation (parse-time only).

- `classify` matches a string against the single number grammar and returns
  one of three literal shapes: IntegerLiteral, DecimalLiteral, RationalLiteral.
- `canonicalize` strips a redundant sign and leading zeros from a digit string.

Literals are transient: they only live between parsing and variant
construction (see `factory.construct`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .constants import MAX_EXPONENT_DIGITS, NUMBER_REGEX
from .exc import NumberFormatError

# Debug printing control
DEBUG_LITERALS = False

def _dbg(msg: str, *args) -> None:
    if DEBUG_LITERALS:
        print(msg % args if args else msg)


# ----------------------------
# Literal shapes
# ----------------------------

@dataclass(frozen=True)
class IntegerLiteral:
    """`sign? digit+`"""
    sign: str
    digits: str


@dataclass(frozen=True)
class DecimalLiteral:
    """`sign? digit+ ('.' digit+)? ([eE] sign? digit+)?` with at least one suffix."""
    sign: str
    integral: str
    fractional: str
    exponent: int


@dataclass(frozen=True)
class RationalLiteral:
    """`sign? digit+ '/' digit+`"""
    sign: str
    numerator: str
    denominator: str


NumberLiteral = Union[IntegerLiteral, DecimalLiteral, RationalLiteral]


# ----------------------------
# Classifier
# ----------------------------

def _split_sign(text: str):
    if text[0] in "+-":
        return text[0], text[1:]
    return "", text


def _parse_exponent(text: str, exponent: str) -> int:
    sign, digits = _split_sign(exponent)
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_EXPONENT_DIGITS:
        raise NumberFormatError(text, "has an exponent out of range")
    return int(sign + digits)


def classify(text: str) -> NumberLiteral:
    """Classify `text` against the number grammar (anchored, full-string).

    A denominator group makes the literal rational; a fractional and/or
    exponent group makes it decimal; otherwise it is an integer.
    """
    if not isinstance(text, str):
        raise NumberFormatError(text, "is not a string")
    m = NUMBER_REGEX.fullmatch(text)
    if m is None:
        raise NumberFormatError(text)

    sign, integral = _split_sign(m.group("integral"))
    fractional = m.group("fractional")
    exponent = m.group("exponent")
    denominator = m.group("denominator")
    _dbg("classify: %r -> sign=%r, int=%r, frac=%r, exp=%r, den=%r",
         text, sign, integral, fractional, exponent, denominator)

    if denominator is not None:
        return RationalLiteral(sign, integral, denominator)
    if fractional is not None or exponent is not None:
        return DecimalLiteral(
            sign,
            integral,
            fractional or "",
            _parse_exponent(text, exponent) if exponent is not None else 0,
        )
    return IntegerLiteral(sign, integral)


# ----------------------------
# Canonicaliser
# ----------------------------

def canonicalize(number: str) -> str:
    """Remove a leading '+' and leading zeros; zero is always "0".

    The input must be a non-empty digit string with an optional sign; this is
    not checked.
    """
    first = number[0]
    if first == "+" or first == "-":
        number = number[1:]

    number = number.lstrip("0")

    if number == "":
        return "0"
    if first == "-":
        return "-" + number
    return number


# ----------------------------
# Digit string <-> int (no length limit)
# ----------------------------

# int(str) and str(int) refuse more than 4300 digits by default
# (sys.get_int_max_str_digits); longer values are split and recombined.
_STR_CHUNK_DIGITS = 4000
_STR_CHUNK_LIMIT = 10 ** _STR_CHUNK_DIGITS


def _parse_unsigned(digits: str) -> int:
    if len(digits) <= _STR_CHUNK_DIGITS:
        return int(digits)
    half = len(digits) // 2
    return _parse_unsigned(digits[:-half]) * 10 ** half + _parse_unsigned(digits[-half:])


def parse_digits(text: str) -> int:
    """int(text) for a digit string with optional sign, of any length."""
    if len(text) <= _STR_CHUNK_DIGITS:
        return int(text)
    sign, digits = _split_sign(text)
    n = _parse_unsigned(digits)
    return -n if sign == "-" else n


def _format_unsigned(n: int) -> str:
    if n < _STR_CHUNK_LIMIT:
        return str(n)
    # bit_length * log10(2) slightly underestimates the digit count
    k = (n.bit_length() * 30103 // 100000) // 2
    high, low = divmod(n, 10 ** k)
    return _format_unsigned(high) + _format_unsigned(low).rjust(k, "0")


def format_digits(n: int) -> str:
    """str(n) for an int of any size."""
    if n < 0:
        return "-" + _format_unsigned(-n)
    return _format_unsigned(n)


__all__ = [
    "IntegerLiteral",
    "DecimalLiteral",
    "RationalLiteral",
    "NumberLiteral",
    "classify",
    "canonicalize",
    "parse_digits",
    "format_digits",
]
