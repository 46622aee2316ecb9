"""
bigmath Core Constants
======================

The literal grammar shared by every numeric kind, plus the few knobs used by
the formatting bridges in `fmt.py`.
"""

# NOTE: The grammar only accepts ASCII digits; `\d` would also match other
#       Unicode decimal digits, which the canonicaliser does not handle.

import re

# ---------------------------------------------------------------------------
# Literal grammar
# ---------------------------------------------------------------------------

#: integral   := sign? digit+
#: fractional := integral ('.' digit+)? (('e'|'E') sign? digit+)?
#: rational   := integral ('/' digit+)?
#: A literal carries either the fractional/exponent suffix or the denominator
#: suffix, never both.
NUMBER_PATTERN: str = (
    r"(?P<integral>[-+]?[0-9]+)"
    r"(?:"
    r"(?:"
    r"(?:\.(?P<fractional>[0-9]+))?"
    r"(?:[eE](?P<exponent>[-+]?[0-9]+))?"
    r")"
    r"|"
    r"(?:/(?P<denominator>[0-9]+))?"
    r")?"
)

#: Compiled grammar; always applied with `fullmatch`.
NUMBER_REGEX = re.compile(NUMBER_PATTERN)

#: Longest accepted exponent, leading zeros excluded. Anything wider cannot be
#: materialised as digits and is rejected as a format error.
MAX_EXPONENT_DIGITS: int = 18


# ---------------------------------------------------------------------------
# Formatting bridges (I/O only)
# ---------------------------------------------------------------------------

#: Precision (significant digits) of the decimal context used when bridging
#: to `decimal.Decimal` for display. Core values never go through it.
DEFAULT_DECIMAL_PRECISION: int = 28

#: Fractional digits used by `fmt_sci`.
DEFAULT_FMT_PLACES: int = 18


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "NUMBER_PATTERN",
    "NUMBER_REGEX",
    "MAX_EXPONENT_DIGITS",
    "DEFAULT_DECIMAL_PRECISION",
    "DEFAULT_FMT_PLACES",
]
