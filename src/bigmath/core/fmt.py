"""
Bridges to the standard numeric types and formatting helpers (non-core).

Core values never pass through `decimal.Decimal` or `float`. These helpers
exist for I/O, logs and tests only; `to_float` is the one explicitly lossy
bridge.
"""

from decimal import Decimal, localcontext
from fractions import Fraction

from .constants import DEFAULT_DECIMAL_PRECISION, DEFAULT_FMT_PLACES
from .factory import of
from .kinds import NumericKind

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str, *args) -> None:
    if DEBUG_FMT:
        print(msg % args if args else msg)


# ---------------------------------------------------------------------------
# Exact bridges
# ---------------------------------------------------------------------------

def to_fraction(x) -> Fraction:
    """Exact `fractions.Fraction` of any number or literal."""
    n, d = of(x).as_fraction_parts()
    return Fraction(n, d)


def to_stdlib_decimal(x) -> Decimal:
    """Exact `decimal.Decimal` of any number or literal, keeping the scale.

    Raises RoundingNecessaryError for rationals with a non-terminating
    decimal expansion (e.g. 1/3).
    """
    d = of(x, NumericKind.DECIMAL)
    # Tuple construction is exact; arithmetic would round to the context.
    sign, digits, _ = Decimal(d.unscaled).as_tuple()
    _dbg("to_stdlib_decimal: %r", d)
    return Decimal((sign, digits, -d.scale))


# ---------------------------------------------------------------------------
# Lossy / display helpers
# ---------------------------------------------------------------------------

def to_float(x) -> float:
    """Nearest float (correctly rounded); display only."""
    n, d = of(x).as_fraction_parts()
    return n / d


def fmt_sci(x, places: int = DEFAULT_FMT_PLACES) -> str:
    """Format in scientific notation with fixed fractional digits.

    The output is stable for logs and tests, e.g.:
      "1"        -> '1.000000000000000000E+0'
      "1e-9"     -> '1.000000000000000000E-9'
      "123456"   -> '1.234560000000000000E+5'
      "1/3"      -> '3.333333333333333333E-1'
    """
    n, d = of(x).as_fraction_parts()
    if n == 0:
        mantissa = "0" if places == 0 else "0." + "0" * places
        return f"{mantissa}E+0"
    with localcontext() as ctx:
        ctx.prec = max(DEFAULT_DECIMAL_PRECISION, places + 2)
        value = Decimal(n) / Decimal(d)
        _dbg("fmt_sci: %s -> %s", x, value)
        return format(value, f".{places}E")


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "DEFAULT_FMT_PLACES",
    "to_fraction",
    "to_stdlib_decimal",
    "to_float",
    "fmt_sci",
]
