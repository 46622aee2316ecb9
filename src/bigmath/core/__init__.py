"""
bigmath Core
============

Unified exports for the parse-and-dispatch engine and the cross-kind
conversion/comparison protocol shared by BigInteger, BigDecimal and
BigRational. Every conversion is exact or raises RoundingNecessaryError.
Decimal/float bridges are provided *only* for I/O formatting.
"""

# NOTE:
#   Module dependency order is constants/exc/kinds -> literals -> numbers ->
#   factory -> ordering/fmt. `numbers` reaches `factory.of` lazily.

# Literal grammar and formatting constants
from .constants import (
    NUMBER_PATTERN,
    NUMBER_REGEX,
    MAX_EXPONENT_DIGITS,
    DEFAULT_DECIMAL_PRECISION,
    DEFAULT_FMT_PLACES,
)

# Kinds
from .kinds import NumericKind, Ordering

# Literal classification and canonicalisation
from .literals import (
    IntegerLiteral,
    DecimalLiteral,
    RationalLiteral,
    NumberLiteral,
    classify,
    canonicalize,
)

# Number primitives
from .numbers import (
    BigNumber,
    BigInteger,
    BigDecimal,
    BigRational,
)

# Entry point and converter
from .factory import of, construct, convert

# Comparison protocol
from .ordering import (
    compare,
    sign,
    is_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_zero,
    is_negative,
    is_negative_or_zero,
    is_positive,
    is_positive_or_zero,
    min_of,
    max_of,
    sorted_numbers,
)

# Bridges (non-core)
from .fmt import to_fraction, to_stdlib_decimal, to_float, fmt_sci

# Core exceptions
from .exc import (
    BigMathError,
    NumberFormatError,
    DivisionByZeroError,
    RoundingNecessaryError,
    InvalidArgumentError,
    InvariantViolation,
)

__all__ = [
    # constants
    "NUMBER_PATTERN",
    "NUMBER_REGEX",
    "MAX_EXPONENT_DIGITS",
    "DEFAULT_DECIMAL_PRECISION",
    "DEFAULT_FMT_PLACES",
    # kinds
    "NumericKind",
    "Ordering",
    # literals
    "IntegerLiteral",
    "DecimalLiteral",
    "RationalLiteral",
    "NumberLiteral",
    "classify",
    "canonicalize",
    # numbers
    "BigNumber",
    "BigInteger",
    "BigDecimal",
    "BigRational",
    # factory
    "of",
    "construct",
    "convert",
    # ordering
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
    # fmt
    "to_fraction",
    "to_stdlib_decimal",
    "to_float",
    "fmt_sci",
    # exceptions
    "BigMathError",
    "NumberFormatError",
    "DivisionByZeroError",
    "RoundingNecessaryError",
    "InvalidArgumentError",
    "InvariantViolation",
]
