"""
Core exception types for bigmath.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "BigMathError",
    "NumberFormatError",
    "DivisionByZeroError",
    "RoundingNecessaryError",
    "InvalidArgumentError",
    "InvariantViolation",
]


class BigMathError(Exception):
    """Common base for every error raised by bigmath."""
    pass


class NumberFormatError(BigMathError, ValueError):
    """Raised when a literal does not match the number grammar.

    Attributes
    ----------
    literal : Any
        The offending input, as received by the caller.
    """

    def __init__(self, literal, reason: str = "does not represent a valid number"):
        super().__init__(f"The given value {literal!r} {reason}.")
        self.literal = literal


class DivisionByZeroError(BigMathError, ZeroDivisionError):
    """Raised when a denominator or divisor is zero."""

    @classmethod
    def denominator_must_not_be_zero(cls) -> "DivisionByZeroError":
        return cls("The denominator of a rational number cannot be zero.")

    @classmethod
    def division_by_zero(cls) -> "DivisionByZeroError":
        return cls("Division by zero.")


class RoundingNecessaryError(BigMathError, ArithmeticError):
    """Raised when an exact result cannot be represented in the target kind.

    Attributes
    ----------
    value : Any
        The value (or operation result) that would have to be rounded.
    source_kind : NumericKind | None
        Kind of the value being converted.
    target_kind : NumericKind | None
        Kind the caller asked for.
    """

    def __init__(self, value, source_kind=None, target_kind=None, *, message=None):
        if message is None:
            src = source_kind.value if source_kind is not None else "number"
            dst = target_kind.value if target_kind is not None else "the requested kind"
            message = f"Rounding is necessary to represent {src} {value} as {dst}."
        super().__init__(message)
        self.value = value
        self.source_kind = source_kind
        self.target_kind = target_kind


class InvalidArgumentError(BigMathError, ValueError):
    """Raised when an operation receives arguments outside its contract.

    Attributes
    ----------
    operation : str
        Name of the operation that rejected its arguments.
    """

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation}() {message}")
        self.operation = operation


class InvariantViolation(BigMathError):
    """Raised when a trusted constructor receives fields that break invariants."""
    pass
