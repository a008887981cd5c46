# Ratnum - Exceptions
# Copyright (c) 2024 Ratnum Contributors. All rights reserved.

"""Exception hierarchy for ratnum."""

from __future__ import annotations
from typing import Optional


class RationalError(Exception):
    """Base class for all ratnum exceptions."""
    pass


class ZeroDenominatorError(RationalError, ZeroDivisionError):
    """Raised when a rational would be built with a zero denominator."""

    def __init__(self, numerator: Optional[int] = None, operation: Optional[str] = None):
        if numerator is None:
            message = "Rational denominator cannot be zero"
        else:
            message = f"Rational denominator cannot be zero: {numerator}/0"
        if operation:
            message += f" (in {operation})"
        super().__init__(message)
        self.numerator = numerator
        self.operation = operation


class NonFiniteError(RationalError, ValueError):
    """Raised when NaN or an infinity is converted to a rational."""

    def __init__(self, value: float):
        super().__init__(f"Cannot convert non-finite value {value!r} to Rational")
        self.value = value


class PrecisionLimitError(RationalError):
    """
    Raised when the decimal-expansion search gives up.

    The search multiplies the input by successive powers of ten until the
    product is a whole number. Values with more significant decimal digits
    than the configured limit allows (very small magnitudes in particular)
    cannot be reconstructed.
    """

    def __init__(self, value: float, max_scale_exponent: int):
        message = (
            f"Cannot reconstruct {value!r} as a fraction with denominator "
            f"at most 10**{max_scale_exponent}"
        )
        message += "\n  Suggestion: use Config.extended() or a larger max_scale_exponent."
        super().__init__(message)
        self.value = value
        self.max_scale_exponent = max_scale_exponent


class OutOfRangeError(RationalError, OverflowError):
    """Raised when a finite value does not fit the requested float precision."""

    def __init__(self, value: float, limit: float, precision: str = "single"):
        super().__init__(
            f"Value {value!r} is out of {precision}-precision range (|x| <= {limit!r})"
        )
        self.value = value
        self.limit = limit
        self.precision = precision
