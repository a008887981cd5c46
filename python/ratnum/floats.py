# Ratnum - Float Reconstruction
# Copyright (c) 2024 Ratnum Contributors. All rights reserved.

"""
Reconstruct exact fractions from floating-point values.

Fraction(0.1) gives the exact binary value of the double, which is rarely
what the caller wrote down:

    >>> from fractions import Fraction
    >>> Fraction(0.1)
    Fraction(3602879701896397, 36028797018963968)

The functions here instead search for the number of decimal digits of the
value, multiplying by 10, 100, 1000, ... until the product is a whole
number:

    >>> from_double(0.1)
    Rational(1, 10)
    >>> from_float(0.25)
    Rational(1, 4)

from_float works in single precision and requires the scaled value to be
exactly whole. from_double works in double precision, where scaling rarely
lands on an exact integer, and accepts a value within the configured
tolerance of the nearest integer. Both might incur a precision loss.
"""

from __future__ import annotations
import logging
import math
import numbers

import numpy as np

from .config import Config, MAX_WHOLE_TOL
from .exceptions import NonFiniteError, OutOfRangeError, PrecisionLimitError
from .rational import Rational, _gcd


logger = logging.getLogger(__name__)


FLOAT32_MAX = float(np.finfo(np.float32).max)
FLOAT64_MAX = float(np.finfo(np.float64).max)

# Largest k for which 10**k is finite in each precision
FLOAT32_MAX_SCALE_EXPONENT = int(np.log10(FLOAT32_MAX))
FLOAT64_MAX_SCALE_EXPONENT = int(np.log10(FLOAT64_MAX))


def _check_real(value) -> None:
    # np.float32("0.5") would parse text
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")


def _to_double(value, limit: float, precision: str) -> float:
    try:
        f = float(value)
    except OverflowError:
        raise OutOfRangeError(value, limit, precision) from None
    if not math.isfinite(f):
        raise NonFiniteError(value)
    if abs(f) > limit:
        raise OutOfRangeError(value, limit, precision)
    return f


def _reduce(value, numerator: int, scale: int, exponent: int) -> Rational:
    k = _gcd(numerator, scale)
    result = Rational(numerator // k, scale // k)
    logger.debug("Reconstructed %r as %r (scale 10**%d)", value, result, exponent)
    return result


def from_float(value: float, config: Config = Config()) -> Rational:
    """
    Convert a single-precision value to a Rational.

    The value is first rounded to numpy.float32. The search stops at the
    first power of ten whose product with the value is exactly a whole
    number in single precision.

    Args:
        value: A real number (float, int, or numpy floating scalar).
        config: Search limits. Scales beyond 10**38 are not representable
                in single precision, so larger max_scale_exponent values
                are capped there.

    Returns:
        The reduced Rational.

    Raises:
        NonFiniteError: If value is NaN or infinite.
        OutOfRangeError: If value is finite but beyond the float32 range.
        PrecisionLimitError: If no scale up to the limit works (e.g. 1e-30).

    Examples:
        >>> from_float(0.5)
        Rational(1, 2)
        >>> from_float(-1.5)
        Rational(-3, 2)
    """
    _check_real(value)
    f = np.float32(_to_double(value, FLOAT32_MAX, "single"))
    limit = min(config.max_scale_exponent, FLOAT32_MAX_SCALE_EXPONENT)

    scale = 1
    exponent = 0
    scaled = f
    while scaled != np.trunc(scaled):
        if exponent >= limit:
            raise PrecisionLimitError(value, limit)
        scale *= 10
        exponent += 1
        scaled = f * np.float32(scale)

    return _reduce(value, int(np.trunc(scaled)), scale, exponent)


def _is_whole(x: float, config: Config) -> bool:
    tol = max(config.double_rel_tol * abs(x), config.double_abs_tol)
    return abs(x - round(x)) <= min(tol, MAX_WHOLE_TOL)


def from_double(value: float, config: Config = Config()) -> Rational:
    """
    Convert a double-precision value to a Rational.

    The search stops at the first power of ten whose product with the
    value lies within config.double_rel_tol (relative) or
    config.double_abs_tol (absolute) of the nearest integer, which then
    becomes the numerator. The tolerance is capped at MAX_WHOLE_TOL, so
    a genuine fractional digit is never mistaken for rounding noise:
    2.01 * 100 evaluates to 200.99999999999997 and yields 201/100.

    Args:
        value: A real number (float, int, or numpy floating scalar).
        config: Search limits and tolerances. Scales beyond 10**308 are
                capped there.

    Returns:
        The reduced Rational.

    Raises:
        NonFiniteError: If value is NaN or infinite.
        OutOfRangeError: If value does not fit in a double.
        PrecisionLimitError: If no scale up to the limit works.

    Examples:
        >>> from_double(0.1)
        Rational(1, 10)
        >>> from_double(3.14159)
        Rational(314159, 100000)
    """
    _check_real(value)
    f = _to_double(value, FLOAT64_MAX, "double")
    limit = min(config.max_scale_exponent, FLOAT64_MAX_SCALE_EXPONENT)

    scale = 1
    exponent = 0
    scaled = f
    while not _is_whole(scaled, config):
        if exponent >= limit:
            raise PrecisionLimitError(value, limit)
        scale *= 10
        exponent += 1
        scaled = f * scale

    return _reduce(value, round(scaled), scale, exponent)
