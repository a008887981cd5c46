# Ratnum
# Copyright (c) 2024 Ratnum Contributors. All rights reserved.

"""
ratnum - Exact Rational Arithmetic.

This package provides Rational, an immutable numerator/denominator pair
that is always kept in lowest terms. Arithmetic on rationals is exact;
only the conversions to and from floating point can lose precision.

Example:
    >>> import ratnum as rn
    >>> a = rn.Rational(22, 12)
    >>> print(a)
    (Rational 11/6)
    >>> a * rn.Rational(12, 11)
    Rational(2, 1)
    >>> rn.Rational.from_double(0.25)
    Rational(1, 4)

Key Features:
    - Reduced form enforced by every constructor and operator
    - Mixed arithmetic with Python and numpy integers
    - Decimal-expansion reconstruction from float32 and float64 values
    - Interop with fractions.Fraction and the {'n', 'd'} JSON shape
"""

__version__ = "0.1.0"

# Core value type
from .rational import Rational

# Float reconstruction
from .floats import from_float, from_double

# Configuration
from .config import Config

# Exceptions
from .exceptions import (
    RationalError,
    ZeroDenominatorError,
    NonFiniteError,
    PrecisionLimitError,
    OutOfRangeError,
)

__all__ = [
    "__version__",
    # Core
    "Rational",
    "from_float",
    "from_double",
    # Config
    "Config",
    # Exceptions
    "RationalError",
    "ZeroDenominatorError",
    "NonFiniteError",
    "PrecisionLimitError",
    "OutOfRangeError",
]
