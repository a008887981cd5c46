# Ratnum - Rational Value Type
# Copyright (c) 2024 Ratnum Contributors. All rights reserved.

"""
Exact rational numbers kept in lowest terms.

Every path that produces a Rational goes through the normalizing
constructor, which divides numerator and denominator by their greatest
common divisor. Arithmetic therefore never accumulates rounding error:

    >>> from ratnum import Rational
    >>> Rational(22, 12)
    Rational(11, 6)
    >>> print(Rational(22, 12) * Rational(12, 11))
    (Rational 2/1)

Conversions to and from floating point are lossy and documented as such:

    >>> Rational.from_double(0.1)
    Rational(1, 10)
    >>> Rational(1, 4).to_float()
    np.float32(0.25)
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Union
import numbers
import operator

import numpy as np

from .config import Config
from .exceptions import ZeroDenominatorError


# Things that take part in mixed arithmetic with a Rational
RationalLike = Union['Rational', int]

# Type for the {'n': .., 'd': ..} JSON shape
RationalDict = dict[str, int]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (Python's // rounds down)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trunc_rem(a: int, b: int) -> int:
    """Remainder of truncating division; takes the sign of the dividend."""
    return a - b * _trunc_div(a, b)


def _gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by Euclidean reduction.

    Uses the truncating remainder, so intermediate values may be negative;
    the magnitude is returned so that dividing by it never flips a sign.
    gcd(0, b) is |b|, which makes 0/d reduce to 0/1 (or 0/-1).
    """
    while b != 0:
        a, b = b, _trunc_rem(a, b)
    return abs(a)


def _as_int(value: Any, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"Rational {name} must be an integer, got {type(value).__name__}"
        ) from None


def _coerce(value: Any) -> Optional[Rational]:
    """Promote an operand for mixed arithmetic; None if unsupported."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Integral):
        return Rational.from_int(value)
    return None


def _require(value: Any, operation: str) -> Rational:
    other = _coerce(value)
    if other is None:
        raise TypeError(
            f"unsupported operand for {operation}: 'Rational' and '{type(value).__name__}'"
        )
    return other


@dataclass(frozen=True, eq=False)
class Rational:
    """
    An exact fraction numerator/denominator in lowest terms.

    Rationals are immutable; arithmetic always returns a new instance.
    The sign of the denominator is kept as given: Rational(1, -2) has
    denominator -2 and is not structurally equal to Rational(-1, 2).
    """
    numerator: int
    denominator: int

    def __init__(self, numerator: int = 0, denominator: int = 1):
        """
        Create numerator/denominator reduced to lowest terms.

        Args:
            numerator: Integer numerator.
            denominator: Nonzero integer denominator.

        Raises:
            ZeroDenominatorError: If denominator is zero.
            TypeError: If either argument is not an integer.
        """
        n = _as_int(numerator, 'numerator')
        d = _as_int(denominator, 'denominator')
        if d == 0:
            raise ZeroDenominatorError(n)

        g = _gcd(n, d)
        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'numerator', n // g)
        object.__setattr__(self, 'denominator', d // g)

    @classmethod
    def _raw(cls, numerator: int, denominator: int) -> Rational:
        """Store the fields as given, without reduction."""
        obj = object.__new__(cls)
        object.__setattr__(obj, 'numerator', numerator)
        object.__setattr__(obj, 'denominator', denominator)
        return obj

    # Constructors

    @classmethod
    def new(cls, numerator: int, denominator: int) -> Rational:
        """Create numerator/denominator in lowest terms."""
        return cls(numerator, denominator)

    @classmethod
    def from_int(cls, value: int) -> Rational:
        """Create value/1. Exact."""
        return cls(value, 1)

    @classmethod
    def zero(cls) -> Rational:
        return cls(0, 1)

    @classmethod
    def one(cls) -> Rational:
        return cls(1, 1)

    @classmethod
    def from_float(cls, value: float, config: Config = Config()) -> Rational:
        """Reconstruct a single-precision value. Might incur a precision loss."""
        from .floats import from_float
        return from_float(value, config)

    @classmethod
    def from_double(cls, value: float, config: Config = Config()) -> Rational:
        """Reconstruct a double-precision value. Might incur a precision loss."""
        from .floats import from_double
        return from_double(value, config)

    @classmethod
    def from_fraction(cls, value: Fraction) -> Rational:
        """Create from a fractions.Fraction."""
        if not isinstance(value, Fraction):
            raise TypeError(f"Expected Fraction, got {type(value).__name__}")
        return cls(value.numerator, value.denominator)

    @classmethod
    def from_dict(cls, data: RationalDict) -> Rational:
        """Create from the {'n': numerator, 'd': denominator} JSON shape."""
        return cls(data['n'], data['d'])

    # Conversions

    def to_int(self) -> int:
        """Truncate toward zero. The fractional part is discarded."""
        return _trunc_div(self.numerator, self.denominator)

    def to_float(self) -> np.float32:
        """Single-precision quotient. Might incur a precision loss."""
        return np.float32(self.numerator / self.denominator)

    def to_double(self) -> float:
        """Double-precision quotient. Might incur a precision loss."""
        return self.numerator / self.denominator

    def to_fraction(self) -> Fraction:
        """Exact conversion to fractions.Fraction (denominator made positive)."""
        return Fraction(self.numerator, self.denominator)

    def to_dict(self) -> RationalDict:
        """Convert to {'n': numerator, 'd': denominator}."""
        return {'n': self.numerator, 'd': self.denominator}

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_double()

    def __bool__(self) -> bool:
        return self.numerator != 0

    # Arithmetic

    def add(self, other: RationalLike) -> Rational:
        """Sum of two rationals."""
        other = _require(other, '+')
        na, da = self.numerator, self.denominator
        nb, db = other.numerator, other.denominator
        return Rational(na * db + nb * da, da * db)

    def sub(self, other: RationalLike) -> Rational:
        """Difference of two rationals."""
        other = _require(other, '-')
        na, da = self.numerator, self.denominator
        nb, db = other.numerator, other.denominator
        return Rational(na * db - nb * da, da * db)

    def mul(self, other: RationalLike) -> Rational:
        """Product of two rationals."""
        other = _require(other, '*')
        return Rational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def div(self, other: RationalLike) -> Rational:
        """
        Quotient of two rationals.

        Raises:
            ZeroDenominatorError: If other is zero.
        """
        other = _require(other, '/')
        if other.numerator == 0:
            raise ZeroDenominatorError(self.numerator * other.denominator, 'div')
        return Rational(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def modulo(self, other: RationalLike) -> Rational:
        """
        Remainder of truncating division: self - trunc(self / other) * other.

        The quotient is rounded toward zero, so the result takes the sign
        of self (Rational(-7, 2) % 1 is -1/2, unlike Fraction's 1/2).

        Raises:
            ZeroDenominatorError: If other is zero.
        """
        other = _require(other, '%')
        na, da = self.numerator, self.denominator
        nb, db = other.numerator, other.denominator
        if nb == 0:
            raise ZeroDenominatorError(na * db, 'modulo')
        q = Rational.from_int(_trunc_div(na * db, nb * da))
        return self.sub(q.mul(other))

    def __add__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.sub(self)

    def __mul__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.mul(self)

    def __truediv__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.div(self)

    def __mod__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.modulo(other)

    def __rmod__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.modulo(self)

    def __neg__(self) -> Rational:
        # Already reduced
        return Rational._raw(-self.numerator, self.denominator)

    def __abs__(self) -> Rational:
        return Rational._raw(abs(self.numerator), abs(self.denominator))

    # Equality, hashing, ordering

    def equals(self, other: Rational) -> bool:
        """
        Structural equality of numerator and denominator.

        Only a value comparison when both sides are reduced, which the
        constructors guarantee.
        """
        return (self.numerator == other.numerator
                and self.denominator == other.denominator)

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Integer-valued rationals hash like the matching int
        if self.denominator == 1:
            return hash(self.numerator)
        return hash(float(self.to_float()))

    def _compare(self, other: Any, op) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return op(self.to_fraction(), other.to_fraction())

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    # Rendering

    def __str__(self) -> str:
        return f"(Rational {self.numerator}/{self.denominator})"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"
