# Ratnum - Configuration
# Copyright (c) 2024 Ratnum Contributors. All rights reserved.

"""Configuration settings for float-to-rational reconstruction."""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np


# Two machine epsilons relative: covers the rounding of the decimal literal
# plus the scaling multiply (at most about one eps of the product)
DEFAULT_DOUBLE_REL_TOL = 2 * float(np.finfo(np.float64).eps)

# Upper bound on the effective whole-number tolerance; must stay below 0.5 so
# that the nearest integer is unambiguous
MAX_WHOLE_TOL = 0.25


@dataclass
class Config:
    """
    Configuration for the decimal-expansion search.

    Attributes:
        max_scale_exponent: Largest power of ten tried as denominator.
                            The default of 18 keeps the scale inside a
                            signed 64-bit integer.
        double_rel_tol: Relative tolerance used by from_double when deciding
                        that a scaled value is a whole number. The
                        default is 2 * eps.
        double_abs_tol: Absolute tolerance for the same test. The
                        effective tolerance never exceeds MAX_WHOLE_TOL.
    """
    max_scale_exponent: int = 18
    double_rel_tol: float = DEFAULT_DOUBLE_REL_TOL
    double_abs_tol: float = 0.0

    def __post_init__(self):
        if self.max_scale_exponent < 0:
            raise ValueError(
                f"max_scale_exponent must be non-negative, got {self.max_scale_exponent}"
            )
        if self.double_rel_tol < 0 or self.double_abs_tol < 0:
            raise ValueError("Tolerances must be non-negative")
        if self.double_abs_tol > MAX_WHOLE_TOL:
            raise ValueError(
                f"double_abs_tol must be at most {MAX_WHOLE_TOL}, got {self.double_abs_tol}"
            )

    @classmethod
    def default(cls) -> Config:
        """Default configuration."""
        return cls()

    @classmethod
    def strict(cls) -> Config:
        """Require an exact whole number in double precision as well."""
        return cls(double_rel_tol=0.0, double_abs_tol=0.0)

    @classmethod
    def extended(cls) -> Config:
        """Allow denominators up to 10**30 (beyond 64-bit range)."""
        return cls(max_scale_exponent=30)

    @property
    def max_scale(self) -> int:
        """Largest denominator the search may reach."""
        return 10 ** self.max_scale_exponent

    def __repr__(self) -> str:
        return (
            f"Config(max_scale_exponent={self.max_scale_exponent}, "
            f"double_rel_tol={self.double_rel_tol}, "
            f"double_abs_tol={self.double_abs_tol})"
        )
