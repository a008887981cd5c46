# Tests for exceptions.py - Exception hierarchy

import pytest

from ratnum import (
    Rational,
    RationalError,
    ZeroDenominatorError,
    NonFiniteError,
    PrecisionLimitError,
    OutOfRangeError,
)


class TestHierarchy:
    """All ratnum errors share a base class and match the builtin they refine."""

    def test_zero_denominator_is_zero_division(self):
        assert issubclass(ZeroDenominatorError, RationalError)
        assert issubclass(ZeroDenominatorError, ZeroDivisionError)

    def test_non_finite_is_value_error(self):
        assert issubclass(NonFiniteError, RationalError)
        assert issubclass(NonFiniteError, ValueError)

    def test_precision_limit(self):
        assert issubclass(PrecisionLimitError, RationalError)

    def test_out_of_range_is_overflow_error(self):
        assert issubclass(OutOfRangeError, RationalError)
        assert issubclass(OutOfRangeError, OverflowError)

    def test_catch_base_class(self):
        with pytest.raises(RationalError):
            Rational(1, 0)


class TestMessages:
    """Error messages and context attributes."""

    def test_zero_denominator_message(self):
        err = ZeroDenominatorError(6)
        assert str(err) == "Rational denominator cannot be zero: 6/0"
        assert err.numerator == 6
        assert err.operation is None

    def test_zero_denominator_without_numerator(self):
        assert str(ZeroDenominatorError()) == "Rational denominator cannot be zero"

    def test_zero_denominator_operation(self):
        err = ZeroDenominatorError(3, 'div')
        assert str(err).endswith("(in div)")
        assert err.operation == 'div'

    def test_raised_error_carries_numerator(self):
        with pytest.raises(ZeroDenominatorError) as exc_info:
            Rational(6, 0)
        assert exc_info.value.numerator == 6

    def test_non_finite_message(self):
        err = NonFiniteError(float('inf'))
        assert "inf" in str(err)
        assert err.value == float('inf')

    def test_precision_limit_suggestion(self):
        err = PrecisionLimitError(1e-30, 18)
        assert "10**18" in str(err)
        assert "Suggestion" in str(err)
        assert err.max_scale_exponent == 18

    def test_out_of_range_message(self):
        err = OutOfRangeError(1e39, 3.4e38)
        assert "single-precision range" in str(err)
        assert "non-finite" not in str(err)
        assert err.value == 1e39
        assert err.precision == "single"

    def test_out_of_range_double(self):
        err = OutOfRangeError(10**400, 1.8e308, "double")
        assert "double-precision range" in str(err)
