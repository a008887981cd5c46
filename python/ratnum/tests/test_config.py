# Ratnum - Configuration Tests
# Copyright (c) 2024 Ratnum Contributors. All rights reserved.

"""
Tests for the configuration module: defaults, presets and validation.
"""

import pytest

import numpy as np

from ratnum.config import Config, DEFAULT_DOUBLE_REL_TOL, MAX_WHOLE_TOL


class TestConfigDefaults:
    """Tests for default Config values."""

    def test_default_values(self):
        """Test default configuration values."""
        cfg = Config()
        assert cfg.max_scale_exponent == 18
        assert cfg.double_rel_tol == DEFAULT_DOUBLE_REL_TOL
        assert cfg.double_abs_tol == 0.0

    def test_default_tolerance_is_two_eps(self):
        """The relative tolerance is two double epsilons."""
        assert DEFAULT_DOUBLE_REL_TOL == 2 * np.finfo(np.float64).eps

    def test_default_tolerance_small_at_large_magnitude(self):
        """A scaled value near 1e8 may only differ from a whole number by rounding noise."""
        assert DEFAULT_DOUBLE_REL_TOL * 1e8 < 1e-7
        assert MAX_WHOLE_TOL < 0.5

    def test_max_scale(self):
        """Test the max_scale property."""
        assert Config().max_scale == 10**18
        assert Config(max_scale_exponent=0).max_scale == 1

    def test_max_scale_fits_int64(self):
        """The default scale stays inside a signed 64-bit integer."""
        assert Config().max_scale <= np.iinfo(np.int64).max


class TestConfigPresets:
    """Tests for Config factory methods."""

    def test_default_preset(self):
        assert Config.default() == Config()

    def test_strict_preset(self):
        cfg = Config.strict()
        assert cfg.double_rel_tol == 0.0
        assert cfg.double_abs_tol == 0.0
        assert cfg.max_scale_exponent == 18

    def test_extended_preset(self):
        cfg = Config.extended()
        assert cfg.max_scale_exponent == 30
        assert cfg.max_scale == 10**30


class TestConfigValidation:
    """Tests for __post_init__ validation."""

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError, match="max_scale_exponent"):
            Config(max_scale_exponent=-1)

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValueError, match="Tolerances"):
            Config(double_rel_tol=-1e-9)
        with pytest.raises(ValueError, match="Tolerances"):
            Config(double_abs_tol=-1.0)

    def test_abs_tolerance_capped(self):
        with pytest.raises(ValueError, match="double_abs_tol must be at most"):
            Config(double_abs_tol=0.5)
        assert Config(double_abs_tol=MAX_WHOLE_TOL).double_abs_tol == MAX_WHOLE_TOL

    def test_repr(self):
        text = repr(Config(max_scale_exponent=5))
        assert "max_scale_exponent=5" in text
        assert "double_rel_tol" in text
