"""
Tests for approximate equality and IEEE division.

Validates:
    - approx_equal uses a strict absolute threshold of 1e-7
    - is_approx_zero is approx_equal against 0
    - Array variants agree with the scalar ones
    - NaN never compares equal
    - ieee_divide returns Inf/NaN and warns instead of raising
"""

import math
import warnings

import numpy as np
import pytest

from pylinalg.core.compute.precision import ieee_divide
from pylinalg.core.compute.tolerances import (
    EPSILON,
    KERNEL_ABSOLUTE,
    all_approx_equal,
    all_approx_zero,
    approx_equal,
    is_approx_zero,
)


class TestScalarTolerance:
    """approx_equal and is_approx_zero."""

    def test_epsilon_value(self):
        assert EPSILON == 1e-7
        assert KERNEL_ABSOLUTE.atol == EPSILON

    def test_identical(self):
        assert approx_equal(1.5, 1.5)

    def test_within_tolerance(self):
        assert approx_equal(1.0, 1.0 + 5e-8)

    def test_outside_tolerance(self):
        assert not approx_equal(1.0, 1.0 + 2e-7)

    def test_symmetric(self):
        assert approx_equal(2.0 + 5e-8, 2.0) == approx_equal(2.0, 2.0 + 5e-8)

    def test_absolute_not_relative(self):
        """Large magnitudes get no extra slack."""
        assert not approx_equal(1e10, 1e10 + 1.0)

    def test_zero(self):
        assert is_approx_zero(0.0)
        assert is_approx_zero(-0.0)
        assert is_approx_zero(5e-8)
        assert is_approx_zero(-5e-8)
        assert not is_approx_zero(1e-6)

    def test_nan_never_equal(self):
        assert not approx_equal(math.nan, math.nan)
        assert not is_approx_zero(math.nan)

    def test_returns_plain_bool(self):
        assert type(approx_equal(np.float64(1.0), np.float64(1.0))) is bool


class TestArrayTolerance:
    """all_approx_equal and all_approx_zero."""

    def test_all_equal(self):
        a = np.array([[1.0, 2.0], [3.0, 4.0]])
        assert all_approx_equal(a, a + 1e-8)

    def test_one_cell_differs(self):
        a = np.array([[1.0, 2.0], [3.0, 4.0]])
        b = a.copy()
        b[1, 1] += 1e-3
        assert not all_approx_equal(a, b)

    def test_last_column_compared(self):
        """Every column is compared, including the last."""
        a = np.zeros((3, 3))
        b = a.copy()
        b[2, 2] = 1.0
        assert not all_approx_equal(a, b)

    def test_shape_mismatch_raises(self):
        with pytest.raises(ValueError, match="shape mismatch"):
            all_approx_equal(np.zeros(2), np.zeros(3))

    def test_infinities_not_equal(self):
        a = np.array([np.inf])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert not all_approx_equal(a, a)

    def test_all_zero(self):
        assert all_approx_zero(np.array([0.0, 1e-9, -1e-9]))
        assert not all_approx_zero(np.array([0.0, 1e-3]))

    def test_empty_is_all_zero(self):
        assert all_approx_zero(np.array([]))


class TestIeeeDivide:
    """Division by zero follows IEEE-754 and warns."""

    def test_ordinary_division(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = ieee_divide(np.array([2.0, 4.0]), 2.0)
        np.testing.assert_array_equal(result, [1.0, 2.0])

    def test_divide_by_zero_gives_inf(self):
        with pytest.warns(RuntimeWarning, match="non-finite"):
            result = ieee_divide(np.array([1.0, -1.0]), 0.0)
        assert result[0] == np.inf
        assert result[1] == -np.inf

    def test_zero_by_zero_gives_nan(self):
        with pytest.warns(RuntimeWarning):
            result = ieee_divide(0.0, 0.0)
        assert np.isnan(result)

    def test_nan_input_no_warning(self):
        """Non-finite inputs propagate silently."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = ieee_divide(np.array([np.nan]), 2.0)
        assert np.isnan(result[0])
