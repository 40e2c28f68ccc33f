"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_not_none / check_instance: missing and mistyped operands
    - check_scalar / check_positive_size / check_index: scalar arguments
    - check_rectangular: ragged and empty grids
    - check_array / check_ndim / check_non_empty: array conversion
    - check_same_size / check_same_shape / check_square: shape agreement
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from pylinalg.core.validation import (
    check_array,
    check_index,
    check_instance,
    check_ndim,
    check_non_empty,
    check_not_none,
    check_positive_size,
    check_rectangular,
    check_same_shape,
    check_same_size,
    check_scalar,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# Operands
# ═══════════════════════════════════════════════════════════════════════


class TestOperands:
    """Missing or mistyped operands are rejected with the parameter name."""

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="other"):
            check_not_none(None, "other")

    def test_value_passes(self):
        check_not_none(0.0, "other")  # no exception

    def test_instance_passes(self):
        check_instance(1.5, float, "x")

    def test_instance_none_rejected(self):
        with pytest.raises(ValidationError, match="got None"):
            check_instance(None, float, "x")

    def test_instance_wrong_type_rejected(self):
        with pytest.raises(ValidationError, match="expected float, got str"):
            check_instance("1.5", float, "x")


# ═══════════════════════════════════════════════════════════════════════
# Scalars and indices
# ═══════════════════════════════════════════════════════════════════════


class TestScalars:
    """check_scalar / check_positive_size / check_index."""

    def test_scalar_int_converted(self):
        result = check_scalar(3, "k")
        assert result == 3.0
        assert isinstance(result, float)

    def test_scalar_numpy_float_accepted(self):
        assert check_scalar(np.float32(2.5), "k") == 2.5

    def test_scalar_bool_rejected(self):
        with pytest.raises(ValidationError, match="real number"):
            check_scalar(True, "k")

    def test_scalar_string_rejected(self):
        with pytest.raises(ValidationError, match="k"):
            check_scalar("2", "k")

    def test_scalar_complex_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(1 + 2j, "k")

    def test_positive_size(self):
        assert check_positive_size(3, "size") == 3

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError, match="greater than 0, got 0"):
            check_positive_size(0, "size")

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError, match="size"):
            check_positive_size(-2, "size")

    def test_float_size_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            check_positive_size(2.0, "size")

    def test_index_in_range(self):
        assert check_index(2, 3, "index") == 2

    def test_index_numpy_int_accepted(self):
        assert check_index(np.int64(0), 3, "index") == 0

    def test_index_at_bound_rejected(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(3, 3, "index")
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == "index"

    def test_negative_index_rejected(self):
        """No Python-style wrap-around."""
        with pytest.raises(IndexOutOfRangeError, match="-1"):
            check_index(-1, 3, "row")

    def test_non_integer_index_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            check_index(1.0, 3, "col")


# ═══════════════════════════════════════════════════════════════════════
# check_rectangular
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:
    """Raw grids must be non-empty and rectangular."""

    def test_rectangular_passes(self):
        check_rectangular([[1, 2], [3, 4], [5, 6]], "rows")

    def test_single_cell_passes(self):
        check_rectangular([[7]], "rows")

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError, match=r"non-rectangular.*\[2, 1\]"):
            check_rectangular([[1, 2], [3]], "rows")

    def test_ragged_is_validation_error(self):
        with pytest.raises(ValidationError):
            check_rectangular([[1], [2, 3]], "rows")

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="got None"):
            check_rectangular(None, "rows")

    def test_no_rows_rejected(self):
        with pytest.raises(ValidationError, match="at least one row"):
            check_rectangular([], "rows")

    def test_empty_rows_rejected(self):
        with pytest.raises(ValidationError, match="at least one column"):
            check_rectangular([[], []], "rows")

    def test_flat_list_rejected(self):
        with pytest.raises(ValidationError, match="row 0"):
            check_rectangular([1, 2, 3], "rows")

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="sequence of rows"):
            check_rectangular("12", "rows")

    def test_2d_ndarray_passes(self):
        check_rectangular(np.zeros((2, 3)), "rows")

    def test_1d_ndarray_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_rectangular(np.zeros(3), "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to an owned float64 array."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_always_copies(self):
        source = np.array([1.0, 2.0])
        result = check_array(source, "X")
        result[0] = 99.0
        assert source[0] == 1.0

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_bools(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 1j], "X")

    def test_rejects_none(self):
        with pytest.raises(ValidationError, match="X"):
            check_array(None, "X")

    def test_ndim(self):
        check_ndim(np.zeros((2, 2)), 2, "X")
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_ndim(np.zeros((2, 2)), 1, "X")

    def test_non_empty(self):
        check_non_empty(np.zeros(1), "X")
        with pytest.raises(ValidationError, match="shape \\(0,\\)"):
            check_non_empty(np.zeros(0), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape agreement
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:
    """Size and shape mismatches raise DimensionError naming the operation."""

    def test_same_size_passes(self):
        check_same_size(3, 3, "add")

    def test_size_mismatch(self):
        with pytest.raises(DimensionError, match="Cannot add vectors of different sizes: 2 and 3"):
            check_same_size(2, 3, "add")

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError, match="2x3 and 3x2"):
            check_same_shape((2, 3), (3, 2), "subtract")

    def test_square_passes(self):
        check_square((4, 4), "get determinant")

    def test_non_square(self):
        with pytest.raises(DimensionError, match="non-square matrix \\(2x3\\)"):
            check_square((2, 3), "get determinant")
