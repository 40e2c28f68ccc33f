"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on numeric array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)


def check_not_none(value: Any, name: str) -> None:
    """
    Verify a required operand was supplied.

    Raises:
        ValidationError: If value is None
    """
    if value is None:
        raise ValidationError(f"{name}: required, got None")


def check_instance(value: Any, cls: type, name: str) -> None:
    """
    Verify an operand is present and of the expected type.

    Raises:
        ValidationError: If value is None or not an instance of cls
    """
    check_not_none(value, name)
    if not isinstance(value, cls):
        raise ValidationError(
            f"{name}: expected {cls.__name__}, got {type(value).__name__}"
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar and convert it to float.

    bool is rejected even though it is an int subclass.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_positive_size(value: Any, name: str) -> int:
    """
    Validate a size or dimension: an integer >= 1.

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be greater than 0, got {value}")
    return int(value)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Validate a zero-based index against an exclusive upper bound.

    Negative indices are out of range; there is no wrap-around.

    Args:
        index: Index to check
        bound: Exclusive upper bound (size, number of rows or columns)
        name: Axis name for error messages ('index', 'row', 'col')

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is not in [0, bound)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(index).__name__}"
        )
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{name} {index} is out of bounds for size {bound}",
            index=int(index),
            bound=bound,
            axis=name,
        )
    return int(index)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a raw grid is a non-empty sequence of equal-length, non-empty rows.

    Checked before any numpy conversion so a ragged grid is reported as
    such instead of as a conversion failure.

    Raises:
        ValidationError: If rows is None, empty, or a row is empty
        DimensionError: If rows have different lengths
    """
    check_not_none(rows, name)
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise DimensionError(
                f"{name}: expected 2D array, got {rows.ndim}D with shape {rows.shape}"
            )
        if rows.shape[0] < 1 or rows.shape[1] < 1:
            raise ValidationError(f"{name}: must have at least one row and one column, got shape {rows.shape}")
        return

    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        )
    if len(rows) == 0:
        raise ValidationError(f"{name}: must have at least one row")

    lengths = []
    for r, row in enumerate(rows):
        if row is None or isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
            raise ValidationError(
                f"{name}: row {r} is not a sequence ({type(row).__name__})"
            )
        lengths.append(len(row))

    if lengths[0] == 0:
        raise ValidationError(f"{name}: rows must have at least one column")
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: non-rectangular grid, row lengths {lengths}"
        )


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate input and convert it to an owned float64 numpy array.

    Always copies, so the caller's buffer is never aliased.

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    check_not_none(array, name)
    try:
        raw = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if raw.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if raw.dtype == np.bool_ or not np.issubdtype(raw.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {raw.dtype}, expected numeric data"
        )
    if np.issubdtype(raw.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(raw, dtype=np.float64, copy=True)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_non_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every axis of the array has at least one element.

    Raises:
        ValidationError: If any dimension is zero
    """
    if array.size == 0:
        raise ValidationError(
            f"{name}: must have at least one element along every axis, got shape {array.shape}"
        )


def check_same_size(a: int, b: int, operation: str) -> None:
    """
    Verify two vector sizes match.

    Raises:
        DimensionError: If sizes differ
    """
    if a != b:
        raise DimensionError(
            f"Cannot {operation} vectors of different sizes: {a} and {b}"
        )


def check_same_shape(
    a: tuple[int, int],
    b: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrix shapes match.

    Raises:
        DimensionError: If shapes differ
    """
    if a != b:
        raise DimensionError(
            f"Cannot {operation} matrices of different sizes: "
            f"{a[0]}x{a[1]} and {b[0]}x{b[1]}"
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        DimensionError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise DimensionError(
            f"Cannot {operation} of non-square matrix ({shape[0]}x{shape[1]})"
        )
