"""
Matrix: fixed-size dense real matrix with value semantics.

Like Vector, every constructor copies and every operation returns a new
object; set() and item assignment are the only mutators. Rows and
columns come out as snapshot copies, never as views into the matrix.

Equality compares every (row, col) cell within the absolute tolerance.
Hashing uses the raw cells, so approximately-equal matrices can hash
differently.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.linalg.determinant import (
    DeterminantResult,
    determinant,
    is_lower_triangular,
    is_upper_triangular,
)
from pylinalg.core.compute.precision import ieee_divide
from pylinalg.core.compute.tolerances import all_approx_equal
from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import (
    check_array,
    check_index,
    check_instance,
    check_ndim,
    check_non_empty,
    check_positive_size,
    check_rectangular,
    check_same_shape,
    check_scalar,
)
from pylinalg.dense._common import format_entries, hash_buffer
from pylinalg.dense.vector import Vector


class Matrix:
    """
    Rectangular grid of float64 entries, indexed (row, col).

    Construction:
        Matrix([[1, 2], [3, 4]])                     explicit grid, must be rectangular
        Matrix.filled(num_rows, num_cols, value=0.0)  dimensions plus fill value
        Matrix.identity(size)                        square identity
        Matrix.from_array(array)                     any 2D array-like
        matrix.copy()                                copy of another matrix

    Examples:
        >>> Matrix([[1, 2], [3, 4]]).get_determinant()
        -2.0
        >>> Matrix([[1, 2], [3, 4]]).multiply_vector(Vector(1, 1))
        Vector(3.0, 7.0)
    """

    __slots__ = ('_data',)

    # NumPy defers to the reflected operators instead of treating this
    # object as an array-like.
    __array_ufunc__ = None

    def __init__(self, rows: Sequence[Sequence[float]]):
        check_rectangular(rows, 'rows')
        data = check_array(rows, 'rows')
        check_ndim(data, 2, 'rows')
        self._data = data

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def filled(cls, num_rows: int, num_cols: int, value: float = 0.0) -> Matrix:
        """num_rows x num_cols matrix with every entry equal to ``value``."""
        num_rows = check_positive_size(num_rows, 'num_rows')
        num_cols = check_positive_size(num_cols, 'num_cols')
        value = check_scalar(value, 'value')
        return cls._wrap(np.full((num_rows, num_cols), value, dtype=np.float64))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """size x size matrix with 1.0 on the diagonal and 0.0 elsewhere."""
        size = check_positive_size(size, 'size')
        return cls._wrap(np.eye(size, dtype=np.float64))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Matrix from any 2D array-like. The input is copied."""
        data = check_array(array, 'array')
        check_ndim(data, 2, 'array')
        check_non_empty(data, 'array')
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt an already-owned float64 buffer without copying."""
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    def copy(self) -> Matrix:
        """Independent copy of this matrix."""
        return Matrix._wrap(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    # ------------------------------------------------------------------
    # Calculations
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum. Shapes must match."""
        check_instance(other, Matrix, 'other')
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        """Element-wise difference. Shapes must match."""
        check_instance(other, Matrix, 'other')
        check_same_shape(self.shape, other.shape, 'subtract')
        return Matrix._wrap(self._data - other._data)

    def multiply_by_scalar(self, scalar: float) -> Matrix:
        """Every entry multiplied by ``scalar``."""
        scalar = check_scalar(scalar, 'scalar')
        return Matrix._wrap(self._data * scalar)

    def divide_by_scalar(self, scalar: float) -> Matrix:
        """Every entry divided by ``scalar``; zero gives Inf/NaN and a RuntimeWarning."""
        return self._divided(scalar, stacklevel=3)

    def multiply_matrix(self, other: Matrix) -> Matrix:
        """
        Matrix product with this matrix on the left.

        Entry (r, c) of the result is sum_i self[r, i] * other[i, c].

        Raises:
            DimensionError: If self.num_cols != other.num_rows
        """
        check_instance(other, Matrix, 'other')
        if self.num_cols != other.num_rows:
            raise DimensionError(
                f"This matrix's number of columns must equal the other matrix's "
                f"number of rows: {self.num_rows}x{self.num_cols} and "
                f"{other.num_rows}x{other.num_cols}"
            )
        return Matrix._wrap(self._data @ other._data)

    def multiply_vector(self, vector: Vector) -> Vector:
        """
        Matrix times column vector.

        Entry r of the result is sum_i self[r, i] * vector[i]. This is not
        the same operation as Vector.multiply_matrix, which multiplies on
        the other side.

        Raises:
            DimensionError: If self.num_cols != vector.size
        """
        check_instance(vector, Vector, 'vector')
        if self.num_cols != vector.size:
            raise DimensionError(
                f"This matrix's number of columns must equal the vector's size: "
                f"{self.num_rows}x{self.num_cols} and size {vector.size}"
            )
        return Vector._wrap(self._data @ vector._data)

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set(self, row: int, col: int, value: float) -> None:
        """Set the entry at (row, col). Bounds-checked."""
        row = check_index(row, self.num_rows, 'row')
        col = check_index(col, self.num_cols, 'col')
        self._data[row, col] = check_scalar(value, 'value')

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._split_key(key)
        self.set(row, col, value)

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    def get_transposed(self) -> Matrix:
        """New num_cols x num_rows matrix with entry (c, r) = self[r, c]."""
        return Matrix._wrap(self._data.T.copy())

    def get_determinant(self) -> float:
        """
        Determinant of a square matrix.

        See pylinalg.core.compute.linalg.determinant for the algorithm.

        Raises:
            DimensionError: If the matrix is not square
        """
        return self.determinant_result().value

    def determinant_result(self) -> DeterminantResult:
        """Determinant together with the path taken and cofactor term counts."""
        return determinant(self._data)

    def is_upper_triangular(self) -> bool:
        """False if not square; else True iff every entry below the diagonal is zero."""
        return is_upper_triangular(self._data)

    def is_lower_triangular(self) -> bool:
        """False if not square; else True iff every entry above the diagonal is zero."""
        return is_lower_triangular(self._data)

    def get(self, row: int, col: int) -> float:
        """Entry at (row, col). Bounds-checked."""
        row = check_index(row, self.num_rows, 'row')
        col = check_index(col, self.num_cols, 'col')
        return float(self._data[row, col])

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._split_key(key)
        return self.get(row, col)

    def get_row(self, row: int) -> NDArray[np.float64]:
        """Copy of one row as a 1D array."""
        row = check_index(row, self.num_rows, 'row')
        return self._data[row, :].copy()

    def get_col(self, col: int) -> NDArray[np.float64]:
        """Copy of one column as a 1D array."""
        col = check_index(col, self.num_cols, 'col')
        return self._data[:, col].copy()

    def get_row_as_vector(self, row: int) -> Vector:
        """Copy of one row as a Vector."""
        return Vector._wrap(self.get_row(row))

    def get_col_as_vector(self, col: int) -> Vector:
        """Copy of one column as a Vector."""
        return Vector._wrap(self.get_col(col))

    @property
    def num_rows(self) -> int:
        """Number of rows."""
        return int(self._data.shape[0])

    @property
    def num_cols(self) -> int:
        """Number of columns."""
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        """(num_rows, num_cols)"""
        return (self.num_rows, self.num_cols)

    def is_same_size(self, other: Matrix) -> bool:
        """True iff both matrices have the same number of rows and columns."""
        check_instance(other, Matrix, 'other')
        return self.shape == other.shape

    def is_square(self) -> bool:
        """True iff num_rows == num_cols."""
        return self.num_rows == self.num_cols

    def to_array(self) -> NDArray[np.float64]:
        """Snapshot of the entries as a new 2D array."""
        return self._data.copy()

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: Any) -> Matrix:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float, np.number)):
            return NotImplemented
        return self.multiply_by_scalar(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Any) -> Matrix:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float, np.number)):
            return NotImplemented
        return self._divided(scalar, stacklevel=3)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self.multiply_matrix(other)
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Comparison, hashing, display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all_approx_equal(self._data, other._data)

    def __hash__(self) -> int:
        return hash_buffer(self._data)

    def __str__(self) -> str:
        return "\n".join(f"[{format_entries(row)}]" for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _divided(self, scalar: Any, stacklevel: int) -> Matrix:
        # stacklevel is relative to this helper, as in warnings.warn
        scalar = check_scalar(scalar, 'scalar')
        return Matrix._wrap(ieee_divide(self._data, scalar, stacklevel=stacklevel + 1))

    @staticmethod
    def _split_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"Matrix indices must be a (row, col) pair, got {key!r}"
            )
        return key[0], key[1]


def identity_matrix(size: int) -> Matrix:
    """size x size identity matrix."""
    return Matrix.identity(size)
