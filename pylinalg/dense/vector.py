"""
Vector: fixed-length real vector with value semantics.

Every constructor copies its input and every operation returns a new
Vector, so mutating a result never touches an operand. The only
mutators are set() and item assignment, which change the receiver.

Equality is approximate (see pylinalg.core.compute.tolerances). Hashing
uses the raw coordinates, so two vectors that compare equal within
tolerance can hash differently; do not rely on tolerance when using
vectors as dict or set keys.
"""

from __future__ import annotations

import math
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

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
    check_same_size,
    check_scalar,
)
from pylinalg.dense._common import format_entries, hash_buffer

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix


class Vector:
    """
    Ordered, fixed-length sequence of float64 coordinates.

    Construction:
        Vector(1.0, 2.0, 3.0)           explicit coordinates
        Vector.filled(size, value=0.0)  size plus fill value
        Vector.from_array(values)       any 1D array-like
        vector.copy()                   copy of another vector

    Examples:
        >>> Vector(1, 0, 0).angle_degrees(Vector(0, 1, 0))
        90.0
        >>> str(Vector(1, 2).add(Vector(3, 4)))
        '<4.00, 6.00>'
    """

    __slots__ = ('_data',)

    # NumPy defers to the reflected operators instead of treating this
    # object as an array-like.
    __array_ufunc__ = None

    def __init__(self, *coordinates: float):
        if not coordinates:
            raise ValidationError("Size of a vector must be greater than 0, got no coordinates")
        values = [check_scalar(c, f"coordinates[{i}]") for i, c in enumerate(coordinates)]
        self._data = np.array(values, dtype=np.float64)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def filled(cls, size: int, value: float = 0.0) -> Vector:
        """Vector of ``size`` coordinates, all equal to ``value``."""
        size = check_positive_size(size, 'size')
        value = check_scalar(value, 'value')
        return cls._wrap(np.full(size, value, dtype=np.float64))

    @classmethod
    def from_array(cls, values: ArrayLike) -> Vector:
        """Vector from any 1D array-like. The input is copied."""
        data = check_array(values, 'values')
        check_ndim(data, 1, 'values')
        check_non_empty(data, 'values')
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Vector:
        """Adopt an already-owned float64 buffer without copying."""
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    def copy(self) -> Vector:
        """Independent copy of this vector."""
        return Vector._wrap(self._data.copy())

    def __copy__(self) -> Vector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Vector:
        return self.copy()

    # ------------------------------------------------------------------
    # Calculations
    # ------------------------------------------------------------------

    def add(self, other: Vector) -> Vector:
        """Element-wise sum. Sizes must match."""
        self._check_operand(other, 'other', 'add')
        return Vector._wrap(self._data + other._data)

    def subtract(self, other: Vector) -> Vector:
        """Element-wise difference. Sizes must match."""
        self._check_operand(other, 'other', 'subtract')
        return Vector._wrap(self._data - other._data)

    def dot_product(self, other: Vector) -> float:
        """Sum of element-wise products. Sizes must match."""
        self._check_operand(other, 'other', 'calculate the dot product of')
        return float(np.dot(self._data, other._data))

    def cross_product(self, other: Vector) -> Vector:
        """
        3D cross product.

        Raises:
            DimensionError: If either vector does not have exactly 3 coordinates
        """
        check_instance(other, Vector, 'other')
        if self.size != 3 or other.size != 3:
            raise DimensionError(
                f"Cannot calculate the cross product of non-3D vectors: "
                f"sizes {self.size} and {other.size}"
            )
        a0, a1, a2 = (float(x) for x in self._data)
        b0, b1, b2 = (float(x) for x in other._data)
        return Vector(
            a1 * b2 - a2 * b1,
            a2 * b0 - a0 * b2,
            a0 * b1 - a1 * b0,
        )

    def scalar_triple_product(self, b: Vector, c: Vector) -> float:
        """self . (b x c) computed as (self x b) . c; equal for 3-vectors."""
        check_instance(b, Vector, 'b')
        check_instance(c, Vector, 'c')
        return self.cross_product(b).dot_product(c)

    def multiply_by_scalar(self, scalar: float) -> Vector:
        """Every coordinate multiplied by ``scalar``."""
        scalar = check_scalar(scalar, 'scalar')
        return Vector._wrap(self._data * scalar)

    def divide_by_scalar(self, scalar: float) -> Vector:
        """
        Every coordinate divided by ``scalar``.

        Division by zero is not guarded: the result holds +/-Inf or NaN
        and a RuntimeWarning is emitted.
        """
        return self._divided(scalar, stacklevel=3)

    def normalized(self) -> Vector:
        """Unit vector in the same direction. A zero vector gives NaN."""
        return self._divided(self.magnitude(), stacklevel=3)

    def angle_radians(self, other: Vector) -> float:
        """
        Angle between two vectors in radians.

        The cosine ratio is clamped to [-1, 1] before acos so round-off
        on parallel vectors cannot produce NaN. A zero-length operand
        still gives NaN.
        """
        return self._angle(other, stacklevel=3)

    def angle_degrees(self, other: Vector) -> float:
        """Angle between two vectors in degrees."""
        return math.degrees(self._angle(other, stacklevel=3))

    def multiply_matrix(self, matrix: Matrix) -> Vector:
        """
        Row-vector times matrix.

        Treats this vector as 1 x n and ``matrix`` as n x p; the result
        has p coordinates, entry j being sum_i self[i] * matrix[i, j].

        Raises:
            DimensionError: If size != matrix.num_rows
        """
        from pylinalg.dense.matrix import Matrix

        check_instance(matrix, Matrix, 'matrix')
        if self.size != matrix.num_rows:
            raise DimensionError(
                f"This vector's size must equal the rows in the matrix: "
                f"size {self.size}, matrix {matrix.num_rows}x{matrix.num_cols}"
            )
        return Vector._wrap(self._data @ matrix._data)

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set(self, index: int, value: float) -> None:
        """Set the coordinate at ``index``. Bounds-checked."""
        index = check_index(index, self.size, 'index')
        self._data[index] = check_scalar(value, 'value')

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot_product(self))

    def quick_magnitude(self) -> float:
        """Squared length, for comparisons that don't need the square root."""
        return self.dot_product(self)

    def get(self, index: int) -> float:
        """Coordinate at ``index``. Bounds-checked."""
        index = check_index(index, self.size, 'index')
        return float(self._data[index])

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    @property
    def size(self) -> int:
        """Number of coordinates."""
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        for value in self._data:
            yield float(value)

    def to_array(self) -> NDArray[np.float64]:
        """Snapshot of the coordinates as a new 1D array."""
        return self._data.copy()

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: Any) -> Vector:
        if isinstance(scalar, (Vector, bool)) or not isinstance(scalar, (int, float, np.number)):
            return NotImplemented
        return self.multiply_by_scalar(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Any) -> Vector:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float, np.number)):
            return NotImplemented
        return self._divided(scalar, stacklevel=3)

    def __neg__(self) -> Vector:
        return Vector._wrap(-self._data)

    def __matmul__(self, other: Any) -> Vector:
        from pylinalg.dense.matrix import Matrix

        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply_matrix(other)

    # ------------------------------------------------------------------
    # Comparison, hashing, display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        if self.size != other.size:
            return False
        return all_approx_equal(self._data, other._data)

    def __hash__(self) -> int:
        return hash_buffer(self._data)

    def __str__(self) -> str:
        return f"<{format_entries(self._data)}>"

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(float(v)) for v in self._data)})"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_operand(self, other: Any, name: str, operation: str) -> None:
        check_instance(other, Vector, name)
        check_same_size(self.size, other.size, operation)

    # stacklevel is relative to the helper, as in warnings.warn: public
    # methods pass 3 so the warning points at their own caller.

    def _divided(self, scalar: Any, stacklevel: int) -> Vector:
        scalar = check_scalar(scalar, 'scalar')
        return Vector._wrap(ieee_divide(self._data, scalar, stacklevel=stacklevel + 1))

    def _angle(self, other: Any, stacklevel: int) -> float:
        self._check_operand(other, 'other', 'calculate the angle between')
        ratio = ieee_divide(
            self.dot_product(other),
            self.magnitude() * other.magnitude(),
            stacklevel=stacklevel + 1,
        )
        return float(np.arccos(np.clip(ratio, -1.0, 1.0)))
