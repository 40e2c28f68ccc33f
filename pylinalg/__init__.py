"""
PyLinalg: dense vectors and matrices with predictable numeric semantics.

A small linear-algebra kernel for fixed-dimension containers: element-wise
arithmetic, dot/cross/triple products, matrix-vector and matrix-matrix
products, transpose and a cofactor-expansion determinant. Equality is
approximate, with a fixed absolute tolerance of 1e-7.

Thread safety: instances are not locked. Concurrent reads are safe as long
as no thread calls set() (or item assignment) at the same time; callers
that share an instance across threads must keep a single writer.

Submodules:
    dense: Vector and Matrix
    core: Exceptions, validation, tolerances, determinant kernel
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)
from pylinalg.core.compute.tolerances import EPSILON, approx_equal, is_approx_zero
from pylinalg.dense import Vector, Matrix, identity_matrix

__all__ = [
    "__version__",
    # Types
    "Vector",
    "Matrix",
    "identity_matrix",
    # Tolerance
    "EPSILON",
    "approx_equal",
    "is_approx_zero",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
]
