"""
Core infrastructure for PyLinalg.

Shared abstractions used by the dense vector and matrix types.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances, IEEE division, determinant kernel
"""

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)

__all__ = [
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
]
