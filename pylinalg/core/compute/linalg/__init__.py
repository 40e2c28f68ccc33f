"""
Linear algebra kernels for PyLinalg.

All functions take plain 2D float64 NumPy arrays and leave validation of
user input to the dense types. Each operation that reports more than a
single number returns a structured result dataclass.

Submodules:
    determinant: Triangularity tests and cofactor-expansion determinant
"""

from pylinalg.core.compute.linalg.determinant import (
    DeterminantResult,
    determinant,
    is_lower_triangular,
    is_upper_triangular,
    triangular_determinant,
)

__all__ = [
    "DeterminantResult",
    "determinant",
    "is_lower_triangular",
    "is_upper_triangular",
    "triangular_determinant",
]
