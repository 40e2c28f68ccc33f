"""
Shared numeric infrastructure for PyLinalg.

Submodules:
    tolerances: Approximate equality and structural-zero tests
    precision: IEEE-754 division that warns on non-finite results
    linalg: Array-level kernels (triangularity, determinant)
"""

from pylinalg.core.compute.tolerances import (
    EPSILON,
    KERNEL_ABSOLUTE,
    ToleranceTier,
    all_approx_equal,
    all_approx_zero,
    approx_equal,
    is_approx_zero,
)
from pylinalg.core.compute.precision import ieee_divide

__all__ = [
    # Tolerances
    "EPSILON",
    "KERNEL_ABSOLUTE",
    "ToleranceTier",
    "approx_equal",
    "is_approx_zero",
    "all_approx_equal",
    "all_approx_zero",
    # Precision
    "ieee_divide",
]
