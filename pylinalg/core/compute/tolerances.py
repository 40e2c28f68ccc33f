"""
Tolerance for approximate floating-point equality.

Every equality and structural-zero test in PyLinalg goes through this
module; nothing else compares floats with ``==``. The tolerance is a
single absolute threshold fixed at import time.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


# Two scalars closer than this are the same value
EPSILON: float = 1e-7

KERNEL_ABSOLUTE = ToleranceTier(
    atol=EPSILON,
    name='kernel_absolute',
    description='Absolute tolerance used by every vector/matrix comparison',
)


def approx_equal(a: float, b: float) -> bool:
    """True iff |a - b| < EPSILON. NaN is never equal to anything."""
    return bool(abs(a - b) < EPSILON)


def is_approx_zero(a: float) -> bool:
    """True iff ``a`` is a structural zero."""
    return approx_equal(a, 0.0)


def all_approx_equal(
    a: NDArray[np.floating[Any]] | ArrayLike,
    b: NDArray[np.floating[Any]] | ArrayLike,
) -> bool:
    """
    Element-wise approx_equal over two arrays of the same shape.

    Args:
        a: First array
        b: Second array, same shape as ``a``

    Returns:
        True if every pair of elements is approximately equal

    Raises:
        ValueError: If the shapes differ (callers check shapes first)
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")
    # inf - inf is NaN; silence the warning, NaN already compares False
    with np.errstate(invalid='ignore'):
        return bool(np.all(np.abs(a - b) < EPSILON))


def all_approx_zero(a: NDArray[np.floating[Any]] | ArrayLike) -> bool:
    """True iff every element of ``a`` is a structural zero."""
    a = np.asarray(a, dtype=np.float64)
    return bool(np.all(np.abs(a) < EPSILON))
