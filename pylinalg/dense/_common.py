"""
Helpers shared by Vector and Matrix.
"""

from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray


def format_entry(value: float) -> str:
    """Two-decimal display form of one coordinate or cell."""
    return f"{value:.2f}"


def format_entries(values: Iterable[float]) -> str:
    """Comma-space separated display form of a run of values."""
    return ", ".join(format_entry(v) for v in values)


def hash_buffer(data: NDArray[np.floating[Any]]) -> int:
    """
    Hash derived from the raw values and the shape.

    Approximately-equal buffers may hash differently; see the Vector and
    Matrix docstrings.
    """
    # -0.0 and 0.0 compare equal, so fold them before hashing the bytes
    folded = data + 0.0
    return hash((data.shape, folded.tobytes()))
