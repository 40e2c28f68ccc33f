"""
Floating-point division with IEEE-754 semantics.

Scaling by a zero scalar or normalising a zero vector is not guarded:
the result holds Inf or NaN exactly as IEEE-754 prescribes. The only thing
added here is a RuntimeWarning so the caller can see it happened.
"""

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray


def ieee_divide(
    numerator: NDArray[np.floating[Any]] | float,
    denominator: float,
    stacklevel: int = 2,
) -> NDArray[np.floating[Any]] | np.floating[Any]:
    """
    Divide without raising on zero denominators.

    x / 0 gives +/-Inf and 0 / 0 gives NaN. Python floats would raise
    ZeroDivisionError instead, so both operands are promoted to float64.

    Args:
        numerator: Array or scalar to divide
        denominator: Scalar divisor
        stacklevel: Passed to warnings.warn; 2 blames the immediate caller.
            Wrappers add one per frame between the user and this call.

    Returns:
        Quotient as float64 (array or scalar, matching numerator)

    Warns:
        RuntimeWarning: If finite inputs produced non-finite output
    """
    num = np.asarray(numerator, dtype=np.float64)
    den = np.float64(denominator)

    with np.errstate(divide='ignore', invalid='ignore'):
        result = np.true_divide(num, den)

    if (
        np.all(np.isfinite(num))
        and np.isfinite(den)
        and not np.all(np.isfinite(result))
    ):
        warnings.warn(
            f"Division by {float(den)!r} produced non-finite values (Inf/NaN)",
            RuntimeWarning,
            stacklevel=stacklevel,
        )

    return result
