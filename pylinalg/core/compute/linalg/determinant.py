"""
Determinant by triangular short-circuit and cofactor expansion.

Operates on plain 2D float64 arrays; the Matrix class validates and
delegates here. The algorithm is deliberately the textbook one:

    1. 1x1: the single entry
    2. upper or lower triangular: product of the diagonal
    3. otherwise: Laplace expansion along the first row, recursing on
       the next row over an explicit list of still-active columns

Cost of step 3 is O(n!), which is fine for the small matrices this
library is meant for. No pivoting and no LU.
"""

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.tolerances import all_approx_zero, is_approx_zero
from pylinalg.core.validation import check_ndim, check_square


DeterminantMethod = Literal['scalar', 'triangular', 'cofactor']


@dataclass(frozen=True)
class DeterminantResult:
    """
    Result of a determinant computation.

    Attributes:
        value: The determinant
        method: Which path produced it ('scalar', 'triangular', 'cofactor')
        terms_evaluated: Cofactor terms that recursed (0 for closed forms)
        terms_pruned: Cofactor terms skipped because their entry was zero
    """
    value: float
    method: DeterminantMethod
    terms_evaluated: int = 0
    terms_pruned: int = 0


def is_upper_triangular(A: NDArray[np.floating[Any]]) -> bool:
    """False if not square, else True iff everything below the diagonal is zero."""
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        return False
    return all_approx_zero(A[np.tril_indices(A.shape[0], k=-1)])


def is_lower_triangular(A: NDArray[np.floating[Any]]) -> bool:
    """False if not square, else True iff everything above the diagonal is zero."""
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        return False
    return all_approx_zero(A[np.triu_indices(A.shape[0], k=1)])


def triangular_determinant(A: NDArray[np.floating[Any]]) -> float:
    """Product of the main diagonal, taken in row order."""
    det = float(A[0, 0])
    for i in range(1, A.shape[0]):
        det *= float(A[i, i])
    return det


class _CofactorExpansion:
    """
    Recursive Laplace expansion with zero-entry pruning.

    Row ``row`` of the current block is expanded across ``cols``, the
    columns not yet consumed by earlier rows. The sign of each term
    alternates with the term's position inside ``cols``, not with the
    absolute column number.
    """

    def __init__(self, A: NDArray[np.floating[Any]]):
        self._A = A
        self.terms_evaluated = 0
        self.terms_pruned = 0

    def expand(self, row: int, cols: list[int]) -> float:
        A = self._A

        # 2x2 block: a*d - b*c
        if len(cols) == 2:
            return (
                float(A[row, cols[0]]) * float(A[row + 1, cols[1]])
                - float(A[row, cols[1]]) * float(A[row + 1, cols[0]])
            )

        det = 0.0
        for i, col in enumerate(cols):
            entry = float(A[row, col])
            if is_approx_zero(entry):
                self.terms_pruned += 1
                continue

            self.terms_evaluated += 1
            sign = 1.0 if i % 2 == 0 else -1.0
            minor_cols = cols[:i] + cols[i + 1:]
            det += sign * entry * self.expand(row + 1, minor_cols)

        return det


def determinant(A: NDArray[np.floating[Any]]) -> DeterminantResult:
    """
    Determinant of a square matrix.

    Args:
        A: Square 2D float array (n x n, n >= 1)

    Returns:
        DeterminantResult with the value and the path taken

    Raises:
        DimensionError: If A is not 2D or not square
    """
    check_ndim(A, 2, 'A')
    check_square(A.shape, 'get determinant')

    n = A.shape[0]
    if n == 1:
        return DeterminantResult(value=float(A[0, 0]), method='scalar')

    if is_upper_triangular(A) or is_lower_triangular(A):
        return DeterminantResult(value=triangular_determinant(A), method='triangular')

    expansion = _CofactorExpansion(A)
    value = expansion.expand(0, list(range(n)))
    return DeterminantResult(
        value=value,
        method='cofactor',
        terms_evaluated=expansion.terms_evaluated,
        terms_pruned=expansion.terms_pruned,
    )
