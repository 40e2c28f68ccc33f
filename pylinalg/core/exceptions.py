"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Errors are raised before any result is allocated, so a failed
      operation never leaves a partially modified operand behind
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: a missing
    operand, a non-numeric value, a non-positive size.
    """
    pass


class DimensionError(ValidationError):
    """
    Shapes are incorrect or inconsistent.

    Raised when vector sizes or matrix shapes don't satisfy the operation
    (size mismatch, non-square input to a determinant, ragged rows).
    """
    pass


class IndexOutOfRangeError(PyLinalgError, IndexError):
    """
    Index, row, or column outside the valid bounds.

    Also an IndexError, so code written against plain Python sequences
    keeps working.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound that was violated
        axis: Which axis was indexed ('index', 'row' or 'col')
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis
