"""
Dense vector and matrix types.

Public API:
    Vector            - fixed-length real vector
    Matrix            - fixed-size real matrix
    identity_matrix   - square identity factory
"""

from pylinalg.dense.vector import Vector
from pylinalg.dense.matrix import Matrix, identity_matrix

__all__ = [
    "Vector",
    "Matrix",
    "identity_matrix",
]
