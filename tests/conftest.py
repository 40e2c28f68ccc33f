"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def general_3x3():
    """Non-triangular 3x3 with a nonzero determinant (-306)."""
    return Matrix([[6.0, 1.0, 1.0], [4.0, -2.0, 5.0], [2.0, 8.0, 7.0]])


@pytest.fixture
def singular_3x3():
    """Rows linearly dependent: row 3 = row 1 + row 2."""
    return Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [5.0, 7.0, 9.0]])
