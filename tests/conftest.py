"""
pytest configuration and shared fixtures.
"""

import pytest

from pymatrix.matrix import Matrix


@pytest.fixture
def rect32():
    """3x2 matrix with values 1..6 in row-major order."""
    return Matrix.from_values(3, 2, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def singular3():
    """3x3 matrix with linearly dependent rows (determinant 0)."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def det18():
    """3x3 matrix with determinant 18."""
    return Matrix([[-2, 2, -3], [-1, 1, 3], [2, 0, 1]])


@pytest.fixture
def invertible3():
    """3x3 matrix with determinant 10 and a short-decimal inverse."""
    return Matrix([[3, 0, 2], [2, 0, -2], [0, 1, 1]])
