"""
Dense matrices for small linear-algebra problems.

Public API:
    Matrix: immutable dense matrix with arithmetic, determinant, inverse
    MinorMatrix: lazy view of a matrix with one row and column removed
    p_norm, max_norm: norms of row and column vectors

Example:
    >>> from pymatrix.matrix import Matrix
    >>> m = Matrix([[3, 0, 2], [2, 0, -2], [0, 1, 1]])
    >>> m.determinant
    10.0
    >>> print(m.inverse)
    [[0.2, 0.2, -0]
     [-0.2, 0.3, 1]
     [0.2, -0.3, 0]]
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.minor import MinorMatrix
from pymatrix.matrix.norms import p_norm, max_norm

__all__ = [
    "Matrix",
    "MinorMatrix",
    "p_norm",
    "max_norm",
]
