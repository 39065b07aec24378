"""
pymatrix: small dense linear algebra for geometry code.

Dense matrices with exact value semantics, determinant and inverse by
cofactor expansion, and a solver for square linear systems. Intended for
small matrices; no decompositions, sparse storage, or pivoting.

Submodules:
    matrix: Matrix, MinorMatrix, vector norms
    linsys: LinearSystem and the solve() entry point
    core: exceptions, validation, Result envelope, tolerances
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    MatrixIndexError,
    DomainError,
)
from pymatrix.matrix import Matrix, MinorMatrix
from pymatrix.linsys import LinearSystem, solve

__all__ = [
    "__version__",
    "Matrix",
    "MinorMatrix",
    "LinearSystem",
    "solve",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "MatrixIndexError",
    "DomainError",
]
