"""
Vector norms on single-row or single-column matrices.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import TYPE_CHECKING

import numpy as np

from pymatrix.core.exceptions import DimensionError, ValidationError

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def _check_vector(vector: Matrix, name: str) -> None:
    if not (vector.is_row_vector or vector.is_column_vector):
        raise DimensionError(
            f"{name}: norm requires a row or column vector, got shape {vector.shape}",
            actual=vector.shape,
        )


def p_norm(vector: Matrix, p: float = 2.0) -> float:
    """
    p-norm of a vector: (sum |x_i|^p)^(1/p).

    Args:
        vector: Row or column vector
        p: Order of the norm, a positive real number

    Raises:
        DimensionError: If vector has more than one row and column
        ValidationError: If p is not a positive real number
    """
    _check_vector(vector, 'vector')
    if isinstance(p, bool) or not isinstance(p, Real) or not 0 < p < math.inf:
        raise ValidationError(f"p: must be a positive real number, got {p!r}")

    magnitudes = np.abs(vector.values)
    return float(np.sum(magnitudes ** p) ** (1.0 / p))


def max_norm(vector: Matrix) -> float:
    """Max-norm of a vector: max |x_i|."""
    _check_vector(vector, 'vector')
    return float(np.max(np.abs(vector.values)))
