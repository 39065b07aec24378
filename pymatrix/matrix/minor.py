"""
Minor matrix: a source matrix with one row and one column removed.

MinorMatrix is a lazy view. Element access remaps indices into the
source instead of copying it, which keeps the recursive cofactor
expansion in Matrix.determinant free of O(n^2) copies at every level.
Bulk operations (arithmetic, equality, hashing) materialize the values
once on first use. The source is never mutated because Matrix is
immutable, so the view cannot go stale.
"""

from __future__ import annotations

from functools import cached_property

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import check_index, check_matrix
from pymatrix.matrix.matrix import Matrix


class MinorMatrix(Matrix):
    """
    (rows - 1) x (columns - 1) view of source without excluded_row and
    excluded_column.

    Position (r, c) of the minor maps to source position
    (r if r < excluded_row else r + 1, c if c < excluded_column else c + 1).

    Behaves as a Matrix for every read operation and compares equal to
    a Matrix holding the same values. Results derived from a minor
    (sums, products, rows, ...) are plain Matrix instances.

    Args:
        source: Matrix with at least 2 rows and 2 columns
        excluded_row: Row of source to drop, in [0, source.rows)
        excluded_column: Column of source to drop, in [0, source.columns)

    Raises:
        ValidationError: If source is not a Matrix
        DimensionError: If source has fewer than 2 rows or columns
        MatrixIndexError: If an excluded index is out of range
    """

    def __init__(self, source: Matrix, excluded_row: int, excluded_column: int):
        check_matrix(source, 'source')
        if source.rows < 2 or source.columns < 2:
            raise DimensionError(
                f"source: a minor needs at least 2 rows and 2 columns, "
                f"got shape {source.shape}",
                expected=(2, 2),
                actual=source.shape,
            )
        self._excluded_row = check_index(excluded_row, source.rows, 'excluded_row')
        self._excluded_column = check_index(
            excluded_column, source.columns, 'excluded_column'
        )
        self._source = source

    @property
    def source(self) -> Matrix:
        return self._source

    @property
    def excluded_row(self) -> int:
        return self._excluded_row

    @property
    def excluded_column(self) -> int:
        return self._excluded_column

    @property
    def rows(self) -> int:
        return self._source.rows - 1

    @property
    def columns(self) -> int:
        return self._source.columns - 1

    def _element(self, row: int, column: int) -> float:
        if row >= self._excluded_row:
            row += 1
        if column >= self._excluded_column:
            column += 1
        return self._source._element(row, column)

    @cached_property
    def values(self) -> NDArray[np.float64]:
        values = np.delete(self._source.values, self._excluded_row, axis=0)
        values = np.delete(values, self._excluded_column, axis=1)
        values.setflags(write=False)
        return values

    def __repr__(self) -> str:
        return (
            f"MinorMatrix(source={self._source!r}, "
            f"excluded_row={self._excluded_row}, "
            f"excluded_column={self._excluded_column})"
        )
