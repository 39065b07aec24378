"""
Dense matrix with value semantics.

Matrix is immutable after construction: values live in a read-only
float64 ndarray and every operation returns a new Matrix with its own
backing store. MinorMatrix (see minor.py) is the one exception; it is
a lazy view onto its source.

Determinant and inverse use cofactor expansion, which is O(n!) in the
matrix size. This is a known limitation: the library targets the small
matrices of geometry code (2x2 to 4x4), not numerical workloads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cached_property
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import DEFAULT, ToleranceTier
from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_matrix,
    check_ndim,
    check_nonempty,
    check_position,
    check_positive_int,
    check_rectangular,
)
from pymatrix.matrix.norms import max_norm, p_norm


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _format_value(value: float) -> str:
    """Shortest repr without a trailing ".0": 1.0 -> "1", 1e300 -> "1e+300"."""
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


class Matrix:
    """
    Immutable dense matrix of float64 values.

    Construction:
        Matrix([[1, 2, 3], [4, 5, 6]])                  # rows, shape inferred
        Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])    # row-major flat values
        Matrix.identity(3)
        Matrix.zeros(2, 4)

    Elements are addressed by zero-based (row, column) coordinates via
    get(row, column) or m[row, column]. Equality is exact; use is_close
    for results that carry rounding error (inverse, solve).

    Operators:
        a + b, a - b    element-wise, shapes must match
        a * b, a @ b    matrix product, a.columns must equal b.rows
        a * k, k * a    scalar product
        -a              negation

    Raises:
        ValidationError: If data is None, non-numeric, or complex
        DimensionError: If rows are jagged, data is not 2D, or empty
    """

    # numpy scalars must defer to Matrix operators instead of broadcasting
    __array_ufunc__ = None
    __iter__ = None

    def __init__(self, data: ArrayLike | Matrix):
        if isinstance(data, Matrix):
            values = np.array(data.values, dtype=np.float64)
        else:
            if data is None:
                raise ValidationError("data: required, got None")
            check_rectangular(data, 'data')
            values = check_array(data, 'data')
            check_2d(values, 'data')
            check_nonempty(values, 'data')
        values.setflags(write=False)
        self._values = values

    @staticmethod
    def _wrap(values: NDArray[np.float64]) -> Matrix:
        """Adopt an already validated array that nothing else references."""
        matrix = Matrix.__new__(Matrix)
        values.setflags(write=False)
        matrix._values = values
        return matrix

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_values(cls, rows: int, columns: int, values: ArrayLike) -> Matrix:
        """
        Build a matrix from explicit dimensions and row-major values.

        Args:
            rows: Number of rows (>= 1)
            columns: Number of columns (>= 1)
            values: Flat sequence of exactly rows * columns numbers

        Raises:
            ValidationError: If a dimension is not a positive integer
            DimensionError: If the number of values is not rows * columns
        """
        rows = check_positive_int(rows, 'rows')
        columns = check_positive_int(columns, 'columns')
        flat = check_array(values, 'values')
        check_ndim(flat, 1, 'values')
        if flat.size != rows * columns:
            raise DimensionError(
                f"values: a {rows}x{columns} matrix needs {rows * columns} values, "
                f"got {flat.size}",
                expected=rows * columns,
                actual=flat.size,
            )
        return Matrix._wrap(flat.reshape(rows, columns))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_positive_int(n, 'n')
        return Matrix._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """rows x columns matrix of zeros."""
        rows = check_positive_int(rows, 'rows')
        columns = check_positive_int(columns, 'columns')
        return Matrix._wrap(np.zeros((rows, columns), dtype=np.float64))

    @classmethod
    def from_rows(cls, rows: Iterable[Matrix]) -> Matrix:
        """
        Stack single-row matrices top to bottom.

        Inverse of as_rows(): Matrix.from_rows(m.as_rows()) == m.

        Raises:
            ValidationError: If an item is not a Matrix
            DimensionError: If there are no rows, an item has more than
                one row, or the rows differ in width
        """
        rows = list(rows)
        if not rows:
            raise DimensionError("rows: at least one row matrix is required", actual=0)
        for i, row in enumerate(rows):
            check_matrix(row, f"rows[{i}]")
            if not row.is_row_vector:
                raise DimensionError(
                    f"rows[{i}]: expected a single-row matrix, got shape {row.shape}",
                    actual=row.shape,
                )
        widths = [row.columns for row in rows]
        if len(set(widths)) > 1:
            raise DimensionError(
                f"rows: all rows must have the same number of columns, got {widths}",
                expected=widths[0],
                actual=tuple(widths),
            )
        return Matrix._wrap(np.vstack([row.values for row in rows]))

    @classmethod
    def from_columns(cls, columns: Iterable[Matrix]) -> Matrix:
        """
        Place single-column matrices left to right.

        Inverse of as_columns(): Matrix.from_columns(m.as_columns()) == m.
        """
        columns = list(columns)
        if not columns:
            raise DimensionError(
                "columns: at least one column matrix is required", actual=0
            )
        for i, column in enumerate(columns):
            check_matrix(column, f"columns[{i}]")
            if not column.is_column_vector:
                raise DimensionError(
                    f"columns[{i}]: expected a single-column matrix, got shape {column.shape}",
                    actual=column.shape,
                )
        heights = [column.rows for column in columns]
        if len(set(heights)) > 1:
            raise DimensionError(
                f"columns: all columns must have the same number of rows, got {heights}",
                expected=heights[0],
                actual=tuple(heights),
            )
        return Matrix._wrap(np.hstack([column.values for column in columns]))

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def values(self) -> NDArray[np.float64]:
        """Read-only view of the backing store (rows x columns)."""
        return self._values

    @property
    def rows(self) -> int:
        return self.values.shape[0]

    @property
    def columns(self) -> int:
        return self.values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    @property
    def is_row_vector(self) -> bool:
        return self.rows == 1

    @property
    def is_column_vector(self) -> bool:
        return self.columns == 1

    def get(self, row: int, column: int) -> float:
        """
        Element at (row, column).

        Raises:
            MatrixIndexError: If the position is outside [0, rows) x [0, columns)
        """
        row, column = check_position(row, column, self.shape)
        return self._element(row, column)

    def __getitem__(self, position: tuple[int, int]) -> float:
        if not isinstance(position, tuple) or len(position) != 2:
            raise ValidationError(
                f"position: expected a (row, column) pair, got {position!r}"
            )
        return self.get(*position)

    def _element(self, row: int, column: int) -> float:
        # Unchecked access; callers guarantee the position is valid.
        return float(self.values[row, column])

    def to_list(self) -> list[list[float]]:
        return self.values.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable copy of the values."""
        return np.array(self.values, dtype=np.float64)

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self.values, other.values)
        )

    def __hash__(self) -> int:
        return hash((self.shape, tuple(self.values.ravel().tolist())))

    def is_close(self, other: Matrix, tolerance: ToleranceTier = DEFAULT) -> bool:
        """
        Tolerance-aware comparison.

        True when shapes match and every pair of elements satisfies
        |a - b| <= atol + rtol * |b|. NaN is never close to anything.

        Args:
            other: Matrix to compare against
            tolerance: Tolerance tier (see core.compute.tolerances)
        """
        check_matrix(other, 'other')
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self.values, other.values, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_same_shape(self, other: Matrix, operation: str) -> None:
        if self.shape != other.shape:
            raise DimensionError(
                f"cannot {operation} {self.rows}x{self.columns} and "
                f"{other.rows}x{other.columns} matrices: dimensions must match",
                expected=self.shape,
                actual=other.shape,
            )

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'add')
        return Matrix._wrap(self.values + other.values)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'subtract')
        return Matrix._wrap(self.values - other.values)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._matmul(other)
        if _is_scalar(other):
            return Matrix._wrap(self.values * float(other))
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return Matrix._wrap(float(other) * self.values)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self.values)

    def _matmul(self, other: Matrix) -> Matrix:
        if self.columns != other.rows:
            raise DimensionError(
                f"cannot multiply {self.rows}x{self.columns} by "
                f"{other.rows}x{other.columns}: left columns must equal right rows",
                expected=self.columns,
                actual=other.rows,
            )
        return Matrix._wrap(self.values @ other.values)

    # ------------------------------------------------------------------
    # Row / column decomposition and mapping
    # ------------------------------------------------------------------

    @property
    def transpose(self) -> Matrix:
        return Matrix._wrap(self.values.T.copy())

    def as_rows(self) -> tuple[Matrix, ...]:
        """Single-row matrices, one per row, top to bottom."""
        return tuple(
            Matrix._wrap(self.values[i:i + 1, :].copy()) for i in range(self.rows)
        )

    def as_columns(self) -> tuple[Matrix, ...]:
        """Single-column matrices, one per column, left to right."""
        return tuple(
            Matrix._wrap(self.values[:, j:j + 1].copy()) for j in range(self.columns)
        )

    def map_value(self, func: Callable[[float], float]) -> Matrix:
        """Apply func to every element; shape is preserved."""
        return Matrix([[func(value) for value in row] for row in self.to_list()])

    def map_row(self, func: Callable[[Matrix], Matrix]) -> Matrix:
        """
        Apply func to each row and stack the results.

        func receives a 1 x columns matrix and must return a single-row
        matrix; every returned row must have the same width.
        """
        return Matrix.from_rows(func(row) for row in self.as_rows())

    def map_column(self, func: Callable[[Matrix], Matrix]) -> Matrix:
        """Apply func to each column and place the results side by side."""
        return Matrix.from_columns(func(column) for column in self.as_columns())

    # ------------------------------------------------------------------
    # Determinant, cofactors, inverse
    # ------------------------------------------------------------------

    def minor(self, row: int, column: int) -> Matrix:
        """View of this matrix with one row and one column removed."""
        from pymatrix.matrix.minor import MinorMatrix

        return MinorMatrix(self, row, column)

    def _require_square(self, operation: str) -> None:
        if not self.is_square:
            raise DimensionError(
                f"{operation} requires a square matrix, got shape {self.shape}",
                actual=self.shape,
            )

    @cached_property
    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        det(M) = sum_j (-1)^j * M[0, j] * det(minor(0, j))

        1x1 and 2x2 matrices are computed directly. Larger sizes recurse
        through MinorMatrix views, so cost grows as n!.

        Raises:
            DimensionError: If the matrix is not square
        """
        self._require_square('determinant')
        n = self.rows
        if n == 1:
            return self._element(0, 0)
        if n == 2:
            return (self._element(0, 0) * self._element(1, 1)
                    - self._element(0, 1) * self._element(1, 0))

        total = 0.0
        for column in range(n):
            sign = 1.0 if column % 2 == 0 else -1.0
            total += sign * self._element(0, column) * self.minor(0, column).determinant
        return total

    def cofactor(self, row: int, column: int) -> float:
        """
        Signed minor: (-1)^(row + column) * det(minor(row, column)).

        Raises:
            DimensionError: If the matrix is not square or smaller than 2x2
            MatrixIndexError: If row or column is out of range
        """
        self._require_square('cofactor')
        minor = self.minor(row, column)
        sign = 1.0 if (row + column) % 2 == 0 else -1.0
        return sign * minor.determinant

    @property
    def adjugate(self) -> Matrix:
        """
        Transpose of the cofactor matrix: adjugate[i, j] = cofactor(j, i).

        The adjugate of a 1x1 matrix is [[1]].
        """
        self._require_square('adjugate')
        n = self.rows
        if n == 1:
            return Matrix._wrap(np.ones((1, 1), dtype=np.float64))
        adjugate = np.empty((n, n), dtype=np.float64)
        for i in range(n):
            for j in range(n):
                adjugate[i, j] = self.cofactor(j, i)
        return Matrix._wrap(adjugate)

    @cached_property
    def inverse(self) -> Matrix | None:
        """
        Inverse by the adjugate method, or None when none exists.

        inverse[i, j] = cofactor(j, i) / det

        Returns None for non-square matrices and for singular matrices
        (determinant exactly 0.0). Callers must check before use.
        """
        if not self.is_square:
            return None
        det = self.determinant
        if det == 0.0:
            return None
        return Matrix._wrap(self.adjugate.values / det)

    # ------------------------------------------------------------------
    # Norms
    # ------------------------------------------------------------------

    def norm(self, p: float = 2.0) -> float:
        """p-norm of a row or column vector."""
        return p_norm(self, p)

    def max_norm(self) -> float:
        """Largest absolute element of a row or column vector."""
        return max_norm(self)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        rows = [
            "[" + ", ".join(_format_value(value) for value in row) + "]"
            for row in self.to_list()
        ]
        return "[" + "\n ".join(rows) + "]"

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"
