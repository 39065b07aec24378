"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from numbers import Integral
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric
    data), booleans, and complex values.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify nested sequences form a rectangle (no jagged rows).

    Checked before numpy conversion so a jagged input reports the
    offending row lengths instead of a numpy conversion failure.
    Arrays and non-sequence inputs are left for check_array.

    Args:
        rows: Candidate sequence of rows
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows have different lengths, or scalars are
            mixed with rows
    """
    if isinstance(rows, np.ndarray) or not isinstance(rows, Sequence):
        return
    if isinstance(rows, (str, bytes)):
        return

    lengths = [
        len(row) if isinstance(row, (Sequence, np.ndarray)) else None
        for row in rows
    ]
    if all(length is None for length in lengths):
        return
    if None in lengths:
        raise DimensionError(
            f"{name}: every row must be a sequence, got a mix of scalars and rows",
            actual=tuple(lengths),
        )
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: all rows must have the same length, got row lengths {lengths}",
            expected=lengths[0],
            actual=tuple(lengths),
        )


def check_ndim(array: NDArray[np.float64], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.float64], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Raises:
        DimensionError: If either dimension is zero
    """
    if array.shape[0] < 1 or array.shape[1] < 1:
        raise DimensionError(
            f"{name}: requires at least one row and one column, got shape {array.shape}",
            actual=array.shape,
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is a positive integer and return it as int.

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify index is an integer in [0, size).

    Negative indices are rejected; there is no wrap-around.

    Raises:
        ValidationError: If index is not an integer
        MatrixIndexError: If index is outside [0, size)
    """
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise ValidationError(
            f"{name}: expected an integer index, got {type(index).__name__}"
        )
    if not 0 <= index < size:
        raise MatrixIndexError(
            f"{name}: index {index} out of range [0, {size})",
            index=int(index),
        )
    return int(index)


def check_position(row: Any, column: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify (row, column) addresses an element of a matrix with the given shape.

    Raises:
        ValidationError: If either index is not an integer
        MatrixIndexError: If the position is outside the matrix
    """
    for index, name in ((row, 'row'), (column, 'column')):
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise ValidationError(
                f"{name}: expected an integer index, got {type(index).__name__}"
            )
    n_rows, n_columns = shape
    if not (0 <= row < n_rows and 0 <= column < n_columns):
        raise MatrixIndexError(
            f"position ({row}, {column}) out of range for {n_rows}x{n_columns} matrix",
            index=(int(row), int(column)),
            shape=shape,
        )
    return int(row), int(column)


def check_not_none(value: Any, name: str) -> None:
    """
    Verify a required argument was supplied.

    Raises:
        ValidationError: If value is None
    """
    if value is None:
        raise ValidationError(f"{name}: required, got None")


def check_matrix(value: Any, name: str) -> None:
    """
    Verify value is a Matrix (MinorMatrix views included).

    Raises:
        ValidationError: If value is None or not a Matrix
    """
    from pymatrix.matrix.matrix import Matrix

    check_not_none(value, name)
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(value).__name__}"
        )
