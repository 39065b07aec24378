"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - A singular matrix is not an error; it is reported as a None result
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when a required argument is missing, has the wrong type,
    or holds non-numeric data.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised on construction with jagged rows or a wrong element count,
    on arithmetic between incompatible shapes, and when stacking rows
    or columns of differing sizes.

    Attributes:
        expected: Expected shape or size, if known
        actual: Shape or size that was received, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class MatrixIndexError(ValidationError, IndexError):
    """
    Element or exclusion index outside the matrix bounds.

    Also an IndexError, so generic index handling keeps working.

    Attributes:
        index: The offending (row, column) pair or single index
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class DomainError(ValidationError):
    """
    Matrices do not form a valid linear system.

    Raised when the coefficient matrix is not square with at least two
    rows, or the constants are not a matching column vector.
    """
    pass
