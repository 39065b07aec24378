"""
Linear system A x = b.

LinearSystem validates its inputs at construction and is immutable
afterwards. Solving is a pure derivation through the coefficient
inverse.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DomainError
from pymatrix.core.validation import check_array, check_matrix, check_not_none
from pymatrix.matrix.matrix import Matrix


class LinearSystem:
    """
    Square linear system: coefficients · x = constants.

    Construction:
        LinearSystem(A, b)                  # A, b are Matrix instances
        LinearSystem.from_arrays(A, b)      # any array-likes; 1-D b is a column

    Checks run in order and the first failure wins:
        1. coefficients and constants are Matrix instances (ValidationError)
        2. coefficients is square with at least 2 rows (DomainError)
        3. constants is a column vector with coefficients.rows rows (DomainError)
    """

    def __init__(self, coefficients: Matrix, constants: Matrix):
        check_matrix(coefficients, 'coefficients')
        check_matrix(constants, 'constants')

        if not coefficients.is_square or coefficients.rows < 2:
            raise DomainError(
                f"coefficients: must be square with at least 2 rows, "
                f"got shape {coefficients.shape}"
            )
        if not constants.is_column_vector or constants.rows != coefficients.rows:
            raise DomainError(
                f"constants: must be a column vector with {coefficients.rows} rows, "
                f"got shape {constants.shape}"
            )

        self._coefficients = coefficients
        self._constants = constants

    @classmethod
    def from_arrays(
        cls,
        coefficients: ArrayLike | Matrix,
        constants: ArrayLike | Matrix,
    ) -> LinearSystem:
        """
        Build a system from array-likes or matrices.

        A 1-D constants array is treated as a column vector.
        """
        check_not_none(coefficients, 'coefficients')
        check_not_none(constants, 'constants')

        if not isinstance(coefficients, Matrix):
            coefficients = Matrix(coefficients)
        if not isinstance(constants, Matrix):
            constants_arr = check_array(constants, 'constants')
            if constants_arr.ndim == 1:
                constants_arr = constants_arr.reshape(-1, 1)
            constants = Matrix(constants_arr)

        return cls(coefficients, constants)

    @property
    def coefficients(self) -> Matrix:
        return self._coefficients

    @property
    def constants(self) -> Matrix:
        return self._constants

    @property
    def size(self) -> int:
        """Number of unknowns."""
        return self._coefficients.rows

    def solve(self) -> Matrix | None:
        """
        Solve for x as coefficients.inverse * constants.

        Returns:
            Column vector with the same number of rows as constants,
            or None when the coefficient matrix is singular.
        """
        inverse = self._coefficients.inverse
        if inverse is None:
            return None
        return inverse * self._constants

    def __repr__(self) -> str:
        return f"LinearSystem(size={self.size})"
