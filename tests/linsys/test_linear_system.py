"""
Tests for LinearSystem construction and solve().
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    DomainError,
    ValidationError,
)
from pymatrix.linsys import LinearSystem
from pymatrix.matrix import Matrix


def column(*values):
    return Matrix([[v] for v in values])


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_valid_system(self, invertible3):
        constants = column(1, 2, 3)
        system = LinearSystem(invertible3, constants)
        assert system.coefficients is invertible3
        assert system.constants is constants
        assert system.size == 3

    def test_two_by_two_is_smallest(self):
        system = LinearSystem(Matrix.identity(2), column(1, 2))
        assert system.size == 2

    def test_non_square_coefficients(self, rect32):
        with pytest.raises(DomainError, match="square with at least 2 rows"):
            LinearSystem(rect32, column(1, 2, 3))

    def test_one_by_one_coefficients(self):
        with pytest.raises(DomainError, match="square with at least 2 rows"):
            LinearSystem(Matrix([[2]]), column(4))

    def test_constants_row_vector(self, invertible3):
        with pytest.raises(DomainError, match="column vector with 3 rows"):
            LinearSystem(invertible3, Matrix([[1, 2, 3]]))

    def test_constants_wrong_row_count(self, invertible3):
        with pytest.raises(DomainError, match=r"got shape \(2, 1\)"):
            LinearSystem(invertible3, column(1, 2))

    def test_constants_multiple_columns(self, invertible3):
        with pytest.raises(DomainError):
            LinearSystem(invertible3, Matrix.zeros(3, 2))

    def test_first_failure_wins(self, rect32):
        with pytest.raises(DomainError, match="coefficients"):
            LinearSystem(rect32, Matrix([[1, 2]]))

    def test_none_coefficients(self):
        with pytest.raises(ValidationError, match="coefficients: required"):
            LinearSystem(None, column(1, 2))

    def test_none_constants(self, invertible3):
        with pytest.raises(ValidationError, match="constants: required"):
            LinearSystem(invertible3, None)

    def test_non_matrix_arguments(self):
        with pytest.raises(ValidationError, match="expected Matrix"):
            LinearSystem([[1, 0], [0, 1]], [[1], [2]])

    def test_domain_error_is_not_raised_for_none(self):
        with pytest.raises(ValidationError) as exc_info:
            LinearSystem(None, None)
        assert not isinstance(exc_info.value, DomainError)


class TestFromArrays:

    def test_one_dimensional_constants(self):
        system = LinearSystem.from_arrays([[2, 0], [0, 4]], [2, 4])
        assert system.constants == column(2, 4)

    def test_two_dimensional_constants(self):
        system = LinearSystem.from_arrays([[2, 0], [0, 4]], [[2], [4]])
        assert system.constants == column(2, 4)

    def test_accepts_matrices(self, invertible3):
        system = LinearSystem.from_arrays(invertible3, [1, 2, 3])
        assert system.coefficients is invertible3

    def test_jagged_coefficients(self):
        with pytest.raises(DimensionError):
            LinearSystem.from_arrays([[1, 2], [3]], [1, 2])

    def test_none(self):
        with pytest.raises(ValidationError, match="required"):
            LinearSystem.from_arrays(None, [1, 2])

    def test_non_numeric_constants(self):
        with pytest.raises(ValidationError):
            LinearSystem.from_arrays([[1, 0], [0, 1]], ["a", "b"])


# ═══════════════════════════════════════════════════════════════════════
# solve()
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    @pytest.mark.parametrize("constants", [
        (1, 2, 3),
        (0, 0, 0),
        (9, -4, 5),
        (-1.5, 2.25, 100),
    ])
    def test_reproduces_constants(self, invertible3, constants):
        b = column(*constants)
        x = LinearSystem(invertible3, b).solve()
        assert (invertible3 * x).is_close(b)

    def test_known_solution(self, invertible3):
        x = LinearSystem(invertible3, column(9, -4, 5)).solve()
        assert x.is_close(column(1, 2, 3))

    def test_exact_diagonal_system(self):
        x = LinearSystem(Matrix([[2, 0], [0, 4]]), column(2, 4)).solve()
        assert x == column(1, 1)

    def test_result_is_column_vector(self, det18):
        x = LinearSystem(det18, column(1, 1, 1)).solve()
        assert x.is_column_vector
        assert x.rows == 3

    def test_singular_returns_none(self, singular3):
        assert LinearSystem(singular3, column(1, 2, 3)).solve() is None

    def test_solve_is_repeatable(self, det18):
        system = LinearSystem(det18, column(1, 0, 0))
        assert system.solve() == system.solve()

    def test_repr(self, det18):
        assert repr(LinearSystem(det18, column(1, 0, 0))) == "LinearSystem(size=3)"
