"""
Solver entry point for linear systems.

This module provides the solve() function (public API): boundary
validation, timing, diagnostics, and result wrapping around
LinearSystem.solve().
"""

import warnings

from numpy.typing import ArrayLike

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import NEAR_SINGULAR_THRESHOLD, select_tolerance
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.result import Result
from pymatrix.linsys.solution import LinearSystemSolution, SolutionParams
from pymatrix.linsys.system import LinearSystem
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.norms import p_norm


def solve(
    coefficients: ArrayLike | Matrix | LinearSystem,
    constants: ArrayLike | Matrix | None = None,
) -> LinearSystemSolution:
    """
    Solve the square linear system A x = b.

    x is computed as inverse(A) · b with the inverse taken by the
    adjugate method. Exponential in the number of unknowns; intended
    for small systems.

    Args:
        coefficients: Square coefficient matrix A (n x n, n >= 2), as a
            Matrix or array-like, or an already built LinearSystem
        constants: Right-hand side b (n x 1 or length n). Required unless
            coefficients is a LinearSystem.

    Returns:
        LinearSystemSolution. A singular system is a normal outcome:
        solution is None and is_singular is True.

    Raises:
        ValidationError: If an input is missing or non-numeric
        DimensionError: If an input has jagged rows or is empty
        DomainError: If the shapes do not form a square system

    Warns:
        RuntimeWarning: If the coefficient matrix is nearly singular

    Example:
        >>> from pymatrix.linsys import solve
        >>> result = solve([[3, 0, 2], [2, 0, -2], [0, 1, 1]], [9, -4, 5])
        >>> result.is_singular
        False
        >>> [round(v, 12) for v in result.x]
        [1.0, 2.0, 3.0]
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(coefficients, LinearSystem):
        if constants is not None:
            raise ValidationError(
                "constants: must be None when coefficients is a LinearSystem"
            )
        system = coefficients
    else:
        system = LinearSystem.from_arrays(coefficients, constants)

    # === Solve ===
    timer = Timer()
    timer.start()

    with timer.section('determinant'):
        determinant = system.coefficients.determinant

    with timer.section('solve'):
        solution = system.solve()

    with timer.section('diagnostics'):
        ratio = _hadamard_ratio(system.coefficients, determinant)
        tolerance = select_tolerance(
            is_ill_conditioned=ratio < NEAR_SINGULAR_THRESHOLD
        )

    timer.stop()

    # === Diagnostics ===
    messages: list[str] = []
    if solution is None:
        messages.append("coefficient matrix is singular; no unique solution")
    elif ratio < NEAR_SINGULAR_THRESHOLD:
        message = (
            f"coefficient matrix is nearly singular (Hadamard ratio {ratio:.3e}); "
            f"solution may be inaccurate"
        )
        warnings.warn(message, RuntimeWarning, stacklevel=2)
        messages.append(message)

    result = Result(
        params=SolutionParams(
            solution=solution,
            determinant=determinant,
            hadamard_ratio=ratio,
            tolerance=tolerance,
        ),
        info={
            'size': system.size,
            'singular': solution is None,
            'hadamard_ratio': ratio,
            'tolerance': tolerance.name,
        },
        timing=timer.result(),
        method='adjugate',
        warnings=tuple(messages),
    )
    return LinearSystemSolution(_result=result, _system=system)


def _hadamard_ratio(coefficients: Matrix, determinant: float) -> float:
    """
    |det(A)| / prod(||row_i||_2).

    Hadamard's inequality bounds |det(A)| by the product of the row
    norms, so the ratio lies in [0, 1]: 1 for orthogonal rows, 0 for
    linearly dependent rows.
    """
    bound = 1.0
    for row in coefficients.as_rows():
        bound *= p_norm(row, 2.0)
    if bound == 0.0:
        return 0.0
    return abs(determinant) / bound
