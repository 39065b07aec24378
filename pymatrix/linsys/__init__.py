"""
Square linear systems A x = b.

Public API:
    LinearSystem(A, b).solve() -> Matrix | None
    solve(A, b) -> LinearSystemSolution

solve() is the convenience entry point: it accepts array-likes,
validates at the boundary, and reports timing and near-singularity
diagnostics alongside the solution.

Example:
    >>> from pymatrix.linsys import solve
    >>> result = solve([[2, 1], [1, 3]], [3, 5])
    >>> result.is_singular
    False
    >>> print(result.summary())
"""

from pymatrix.linsys.system import LinearSystem
from pymatrix.linsys.solution import LinearSystemSolution, SolutionParams
from pymatrix.linsys.solvers import solve

__all__ = [
    "solve",
    "LinearSystem",
    "LinearSystemSolution",
    "SolutionParams",
]
