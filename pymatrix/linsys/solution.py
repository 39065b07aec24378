"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pymatrix.core.compute.tolerances import ToleranceTier
from pymatrix.core.result import Result
from pymatrix.matrix.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.linsys.system import LinearSystem


@dataclass(frozen=True)
class SolutionParams:
    """
    Parameter payload for a solved linear system.

    Attributes:
        solution: Column vector x, or None if the system is singular
        determinant: Determinant of the coefficient matrix
        hadamard_ratio: |det(A)| / prod(||row_i||), in [0, 1]; values
            near 0 indicate a nearly singular system
        tolerance: Tier for checking the residual; LOOSE when the system
            is nearly singular, DEFAULT otherwise
    """
    solution: Matrix | None
    determinant: float
    hadamard_ratio: float
    tolerance: ToleranceTier


@dataclass
class LinearSystemSolution:
    """
    User-facing solve() results.

    Wraps the Result envelope and the solved system, and provides
    convenient accessors for the solution and its diagnostics.
    """
    _result: Result[SolutionParams]
    _system: LinearSystem

    # Cached computations
    _residual: Matrix | None = None

    @property
    def system(self) -> LinearSystem:
        return self._system

    @property
    def solution(self) -> Matrix | None:
        return self._result.params.solution

    @property
    def x(self) -> tuple[float, ...] | None:
        """Solution as a flat tuple of floats, or None if singular."""
        if self.solution is None:
            return None
        return tuple(self.solution.values.ravel().tolist())

    @property
    def determinant(self) -> float:
        return self._result.params.determinant

    @property
    def hadamard_ratio(self) -> float:
        return self._result.params.hadamard_ratio

    @property
    def is_singular(self) -> bool:
        return self.solution is None

    @property
    def residual(self) -> Matrix | None:
        """
        A x - b for the computed x, or None if singular.

        Zero up to rounding for a well-conditioned system.
        """
        if self.solution is None:
            return None
        if self._residual is None:
            self._residual = (
                self._system.coefficients * self.solution - self._system.constants
            )
        return self._residual

    @property
    def tolerance(self) -> ToleranceTier:
        return self._result.params.tolerance

    @property
    def is_accurate(self) -> bool:
        """
        True when A x reproduces b within the solution's tolerance tier.

        False for a singular system.
        """
        if self.solution is None:
            return False
        reproduced = self._system.coefficients * self.solution
        return reproduced.is_close(self._system.constants, self.tolerance)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def method(self) -> str:
        return self._result.method

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable summary of the solve."""
        lines = [
            "Linear System Solution",
            "=" * 40,
            f"Unknowns: {self._system.size}",
            f"Determinant: {self.determinant:.6g}",
            f"Hadamard ratio: {self.hadamard_ratio:.3e}",
            "",
        ]
        if self.is_singular:
            lines.append("No unique solution (coefficient matrix is singular)")
        else:
            lines.append("Solution:")
            lines.append("-" * 40)
            for i, value in enumerate(self.x):
                lines.append(f"  x[{i}]: {value:14.6f}")
            lines.append("-" * 40)

        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        lines.append(f"Method: {self.method}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(size={self._system.size}, "
            f"singular={self.is_singular}, determinant={self.determinant:.6g})"
        )
