"""
Generic result container for pymatrix computations.

The Result class provides a standardized envelope that solver outputs
use, so timing and diagnostics travel alongside the computed payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (size, singularity, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (solution vector, determinant, ...)
        info: Structured metadata (size, singular, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SolutionParams(solution=x, determinant=10.0,
        ...                           hadamard_ratio=0.4, tolerance=DEFAULT),
        ...     info={'size': 3, 'singular': False},
        ...     timing={'total_seconds': 0.001},
        ...     method='adjugate',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
