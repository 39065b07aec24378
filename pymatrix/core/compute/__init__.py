"""
Shared compute infrastructure for pymatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for comparing floating-point results
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    DEFAULT,
    LOOSE,
    NEAR_SINGULAR_THRESHOLD,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "DEFAULT",
    "LOOSE",
    "NEAR_SINGULAR_THRESHOLD",
    "select_tolerance",
]
