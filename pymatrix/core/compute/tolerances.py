"""
Tolerance tiers for numerical comparison.

Matrix equality (==) is always exact. Results of inverse and solve
accumulate rounding, so callers compare those with Matrix.is_close and
one of the tiers below:

- EXACT: bitwise-equal values only
- DEFAULT: double precision, well-conditioned input
- LOOSE: ill-conditioned input
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance, same as ==',
)

DEFAULT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='default',
    description='Double precision, well-conditioned matrices',
)

LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='loose',
    description='Double precision, ill-conditioned matrices',
)

# |det(A)| / prod(||row_i||) below this is reported as nearly singular.
# The ratio is 1 for orthogonal rows and 0 for dependent rows.
NEAR_SINGULAR_THRESHOLD = 1e-12


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for comparing computed results."""
    if is_ill_conditioned:
        return LOOSE
    return DEFAULT
