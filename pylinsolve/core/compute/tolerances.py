"""
Tolerances and size limits for the direct solvers.

EPSILON is the single absolute threshold every algorithm uses to decide
whether a pivot, a right-hand-side entry or a coefficient is zero. It is
not scaled by the magnitude of the matrix: entries of order 1e-11
everywhere read as a zero matrix, and huge ill-conditioned matrices may
still pass as regular.

The tiers below are used by the test suite and by the residual check of
the inverse-based solve.
"""

from dataclasses import dataclass


# Absolute zero threshold for pivots and consistency checks
EPSILON: float = 1e-10

# Largest admissible matrix dimension at the public entry points
MAX_DIMENSION: int = 500


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Solutions of the same well-conditioned system from different methods
AGREEMENT = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='agreement',
    description='Cross-method solution agreement',
)

# ||A x - b|| for a UNIQUE solution, bounded by atol + rtol * ||b||
RESIDUAL = ToleranceTier(
    rtol=1e-9,
    atol=1e-6,
    name='residual',
    description='Round-trip residual of a unique solution',
)
