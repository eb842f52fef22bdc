"""
Shared compute infrastructure for PyLinSolve.

IMPORTANT: This is NOT where the solver backends live. Those go in
linsys/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: EPSILON, dimension limit and comparison tiers
    linalg: Row-operation kernels
"""

from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import EPSILON, MAX_DIMENSION

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "EPSILON",
    "MAX_DIMENSION",
]
