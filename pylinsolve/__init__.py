"""
PyLinSolve: direct-method solvers for small dense linear systems.

Gaussian elimination, Gauss-Jordan reduction, pivoted LU factorization and
Gauss-Jordan inversion on NumPy arrays, with explicit classification of
the solution set (unique / infinite / none).

Submodules:
    linsys: Solvers, designs, solutions and example systems
    core: Exceptions, validation, result envelope, row-operation kernels
"""

__version__ = "0.1.0"

from pylinsolve import linsys
from pylinsolve.linsys import (
    solve,
    gaussian_elimination,
    gauss_jordan,
    lu_factorization,
    invert,
    solve_via_inverse,
    SolutionStatus,
)
from pylinsolve.core.exceptions import (
    PyLinSolveError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "linsys",
    "solve",
    "gaussian_elimination",
    "gauss_jordan",
    "lu_factorization",
    "invert",
    "solve_via_inverse",
    "SolutionStatus",
    "PyLinSolveError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "SingularMatrixError",
]
