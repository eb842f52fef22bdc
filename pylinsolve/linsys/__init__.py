"""
Direct solvers for small dense square linear systems.

Public API:
    solve(A, b, method=...)        - dispatch by method name
    gaussian_elimination(A, b)     - row echelon form + back substitution
    gauss_jordan(A, b)             - reduced row echelon form
    lu_factorization(A, b)         - pivoted Doolittle LU, exposes L, U, P
    invert(A)                      - Gauss-Jordan inverse
    solve_via_inverse(A, b)        - x = A⁻¹·b

Equation solvers classify the system as UNIQUE, INFINITE or NONE.
Inversion raises SingularMatrixError when no inverse exists.

Example:
    >>> from pylinsolve.linsys import solve
    >>> result = solve([[1, 2], [2, 4]], [1, 3])
    >>> result.status
    <SolutionStatus.NONE: 'none'>
"""

from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import (
    SolutionStatus,
    SystemParams,
    InverseParams,
    SystemSolution,
    InverseSolution,
)
from pylinsolve.linsys.solvers import (
    solve,
    gaussian_elimination,
    gauss_jordan,
    lu_factorization,
    invert,
    solve_via_inverse,
)
from pylinsolve.linsys.datasets import load_example

__all__ = [
    "solve",
    "gaussian_elimination",
    "gauss_jordan",
    "lu_factorization",
    "invert",
    "solve_via_inverse",
    "load_example",
    "LinearSystemDesign",
    "SolutionStatus",
    "SystemParams",
    "InverseParams",
    "SystemSolution",
    "InverseSolution",
]
