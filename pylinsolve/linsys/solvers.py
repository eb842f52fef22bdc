"""
Solver dispatch for linear systems.

This module provides the public entry points and backend selection.
"""

from dataclasses import replace
from typing import Literal
import warnings
import numpy as np
from numpy.typing import ArrayLike

from pylinsolve.core.compute.tolerances import MAX_DIMENSION, RESIDUAL
from pylinsolve.core.exceptions import ValidationError
from pylinsolve.core.result import Result
from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import (
    SystemSolution, InverseSolution, SystemParams, SolutionStatus,
)
from pylinsolve.linsys.backends import (
    GaussianEliminationBackend,
    GaussJordanBackend,
    LUBackend,
    GaussJordanInverseBackend,
)


# Type alias for method selection
MethodChoice = Literal['gauss', 'gauss-jordan', 'lu', 'inverse']


def gaussian_elimination(
    A: ArrayLike,
    b: ArrayLike,
    *,
    max_dimension: int = MAX_DIMENSION,
) -> SystemSolution:
    """
    Solve A·x = b by Gaussian elimination with partial pivoting.

    Args:
        A: Square coefficient matrix (n x n)
        b: Right-hand side (n,)
        max_dimension: Largest admissible n

    Returns:
        SystemSolution with status UNIQUE / INFINITE / NONE

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If A is not square or len(b) != n

    Example:
        >>> from pylinsolve import gaussian_elimination
        >>> result = gaussian_elimination([[2, 0], [0, 2]], [4, 6])
        >>> result.solution
        array([2., 3.])
    """
    return solve(A, b, method='gauss', max_dimension=max_dimension)


def gauss_jordan(
    A: ArrayLike,
    b: ArrayLike,
    *,
    max_dimension: int = MAX_DIMENSION,
) -> SystemSolution:
    """Solve A·x = b by Gauss-Jordan reduction. See gaussian_elimination()."""
    return solve(A, b, method='gauss-jordan', max_dimension=max_dimension)


def lu_factorization(
    A: ArrayLike,
    b: ArrayLike,
    *,
    max_dimension: int = MAX_DIMENSION,
) -> SystemSolution:
    """
    Solve A·x = b through a pivoted LU factorization P·A = L·U.

    The factors are available as result.L, result.U and result.P. For a
    singular A the call falls back to Gaussian elimination; the factors
    are then None and result.info['delegated_to'] == 'gauss'.
    """
    return solve(A, b, method='lu', max_dimension=max_dimension)


def solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    method: MethodChoice = 'gauss',
    max_dimension: int = MAX_DIMENSION,
) -> SystemSolution:
    """
    Solve the square system A·x = b.

    All input validation, design construction, backend selection and
    result wrapping happens here.

    Args:
        A: Square coefficient matrix (n x n). Can be any array-like.
        b: Right-hand side (n,). Can be any array-like.
        method: Direct method to use:
            - 'gauss': Gaussian elimination + back substitution
            - 'gauss-jordan': reduction to reduced row-echelon form
            - 'lu': pivoted LU factorization
            - 'inverse': x = A⁻¹·b (raises SingularMatrixError instead
              of classifying singular systems)
        max_dimension: Largest admissible n

    Returns:
        SystemSolution

    Raises:
        ValidationError: If inputs are invalid or method is unknown
        DimensionError: If A is not square or len(b) != n
        SingularMatrixError: Only for method='inverse'
    """
    if method == 'inverse':
        return solve_via_inverse(A, b, max_dimension=max_dimension)

    backend_impl = _get_backend(method)

    # This is the boundary - validate here, trust everywhere else
    design = LinearSystemDesign.from_arrays(A, b, max_dimension=max_dimension)

    result = backend_impl.solve(design)

    return SystemSolution(_result=result, _design=design)


def invert(
    A: ArrayLike,
    *,
    max_dimension: int = MAX_DIMENSION,
) -> InverseSolution:
    """
    Invert a square matrix by Gauss-Jordan elimination on [A | I].

    Args:
        A: Square matrix (n x n)
        max_dimension: Largest admissible n

    Returns:
        InverseSolution; result.inverse is A⁻¹

    Raises:
        ValidationError: If input is invalid
        DimensionError: If A is not square
        SingularMatrixError: If A has no inverse
    """
    design = LinearSystemDesign.from_arrays(A, max_dimension=max_dimension)
    result = GaussJordanInverseBackend().solve(design)
    return InverseSolution(_result=result, _design=design)


def solve_via_inverse(
    A: ArrayLike,
    b: ArrayLike,
    *,
    max_dimension: int = MAX_DIMENSION,
) -> SystemSolution:
    """
    Solve A·x = b as x = A⁻¹·b.

    This route only ever reports UNIQUE. A singular A raises
    SingularMatrixError; there is no INFINITE / NONE distinction.

    Warns:
        RuntimeWarning: If ||A·x - b||∞ exceeds
            RESIDUAL.atol + RESIDUAL.rtol * ||b||∞
    """
    design = LinearSystemDesign.from_arrays(A, b, max_dimension=max_dimension)
    inv_result = GaussJordanInverseBackend().solve(design)

    x = inv_result.params.inverse @ design.b

    result: Result[SystemParams] = replace(
        inv_result,
        params=SystemParams(status=SolutionStatus.UNIQUE, rank=design.n, solution=x),
        info={**inv_result.info, 'rank': design.n},
    )
    solution = SystemSolution(_result=result, _design=design)

    # Relative to the right-hand side so large b alone does not trigger it
    threshold = RESIDUAL.atol + RESIDUAL.rtol * float(np.max(np.abs(design.b)))
    if solution.residual_norm > threshold:
        warnings.warn(
            f"Inverse-based solution has residual {solution.residual_norm:.3e} "
            f"(> {threshold:.3e}); A may be ill-conditioned",
            RuntimeWarning,
            stacklevel=2,
        )

    return solution


def _get_backend(choice: str):
    """
    Instantiate the backend for an equation-solving method.

    Raises:
        ValidationError: If unknown method specified
    """
    if choice == 'gauss':
        return GaussianEliminationBackend()
    elif choice == 'gauss-jordan':
        return GaussJordanBackend()
    elif choice == 'lu':
        return LUBackend()
    else:
        raise ValidationError(
            f"Unknown method: {choice!r}. "
            f"Expected one of 'gauss', 'gauss-jordan', 'lu', 'inverse'"
        )
