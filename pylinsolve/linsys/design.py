"""
Linear System Design.

Design holds the coefficient matrix A and, for equation solving, the
right-hand side b. It validates once at the boundary so the backends can
trust their input, and it owns private float64 copies so nothing the
caller holds is ever modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pylinsolve.core.compute.tolerances import MAX_DIMENSION
from pylinsolve.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_square,
    check_min_dimension,
    check_max_dimension,
    check_consistent_length,
)


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Square system A·x = b, or a lone matrix A for inversion.

    Immutable after construction.

    Construction:
        LinearSystemDesign.from_arrays(A, b)   # equation solving
        LinearSystemDesign.from_arrays(A)      # inversion
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]] | None
    _n: int

    @classmethod
    def from_arrays(
        cls,
        A: ArrayLike,
        b: ArrayLike | None = None,
        *,
        max_dimension: int = MAX_DIMENSION,
    ) -> LinearSystemDesign:
        """
        Build a design from array-likes.

        Args:
            A: Square coefficient matrix (n x n)
            b: Right-hand side (n,), or None when only A is needed.
               A column vector of shape (n, 1) is accepted and flattened.
            max_dimension: Largest admissible n

        Returns:
            Validated design holding private copies of A and b

        Raises:
            ValidationError: Non-numeric or non-finite input, or n above
                max_dimension
            DimensionError: A not square, or b length != n
            InvalidDimensionError: n < 1
        """
        A_arr = check_array(A, 'A')
        check_2d(A_arr, 'A')
        check_square(A_arr, 'A')
        check_min_dimension(A_arr, 1, 'A')
        check_max_dimension(A_arr, max_dimension, 'A')
        check_finite(A_arr, 'A')

        b_arr = None
        if b is not None:
            b_arr = check_array(b, 'b')
            if b_arr.ndim == 2 and b_arr.shape[1] == 1:
                b_arr = b_arr.ravel()
            check_1d(b_arr, 'b')
            check_consistent_length(A_arr, b_arr, names=('A', 'b'))
            check_finite(b_arr, 'b')
            b_arr = b_arr.copy()

        return cls(_A=A_arr.copy(), _b=b_arr, _n=A_arr.shape[0])

    # === Properties ===

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n). Backends copy before mutating."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,)."""
        if self._b is None:
            raise ValueError("design has no right-hand side")
        return self._b

    @property
    def n(self) -> int:
        """Matrix dimension."""
        return self._n

    @property
    def has_rhs(self) -> bool:
        return self._b is not None
