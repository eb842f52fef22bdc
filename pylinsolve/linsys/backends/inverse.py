"""
Matrix inversion backend.

Gauss-Jordan on the augmented matrix [A | I]: every row operation that
turns A into the identity is applied to I, which ends up as A⁻¹.
"""

from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import SingularMatrixError
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import EPSILON
from pylinsolve.core.compute.linalg.rowops import (
    select_pivot, swap_rows, scale_row, eliminate,
)
from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import InverseParams


class GaussJordanInverseBackend:
    """
    CPU backend for Gauss-Jordan inversion.

    Implements the Backend protocol for LinearSystemDesign -> InverseParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_inverse'

    def solve(self, design: LinearSystemDesign) -> Result[InverseParams]:
        """
        Invert A.

        Raises:
            SingularMatrixError: As soon as a column has no pivot of
                magnitude EPSILON or more. No partial inverse is returned.
        """
        timer = Timer()
        timer.start()

        A = design.A.copy()
        n = design.n
        I = np.eye(n, dtype=np.float64)

        pivot_rows: list[int] = []

        with timer.section('reduction'):
            for i in range(n):
                pivot = select_pivot(A, i, i)
                swap_rows(A, i, pivot, I)
                pivot_rows.append(pivot)

                if abs(A[i, i]) < EPSILON:
                    raise SingularMatrixError(
                        f"A is singular: no pivot with magnitude >= {EPSILON:g} "
                        f"in column {i} (best {abs(A[i, i]):.3e})",
                        matrix_name='A',
                        column=i,
                        pivot=float(abs(A[i, i])),
                    )

                scale_row(A, i, A[i, i], I)

                for row in range(n):
                    if row != i:
                        eliminate(A, row, i, A[row, i], i, I)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'inverse',
            'n': n,
            'pivot_rows': pivot_rows,
        }

        return Result(
            params=InverseParams(inverse=I),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
