"""
Gauss-Jordan backend.

Reduces [A | b] straight to reduced row-echelon form: every pivot is
normalised to 1 and cleared from all other rows, so the transformed b is
the solution and no back substitution phase exists.
"""

from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import EPSILON
from pylinsolve.core.compute.linalg.rowops import (
    select_pivot, swap_rows, scale_row, eliminate,
)
from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import SystemParams, SolutionStatus


class GaussJordanBackend:
    """
    CPU backend for Gauss-Jordan reduction.

    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Solve A·x = b by reduction to RREF.

        Pivot choice and the skip-on-near-zero rule match Gaussian
        elimination. A row whose coefficients are all below EPSILON while
        its b entry is not makes the system inconsistent (NONE).
        """
        timer = Timer()
        timer.start()

        A = design.A.copy()
        b = design.b.copy()
        n = design.n

        pivot_rows: list[int] = []
        pivot_count = 0

        with timer.section('reduction'):
            for col in range(n):
                if pivot_count == n:
                    break
                pivot = select_pivot(A, col, pivot_count)
                if abs(A[pivot, col]) < EPSILON:
                    continue

                swap_rows(A, pivot_count, pivot, b)
                pivot_rows.append(pivot)

                scale_row(A, pivot_count, A[pivot_count, col], b)

                for row in range(n):
                    if row != pivot_count:
                        eliminate(A, row, pivot_count, A[row, col], col, b)

                pivot_count += 1

        zero_rows = np.all(np.abs(A) < EPSILON, axis=1)
        solution = None
        if np.any(zero_rows & (np.abs(b) > EPSILON)):
            status = SolutionStatus.NONE
        elif pivot_count < n:
            status = SolutionStatus.INFINITE
        else:
            status = SolutionStatus.UNIQUE
            solution = b

        timer.stop()

        info: dict[str, Any] = {
            'method': 'gauss-jordan',
            'n': n,
            'rank': pivot_count,
            'pivot_rows': pivot_rows,
        }

        return Result(
            params=SystemParams(status=status, rank=pivot_count, solution=solution),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
