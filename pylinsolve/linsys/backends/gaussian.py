"""
Gaussian elimination backend.

Forward elimination with partial pivoting to row-echelon form, then back
substitution. This is also the classification reference: the LU backend
hands singular systems to it so that every method agrees on UNIQUE /
INFINITE / NONE.
"""

from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import EPSILON
from pylinsolve.core.compute.linalg.rowops import select_pivot, swap_rows, eliminate
from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import SystemParams, SolutionStatus


class GaussianEliminationBackend:
    """
    CPU backend for Gaussian elimination.

    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Solve A·x = b by Gaussian elimination.

        Algorithm:
            1. For each column, pick the largest remaining |entry| as pivot.
               Columns whose best candidate is below EPSILON are skipped
               (free variable) and do not consume a pivot row.
            2. Swap the pivot row into place and clear the column below it.
            3. Rows past the last pivot must have |b| <= EPSILON, else the
               system is inconsistent (NONE).
            4. Fewer pivots than unknowns means INFINITE; otherwise back
               substitution yields the UNIQUE solution.
        """
        timer = Timer()
        timer.start()

        A = design.A.copy()
        b = design.b.copy()
        n = design.n

        pivot_rows: list[int] = []
        pivot_count = 0

        with timer.section('forward_elimination'):
            for col in range(n):
                if pivot_count == n:
                    break
                pivot = select_pivot(A, col, pivot_count)
                if abs(A[pivot, col]) < EPSILON:
                    continue

                swap_rows(A, pivot_count, pivot, b)
                pivot_rows.append(pivot)

                for row in range(pivot_count + 1, n):
                    factor = A[row, col] / A[pivot_count, col]
                    eliminate(A, row, pivot_count, factor, col, b)

                pivot_count += 1

        solution = None
        if np.any(np.abs(b[pivot_count:]) > EPSILON):
            status = SolutionStatus.NONE
        elif pivot_count < n:
            status = SolutionStatus.INFINITE
        else:
            status = SolutionStatus.UNIQUE
            with timer.section('back_substitution'):
                solution = back_substitute(A, b)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'gauss',
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


def back_substitute(U: np.ndarray, y: np.ndarray) -> np.ndarray:
    """
    Solve the upper-triangular system U·x = y from the last row up.

    x[i] = (y[i] - Σ_{j>i} U[i, j]·x[j]) / U[i, i]

    The caller guarantees every diagonal entry is a usable pivot.
    """
    n = U.shape[0]
    x = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        x[i] = (y[i] - U[i, i + 1:] @ x[i + 1:]) / U[i, i]
    return x
