"""
LU factorization backend.

Doolittle decomposition P·A = L·U with partial pivoting and an explicit
permutation matrix, followed by forward substitution (L·y = P·b) and
back substitution (U·x = y).

LU has no notion of free variables. Whenever a pivot below EPSILON turns
up, the whole call is handed to Gaussian elimination and its result is
returned as is, so LU classifies singular systems exactly like the
elimination family.
"""

from dataclasses import replace
from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import EPSILON
from pylinsolve.core.compute.linalg.rowops import select_pivot, swap_rows, eliminate
from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import SystemParams, SolutionStatus
from pylinsolve.linsys.backends.gaussian import GaussianEliminationBackend


class LUBackend:
    """
    CPU backend for pivoted Doolittle LU.

    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_lu'

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Factor and solve.

        Algorithm:
            For k = 0..n-1:
                1. Pivot row = argmax |U[row, k]| over row >= k. Swap it into
                   place in U, P, P·b and in L's columns 0..k-1.
                2. If |U[k, k]| < EPSILON, delegate to Gaussian elimination.
                3. For rows below k: L[row, k] = U[row, k] / U[k, k], then
                   eliminate, leaving U[row, k] exactly 0.
            Then L gets a unit diagonal, L·y = P·b is solved forwards and
            U·x = y backwards.

        Returns:
            UNIQUE result with solution, L, U and P; or the Gaussian
            elimination result, annotated, when the matrix is singular.
        """
        timer = Timer()
        timer.start()

        n = design.n
        U = design.A.copy()
        L = np.zeros((n, n), dtype=np.float64)
        P = np.eye(n, dtype=np.float64)
        Pb = design.b.copy()

        pivot_rows: list[int] = []

        with timer.section('decomposition'):
            for k in range(n):
                pivot = select_pivot(U, k, k)
                swap_rows(U, k, pivot, Pb)
                swap_rows(P, k, pivot, L, cols=k)
                pivot_rows.append(pivot)

                if abs(U[k, k]) < EPSILON:
                    return self._delegate(design, column=k)

                for row in range(k + 1, n):
                    L[row, k] = U[row, k] / U[k, k]
                    eliminate(U, row, k, L[row, k], k)

            np.fill_diagonal(L, 1.0)

        with timer.section('forward_substitution'):
            y = np.zeros(n, dtype=np.float64)
            for i in range(n):
                y[i] = Pb[i] - L[i, :i] @ y[:i]

        with timer.section('back_substitution'):
            x = np.zeros(n, dtype=np.float64)
            for i in range(n - 1, -1, -1):
                if abs(U[i, i]) < EPSILON:
                    return self._delegate(design, column=i)
                x[i] = (y[i] - U[i, i + 1:] @ x[i + 1:]) / U[i, i]

        timer.stop()

        info: dict[str, Any] = {
            'method': 'lu',
            'n': n,
            'rank': n,
            'pivot_rows': pivot_rows,
        }

        return Result(
            params=SystemParams(
                status=SolutionStatus.UNIQUE,
                rank=n,
                solution=x,
                L=L,
                U=U,
                P=P,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )

    def _delegate(self, design: LinearSystemDesign, column: int) -> Result[SystemParams]:
        """
        Hand a singular system to Gaussian elimination.

        The delegate's params, timing and backend name are passed through
        untouched, so status, solution and rank are exactly what Gaussian
        elimination reports. The result is not fully verbatim: info gains
        'delegated_to' and 'delegated_at_column', and a warning is appended.
        """
        result = GaussianEliminationBackend().solve(design)
        return replace(
            result,
            info={**result.info, 'delegated_to': 'gauss', 'delegated_at_column': column},
            warnings=result.warnings + (
                f"LU pivot in column {column} below {EPSILON:g}; "
                f"result computed by Gaussian elimination",
            ),
        )
