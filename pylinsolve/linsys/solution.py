"""
Linear system solution types.

Contains the parameter payloads produced by backends and the user-facing
solution wrappers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result

if TYPE_CHECKING:
    from pylinsolve.linsys.design import LinearSystemDesign


class SolutionStatus(Enum):
    """Classification of the solution set of A·x = b."""
    UNIQUE = 'unique'
    INFINITE = 'infinite'
    NONE = 'none'


@dataclass(frozen=True)
class SystemParams:
    """
    Parameter payload for equation solving.

    solution is set iff status is UNIQUE. L, U and P are set only when the
    LU backend produced the result itself (not after delegation).
    """
    status: SolutionStatus
    rank: int
    solution: NDArray[np.floating[Any]] | None = None
    L: NDArray[np.floating[Any]] | None = None
    U: NDArray[np.floating[Any]] | None = None
    P: NDArray[np.floating[Any]] | None = None


@dataclass(frozen=True)
class InverseParams:
    """Parameter payload for matrix inversion."""
    inverse: NDArray[np.floating[Any]]


def _format_matrix(M: NDArray[np.floating[Any]], decimals: int) -> list[str]:
    """Render a matrix row by row for summary output."""
    width = decimals + 8
    return [
        "  [" + " ".join(f"{v:{width}.{decimals}f}" for v in row) + " ]"
        for row in M
    ]


@dataclass
class SystemSolution:
    """
    User-facing result of solving A·x = b.

    Wraps the backend Result and provides convenient accessors.
    """
    _result: Result[SystemParams]
    _design: 'LinearSystemDesign'

    # Cached computations
    _residual: NDArray[np.floating[Any]] | None = None

    @property
    def status(self) -> SolutionStatus:
        return self._result.params.status

    @property
    def is_unique(self) -> bool:
        return self.status is SolutionStatus.UNIQUE

    @property
    def solution(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.solution

    @property
    def L(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.L

    @property
    def U(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.U

    @property
    def P(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.P

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def residual(self) -> NDArray[np.floating[Any]] | None:
        """
        A·x − b for a unique solution, None otherwise.

        Computed from the caller's original A and b, not from the reduced
        working copies.
        """
        if self.solution is None:
            return None
        if self._residual is None:
            self._residual = self._design.A @ self.solution - self._design.b
        return self._residual

    @property
    def residual_norm(self) -> float | None:
        """Infinity norm of the residual, None when there is no solution."""
        r = self.residual
        if r is None:
            return None
        return float(np.max(np.abs(r)))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text report of the solve."""
        lines = [
            "Linear System Results",
            "=" * 60,
            f"Method: {self.info.get('method', '?')}",
            f"Dimension: {self._design.n}",
            f"Rank: {self.rank}",
            f"Status: {self.status.value}",
        ]

        if self.status is SolutionStatus.INFINITE:
            lines.append("The system has infinitely many solutions.")
        elif self.status is SolutionStatus.NONE:
            lines.append("The system is inconsistent and has no solution.")
        else:
            lines.append("")
            lines.append("Solution:")
            lines.append("-" * 60)
            for i, v in enumerate(self.solution):
                lines.append(f"  x[{i}] = {v:14.4f}")
            lines.append(f"Residual (max abs): {self.residual_norm:.3e}")

        for label, M in (('L', self.L), ('U', self.U), ('P', self.P)):
            if M is not None:
                lines.append("")
                lines.append(f"{label}:")
                lines.extend(_format_matrix(M, 4))

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        for w in self.warnings:
            lines.append(f"Note: {w}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SystemSolution(n={self._design.n}, status={self.status.value}, "
            f"rank={self.rank}, backend={self.backend_name!r})"
        )


@dataclass
class InverseSolution:
    """
    User-facing result of inverting A.

    Only ever constructed for an invertible matrix; singular input raises
    SingularMatrixError instead.
    """
    _result: Result[InverseParams]
    _design: 'LinearSystemDesign'

    @property
    def inverse(self) -> NDArray[np.floating[Any]]:
        return self._result.params.inverse

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def apply(self, b: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """Matrix-vector product A⁻¹·b."""
        return self.inverse @ b

    def summary(self) -> str:
        """Generate a plain-text report of the inversion."""
        lines = [
            "Matrix Inverse Results",
            "=" * 60,
            f"Dimension: {self._design.n}",
            "",
            "Inverse (A⁻¹):",
        ]
        lines.extend(_format_matrix(self.inverse, 4))
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"InverseSolution(n={self._design.n}, backend={self.backend_name!r})"
