"""
Elementary row operations shared by every direct solver.

All functions mutate the algorithm-local buffers they are handed and
nothing else; callers copy their inputs before the first call. Companion
arrays (the right-hand side, the identity being turned into an inverse,
the permutation matrix, the built part of L) receive exactly the same row
operation as the working matrix so that every structure stays consistent.
1-D companions are treated as a column, 2-D companions row-wise.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def select_pivot(M: NDArray[np.floating[Any]], col: int, from_row: int) -> int:
    """
    Partial pivoting: row in [from_row, n) with the largest |M[row, col]|.

    Ties keep the first (lowest-index) maximal row, which is what
    np.argmax guarantees.

    Args:
        M: Working matrix
        col: Column being eliminated
        from_row: First row still available as a pivot

    Returns:
        Absolute row index of the pivot
    """
    return from_row + int(np.argmax(np.abs(M[from_row:, col])))


def swap_rows(
    M: NDArray[np.floating[Any]],
    i: int,
    j: int,
    *companions: NDArray[np.floating[Any]],
    cols: int | None = None,
) -> None:
    """
    Swap rows i and j of M and of every companion.

    Args:
        M: Working matrix
        i, j: Rows to exchange
        *companions: Arrays whose rows move together with M's
        cols: If given, 2-D companions only swap their first `cols`
            columns (the already-built sub-block of L)
    """
    if i == j:
        return
    M[[i, j]] = M[[j, i]]
    for C in companions:
        if C.ndim == 1:
            C[i], C[j] = C[j], C[i]
        elif cols is None:
            C[[i, j]] = C[[j, i]]
        else:
            C[[i, j], :cols] = C[[j, i], :cols]


def scale_row(
    M: NDArray[np.floating[Any]],
    row: int,
    divisor: float,
    *companions: NDArray[np.floating[Any]],
) -> None:
    """Divide a row of M, and the same row of every companion, by divisor."""
    M[row] /= divisor
    for C in companions:
        C[row] /= divisor


def eliminate(
    M: NDArray[np.floating[Any]],
    target: int,
    source: int,
    factor: float,
    from_col: int,
    *companions: NDArray[np.floating[Any]],
) -> None:
    """
    Row update R_target -= factor * R_source.

    Only columns from `from_col` on are touched in M; entries to the left
    are already zero in both rows. The eliminated entry M[target, from_col]
    is set to exactly 0 instead of whatever rounding leaves behind.
    Companions are updated over their full row.
    """
    M[target, from_col:] -= factor * M[source, from_col:]
    M[target, from_col] = 0.0
    for C in companions:
        C[target] -= factor * C[source]
