"""
Linear algebra kernels for PyLinSolve.

All functions follow these conventions:
    - Plain NumPy on float64 arrays, no LAPACK calls
    - Kernels mutate only the buffers handed to them
    - Errors are raised by callers, never by the kernels

Submodules:
    rowops: pivot selection, row swap, row scaling, row elimination
"""

from pylinsolve.core.compute.linalg.rowops import (
    select_pivot,
    swap_rows,
    scale_row,
    eliminate,
)

__all__ = [
    "select_pivot",
    "swap_rows",
    "scale_row",
    "eliminate",
]
