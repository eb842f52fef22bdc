"""
Direct solver backends.

Available backends:
    GaussianEliminationBackend: forward elimination + back substitution
    GaussJordanBackend: reduction to reduced row-echelon form
    LUBackend: pivoted Doolittle LU with permutation tracking
    GaussJordanInverseBackend: inversion on the augmented matrix [A | I]
"""

from pylinsolve.linsys.backends.gaussian import GaussianEliminationBackend
from pylinsolve.linsys.backends.gauss_jordan import GaussJordanBackend
from pylinsolve.linsys.backends.lu import LUBackend
from pylinsolve.linsys.backends.inverse import GaussJordanInverseBackend

__all__ = [
    "GaussianEliminationBackend",
    "GaussJordanBackend",
    "LUBackend",
    "GaussJordanInverseBackend",
]
