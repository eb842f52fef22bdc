"""
Exception hierarchy for PyLinSolve.

All exceptions inherit from PyLinSolveError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Only caller errors and failed inversions raise; singular systems
      are reported through the solution status instead
"""


class PyLinSolveError(Exception):
    """Base exception for all PyLinSolve errors."""
    pass


class ValidationError(PyLinSolveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when the coefficient matrix is not square, when the right-hand
    side length does not match the matrix size, or when an array has the
    wrong number of dimensions.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    Matrix dimension is below the minimum of 1.
    """
    pass


class NumericalError(PyLinSolveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an operation requires invertibility but no usable pivot
    exists for some column.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Column index at which elimination found no pivot
        pivot: Magnitude of the best pivot candidate in that column
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        pivot: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.pivot = pivot
