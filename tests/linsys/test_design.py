"""
Tests for LinearSystemDesign and the boundary checks of the public API.
"""

import numpy as np
import pytest

from pylinsolve.linsys import LinearSystemDesign, solve, invert
from pylinsolve.core.exceptions import (
    DimensionError,
    InvalidDimensionError,
    ValidationError,
)


class TestDesignConstruction:

    def test_from_lists(self):
        design = LinearSystemDesign.from_arrays([[1, 2], [3, 4]], [5, 6])
        assert design.n == 2
        assert design.A.dtype == np.float64
        assert design.b.dtype == np.float64
        assert design.has_rhs

    def test_without_rhs(self):
        design = LinearSystemDesign.from_arrays(np.eye(3))
        assert not design.has_rhs
        with pytest.raises(ValueError, match="no right-hand side"):
            design.b

    def test_column_vector_rhs_flattened(self):
        design = LinearSystemDesign.from_arrays(np.eye(2), [[1.0], [2.0]])
        assert design.b.shape == (2,)

    def test_owns_copies(self):
        A = np.eye(2)
        b = np.array([1.0, 2.0])
        design = LinearSystemDesign.from_arrays(A, b)
        A[0, 0] = 99.0
        b[0] = 99.0
        assert design.A[0, 0] == 1.0
        assert design.b[0] == 1.0


class TestDesignValidation:

    def test_rhs_length_mismatch(self):
        with pytest.raises(DimensionError, match="A=3, b=2"):
            LinearSystemDesign.from_arrays(np.eye(3), [1.0, 2.0])

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            LinearSystemDesign.from_arrays(np.ones((3, 2)), [1.0, 2.0, 3.0])

    def test_one_dimensional_matrix(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            LinearSystemDesign.from_arrays([1.0, 2.0], [1.0, 2.0])

    def test_matrix_rhs(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            LinearSystemDesign.from_arrays(np.eye(2), np.ones((2, 2)))

    def test_empty_matrix(self):
        with pytest.raises(InvalidDimensionError):
            LinearSystemDesign.from_arrays(np.zeros((0, 0)), np.zeros(0))

    def test_nan_in_matrix(self):
        with pytest.raises(ValidationError, match="NaN"):
            LinearSystemDesign.from_arrays([[1.0, np.nan], [0.0, 1.0]], [1.0, 1.0])

    def test_inf_in_rhs(self):
        with pytest.raises(ValidationError, match="Inf"):
            LinearSystemDesign.from_arrays(np.eye(2), [1.0, np.inf])

    def test_max_dimension(self):
        with pytest.raises(ValidationError, match="max_dimension"):
            LinearSystemDesign.from_arrays(np.eye(4), np.ones(4), max_dimension=3)


class TestPublicBoundary:

    def test_mismatch_fails_before_arithmetic(self, monkeypatch):
        """No row operation may run when the dimensions are wrong."""
        import pylinsolve.linsys.backends.gaussian as gaussian_module

        def fail(*args, **kwargs):
            raise AssertionError("row operation executed")

        monkeypatch.setattr(gaussian_module, "select_pivot", fail)
        monkeypatch.setattr(gaussian_module, "swap_rows", fail)
        monkeypatch.setattr(gaussian_module, "eliminate", fail)
        with pytest.raises(DimensionError):
            solve(np.eye(3), [1.0, 2.0], method='gauss')

    def test_unknown_method(self):
        with pytest.raises(ValidationError, match="Unknown method"):
            solve(np.eye(2), [1.0, 1.0], method='cholesky')

    def test_max_dimension_on_invert(self):
        with pytest.raises(ValidationError, match="max_dimension=2"):
            invert(np.eye(3), max_dimension=2)

    def test_max_dimension_passthrough(self):
        result = solve(np.eye(3), np.ones(3), method='lu', max_dimension=3)
        np.testing.assert_allclose(result.solution, np.ones(3))
