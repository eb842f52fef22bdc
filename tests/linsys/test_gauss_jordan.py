"""
Tests for gauss_jordan().
"""

import numpy as np
import pytest

from pylinsolve.linsys import gauss_jordan, SolutionStatus
from pylinsolve.core.exceptions import DimensionError


class TestGaussJordanUnique:

    def test_identity(self):
        result = gauss_jordan(np.eye(3), [1.0, 2.0, 3.0])
        assert result.status is SolutionStatus.UNIQUE
        np.testing.assert_allclose(result.solution, [1.0, 2.0, 3.0])

    def test_scaled_diagonal(self):
        result = gauss_jordan([[2, 0], [0, 2]], [4, 6])
        np.testing.assert_allclose(result.solution, [2.0, 3.0])

    def test_one_by_one(self):
        result = gauss_jordan([[5]], [10])
        np.testing.assert_allclose(result.solution, [2.0])

    def test_needs_pivoting(self, pivoting_system):
        A, b, x_true = pivoting_system
        result = gauss_jordan(A, b)
        np.testing.assert_allclose(result.solution, x_true, atol=1e-12)

    def test_residual_small(self, well_conditioned_system):
        A, b, x_true = well_conditioned_system
        result = gauss_jordan(A, b)
        np.testing.assert_allclose(result.solution, x_true, rtol=1e-10, atol=1e-12)
        assert result.residual_norm <= 1e-6

    def test_backend_name(self):
        result = gauss_jordan(np.eye(2), [1.0, 1.0])
        assert result.backend_name == 'cpu_gauss_jordan'
        assert result.info['method'] == 'gauss-jordan'
        assert 'reduction' in result.timing


class TestGaussJordanSingular:

    def test_infinite(self, rank_deficient_consistent):
        A, b = rank_deficient_consistent
        result = gauss_jordan(A, b)
        assert result.status is SolutionStatus.INFINITE
        assert result.rank == 1
        assert result.solution is None

    def test_none(self, rank_deficient_inconsistent):
        A, b = rank_deficient_inconsistent
        result = gauss_jordan(A, b)
        assert result.status is SolutionStatus.NONE
        assert result.solution is None

    def test_three_by_three_inconsistent(self):
        A = [[1.0, 1.0, 1.0], [1.0, 2.0, 3.0], [2.0, 3.0, 4.0]]
        result = gauss_jordan(A, [1.0, 2.0, 4.0])
        assert result.status is SolutionStatus.NONE

    def test_three_by_three_consistent(self):
        A = [[1.0, 1.0, 1.0], [1.0, 2.0, 3.0], [2.0, 3.0, 4.0]]
        result = gauss_jordan(A, [1.0, 2.0, 3.0])
        assert result.status is SolutionStatus.INFINITE
        assert result.rank == 2

    def test_tiny_coefficients_with_rhs_above_epsilon_is_none(self):
        result = gauss_jordan([[1.0, 0.0], [0.0, 1e-11]], [1.0, 1e-6])
        assert result.status is SolutionStatus.NONE
        assert result.rank == 1

    def test_tiny_coefficients_with_rhs_below_epsilon_is_infinite(self):
        result = gauss_jordan([[1.0, 0.0], [0.0, 1e-11]], [1.0, 1e-12])
        assert result.status is SolutionStatus.INFINITE
        assert result.rank == 1

    def test_rhs_below_epsilon_is_consistent(self):
        A = [[1.0, 1.0], [1.0, 1.0]]
        result = gauss_jordan(A, [1.0, 1.0 + 1e-12])
        assert result.status is SolutionStatus.INFINITE


class TestGaussJordanContract:

    def test_inputs_not_mutated(self, pivoting_system):
        A, b, _ = pivoting_system
        A_before, b_before = A.copy(), b.copy()
        gauss_jordan(A, b)
        np.testing.assert_array_equal(A, A_before)
        np.testing.assert_array_equal(b, b_before)

    def test_solution_not_aliased_to_input(self):
        b = np.array([1.0, 2.0])
        result = gauss_jordan(np.eye(2), b)
        result.solution[0] = 99.0
        assert b[0] == 1.0

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            gauss_jordan(np.ones((2, 3)), [1.0, 2.0])
