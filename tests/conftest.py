"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned_system(rng):
    """Diagonally dominant 6x6 system with a known solution."""
    n = 6
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def pivoting_system():
    """System whose natural first pivot is zero; needs a row swap."""
    A = np.array([
        [0.0, 2.0, 1.0],
        [1.0, 1.0, 1.0],
        [3.0, 0.0, 2.0],
    ])
    x_true = np.array([1.0, -1.0, 2.0])
    return A, A @ x_true, x_true


@pytest.fixture
def rank_deficient_consistent():
    """Second row is twice the first, b follows suit."""
    return np.array([[1.0, 2.0], [2.0, 4.0]]), np.array([1.0, 2.0])


@pytest.fixture
def rank_deficient_inconsistent():
    """Second row is twice the first, b does not follow."""
    return np.array([[1.0, 2.0], [2.0, 4.0]]), np.array([1.0, 3.0])
