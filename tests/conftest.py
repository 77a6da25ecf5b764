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
def square_matrix():
    """Nonsingular 4x4 matrix that needs no pivoting (det = 5)."""
    return np.array([
        [1.0, 2.0, 3.0, 0.0],
        [-1.0, 1.0, 2.0, -1.0],
        [3.0, 1.0, 2.0, 4.0],
        [1.0, 1.0, 1.0, 1.0],
    ])


@pytest.fixture
def eigen_problem(rng):
    """A = V diag(-2, 0.4, -0.1, 0.01) V^{-1} with well-conditioned V."""
    V = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
    D = np.diag([-2.0, 0.4, -0.1, 0.01])
    A = V @ D @ np.linalg.inv(V)
    return A, V
