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
def small_system():
    """3x3 system with exact solution [1, 2, 3] and non-zero pivots."""
    A = np.array([
        [1.0, 2.0, 3.0],
        [2.0, 3.0, 1.0],
        [3.0, 1.0, 2.0],
    ])
    b = np.array([14.0, 11.0, 11.0])
    x_true = np.array([1.0, 2.0, 3.0])
    return A, b, x_true


@pytest.fixture
def spd_system():
    """4x4 symmetric positive-definite system with exact solution [1, 2, 3, 4]."""
    A = np.array([
        [6.0, 0.0, 1.0, 2.0],
        [0.0, 7.0, 3.0, 4.0],
        [1.0, 3.0, 8.0, 5.0],
        [2.0, 4.0, 5.0, 9.0],
    ])
    b = np.array([17.0, 39.0, 51.0, 61.0])
    x_true = np.array([1.0, 2.0, 3.0, 4.0])
    return A, b, x_true


@pytest.fixture
def random_spd(rng):
    """Well-conditioned random SPD system (n=8), exactly symmetric."""
    n = 8
    M = rng.standard_normal((n, n))
    B = M @ M.T + n * np.eye(n)
    A = 0.5 * (B + B.T)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def random_dominant(rng):
    """Random diagonally dominant system (n=10): naive elimination is safe."""
    n = 10
    A = rng.standard_normal((n, n)) + 2 * n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true
