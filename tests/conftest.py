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
def unique_system():
    """3x3 system with the unique solution [2, 3, -1]."""
    coefficients = [[2, 1, -1], [-3, -1, 2], [-2, 1, 2]]
    constants = [8, -11, -3]
    expected = np.array([2.0, 3.0, -1.0])
    return coefficients, constants, expected


@pytest.fixture
def inconsistent_system():
    """Parallel equations with different constants: no solution."""
    return [[1, 1], [1, 1]], [2, 5]


@pytest.fixture
def underdetermined_system():
    """Second equation is twice the first: infinite solutions."""
    return [[1, 1], [2, 2]], [2, 4]


@pytest.fixture
def well_conditioned(rng):
    """Random diagonally dominant 5x5 matrix (invertible, no pivoting needed)."""
    A = rng.standard_normal((5, 5))
    A += np.diag(np.abs(A).sum(axis=1) + 1.0)
    return A
