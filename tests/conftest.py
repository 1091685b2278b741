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
def well_conditioned(rng):
    """Diagonally dominant 5x5 matrix as a flat buffer."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    return A.ravel(), n


@pytest.fixture
def observations(rng):
    """50 observations of 4 variables, flat row-major."""
    rows, cols = 50, 4
    data = rng.standard_normal((rows, cols)) * np.array([1.0, 2.0, 0.5, 10.0])
    return data.ravel(), rows, cols
