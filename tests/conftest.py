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
def sample():
    """Six-value sample with a negative value and a non-integer."""
    return [4, 2, 10, -6, 1, 1.7]


@pytest.fixture
def weighted_sample():
    """Aligned values and weights, including a zero weight."""
    return [1.5, 2, 5.84], [2, 0, 1]
