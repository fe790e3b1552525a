"""
Shared fixtures for the particle filter tests.
"""

import numpy as np
import pytest

from landmark_map import Map


@pytest.fixture
def rng():
    """Seeded generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_map():
    """Four landmarks on the corners of a 10 m square centred on the origin."""
    return Map([
        (1, 5.0, 5.0),
        (2, -5.0, 5.0),
        (3, -5.0, -5.0),
        (4, 5.0, -5.0),
    ])


@pytest.fixture
def zero_noise():
    return [0.0, 0.0, 0.0]
