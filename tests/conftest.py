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
def line_points():
    """Eight points exactly on y = 2.5x - 1.25."""
    x = np.array([-3.0, -1.5, 0.0, 1.0, 2.5, 4.0, 6.0, 7.5], dtype=np.float32)
    k_true, b_true = 2.5, -1.25
    y = (k_true * x + b_true).astype(np.float32)
    return x, y, k_true, b_true


@pytest.fixture
def plane_points():
    """Eight points exactly on z = 1.5x - 2y + 0.5."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 0.0, 1.0, 2.0, 3.0], dtype=np.float32)
    y = np.array([0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)
    a_true, b_true, c_true = 1.5, -2.0, 0.5
    z = (a_true * x + b_true * y + c_true).astype(np.float32)
    return x, y, z, a_true, b_true, c_true


@pytest.fixture
def calibration_points():
    """Noisy sensor calibration samples, roughly y = -10x + 5."""
    x = np.array([-2.8, -1.6, -0.5, 5.0, 5.4, 6.7, 10.3, 13.8], dtype=np.float32)
    y = np.array(
        [33.1, 21.1, 9.9, -45.2, -49.1, -61.9, -98.1, -132.99], dtype=np.float32
    )
    return x, y
