"""Pytest configuration for the drumhead test suite."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so randomised strike points are reproducible."""
    return np.random.default_rng(1234)
