"""
Pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from streamta.config import reset_config


@pytest.fixture
def random_walk() -> list[float]:
    """Seeded random-walk closes (finite floats)."""
    rng = np.random.default_rng(42)
    steps = rng.normal(0.0, 1.0, size=400)
    return [float(x) for x in 100.0 + np.cumsum(steps)]


@pytest.fixture
def integer_closes() -> list[float]:
    """Integer-valued floats, so running sums are exact in f32 and f64."""
    rng = np.random.default_rng(7)
    return [float(x) for x in rng.integers(-50, 50, size=300)]


@pytest.fixture
def fresh_config():
    """Drop the config singleton before and after a test that edits the environment."""
    reset_config()
    yield
    reset_config()
