"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from paretostats.pareto import ParetoDistribution


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def dist():
    """Pareto(location=2, shape=3), the worked example used throughout."""
    return ParetoDistribution(2.0, 3.0)


@pytest.fixture
def heavy_tail():
    """Pareto(location=1, shape=0.5): infinite mean and variance."""
    return ParetoDistribution(1.0, 0.5)


@pytest.fixture
def light_tail():
    """Pareto(location=2, shape=5): every moment defined."""
    return ParetoDistribution(2.0, 5.0)


@pytest.fixture(params=[np.float64, np.float32], ids=['fp64', 'fp32'])
def dtype(request):
    """Every supported working precision."""
    return np.dtype(request.param)


@pytest.fixture
def random_params(rng):
    """Twenty (location, shape) pairs spanning light and heavy tails."""
    locations = rng.uniform(0.1, 50.0, size=20)
    shapes = rng.uniform(0.2, 12.0, size=20)
    return list(zip(locations.tolist(), shapes.tolist()))
