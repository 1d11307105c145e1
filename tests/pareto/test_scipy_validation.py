"""
Parametrised validation against scipy.stats.pareto.

scipy parameterizes the same family as pareto(b=shape, scale=location).
Every function is compared on a grid of parameters and arguments at the
tolerance tier of the working precision.

Run:
    pytest tests/pareto/test_scipy_validation.py -v
"""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from paretostats.core.tolerances import select_tolerance
from paretostats.pareto import (
    ParetoDistribution,
    cdf,
    cdf_complement,
    kurtosis_excess,
    mean,
    median,
    pdf,
    quantile,
    quantile_complement,
    skewness,
    standard_deviation,
    variance,
)

PARAMS = [
    (1.0, 0.5),
    (1.0, 1.0),
    (2.0, 3.0),
    (0.25, 4.5),
    (10.0, 7.0),
    (3.5, 20.0),
]

FACTORS = [1.0, 1.05, 1.5, 2.0, 10.0, 1000.0]

PROBS = [0.0, 0.001, 0.1, 0.5, 0.9, 0.999]


def _ids(params):
    return [f"loc={loc}-shape={shape}" for loc, shape in params]


@pytest.fixture(params=PARAMS, ids=_ids(PARAMS))
def pair(request):
    location, shape = request.param
    return ParetoDistribution(location, shape), sp_stats.pareto(b=shape, scale=location)


class TestAgainstScipy:

    def test_pdf(self, pair):
        dist, ref = pair
        tol = select_tolerance(dist.dtype)
        for factor in FACTORS:
            x = float(dist.location) * factor
            assert_allclose(pdf(dist, x), ref.pdf(x), rtol=tol.rtol, atol=0)

    def test_cdf(self, pair):
        dist, ref = pair
        tol = select_tolerance(dist.dtype, near_support=True)
        for factor in FACTORS:
            x = float(dist.location) * factor
            assert_allclose(cdf(dist, x), ref.cdf(x), rtol=tol.rtol, atol=tol.atol)

    def test_cdf_complement(self, pair):
        dist, ref = pair
        tol = select_tolerance(dist.dtype)
        for factor in FACTORS:
            x = float(dist.location) * factor
            assert_allclose(cdf_complement(dist, x), ref.sf(x), rtol=tol.rtol, atol=0)

    def test_quantile(self, pair):
        dist, ref = pair
        tol = select_tolerance(dist.dtype)
        for p in PROBS:
            assert_allclose(quantile(dist, p), ref.ppf(p), rtol=tol.rtol)

    def test_quantile_complement(self, pair):
        dist, ref = pair
        tol = select_tolerance(dist.dtype)
        for q in PROBS[1:]:
            assert_allclose(quantile_complement(dist, q), ref.isf(q), rtol=tol.rtol)

    def test_median(self, pair):
        dist, ref = pair
        assert_allclose(median(dist), ref.median(), rtol=select_tolerance(dist.dtype).rtol)


MOMENT_PARAMS = [(1.0, 4.5), (2.0, 5.0), (0.5, 9.0), (100.0, 30.0)]


@pytest.mark.parametrize("location, shape", MOMENT_PARAMS, ids=_ids(MOMENT_PARAMS))
def test_moments_against_scipy(location, shape):
    dist = ParetoDistribution(location, shape)
    m, v, s, k = sp_stats.pareto.stats(shape, scale=location, moments='mvsk')
    tol = select_tolerance(dist.dtype)
    assert_allclose(mean(dist), m, rtol=tol.rtol)
    assert_allclose(variance(dist), v, rtol=tol.rtol)
    assert_allclose(standard_deviation(dist), np.sqrt(v), rtol=tol.rtol)
    assert_allclose(skewness(dist), s, rtol=1e-10)
    assert_allclose(kurtosis_excess(dist), k, rtol=1e-10)


@pytest.mark.parametrize("location, shape", PARAMS, ids=_ids(PARAMS))
def test_float32_against_scipy(location, shape):
    dist = ParetoDistribution(location, shape, dtype=np.float32)
    ref = sp_stats.pareto(b=shape, scale=location)
    tol = select_tolerance(np.float32)
    for factor in (1.5, 2.0, 10.0):
        x = location * factor
        assert_allclose(pdf(dist, x), ref.pdf(x), rtol=tol.rtol)
        assert_allclose(cdf_complement(dist, x), ref.sf(x), rtol=tol.rtol)
    for p in (0.1, 0.5, 0.9):
        assert_allclose(quantile(dist, p), ref.ppf(p), rtol=tol.rtol)
