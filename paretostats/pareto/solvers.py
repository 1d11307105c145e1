"""
Functions of the Pareto distribution.

Every public function validates its argument and the distribution's
parameters through the distribution's error policy, then evaluates a
closed form in the distribution's working precision.

Public API:
    value_range(dist), support(dist)
    pdf(dist, x)
    cdf(dist, x),        cdf_complement(dist, x)
    quantile(dist, p),   quantile_complement(dist, q)
    mean, mode, median, variance, standard_deviation,
    skewness, kurtosis, kurtosis_excess, coefficient_of_variation
    hazard(dist, x), chf(dist, x)
    describe(dist)  - every moment at once, undefined ones as warnings

cdf() and quantile() also accept a single Complement built with
complement(dist, value), selecting the upper-tail variant.
"""

from __future__ import annotations

from dataclasses import replace

import numpy as np
from scipy import special as sp_special

from paretostats.core.exceptions import ValidationError
from paretostats.core.policies import DOMAIN, OVERFLOW, IgnorePolicy
from paretostats.core.precision import max_value
from paretostats.core.result import Result
from paretostats.core.validation import check_scalar, format_value
from paretostats.pareto._common import (
    check_dist,
    check_dist_and_probability,
    check_dist_and_x,
    check_pareto,
    qualified,
)
from paretostats.pareto.complement import Complement
from paretostats.pareto.design import ParetoDistribution
from paretostats.pareto.solution import ParetoMoments, ParetoSolution


def _ensure_dist(dist) -> ParetoDistribution:
    if not isinstance(dist, ParetoDistribution):
        raise ValidationError(
            f"dist: expected ParetoDistribution, got {type(dist).__name__}"
        )
    return dist


def _unpack(name: str, dist, arg):
    """Split (dist, arg) or (Complement,) into (dist, arg, is_complement)."""
    if isinstance(dist, Complement):
        if arg is not None:
            raise ValidationError(
                f"{name}: pass either complement(dist, value) or (dist, value), not both"
            )
        return _ensure_dist(dist.dist), dist.param, True
    if arg is None:
        raise ValidationError(f"{name}: missing argument for {name}(dist, value)")
    return _ensure_dist(dist), arg, False


# ---------------------------------------------------------------------------
# Kernels: parameters already validated, arguments already converted
# ---------------------------------------------------------------------------

def _pdf(location, shape, x):
    if x < location:
        return x.dtype.type(0)
    # shape * location**shape / x**(shape + 1), arranged so that neither
    # power overflows for large location or x
    return (shape / x) * (location / x) ** shape


def _sf(location, shape, x):
    if x <= location:
        return x.dtype.type(1)
    return (location / x) ** shape


def _variance(location, shape):
    return (location * location * shape) / (
        (shape - 1) * (shape - 1) * (shape - 2)
    )


def _undefined(function, dist, moment: str, bound: int):
    return dist.policy.report(
        DOMAIN, function,
        f"{moment} is undefined for shape <= {bound}, "
        f"but got {format_value(dist.shape)}.",
        dist.shape,
    )


# ---------------------------------------------------------------------------
# Support and range
# ---------------------------------------------------------------------------

def value_range(dist: ParetoDistribution) -> tuple[np.floating, np.floating]:
    """Range of permissible values for the random variable: (0, max_value)."""
    dist = _ensure_dist(dist)
    return dist.dtype.type(0), max_value(dist.dtype)


def support(dist: ParetoDistribution) -> tuple[np.floating, np.floating]:
    """
    Range where the pdf is positive and the cdf increases:
    (location, max_value).
    """
    dist = _ensure_dist(dist)
    return dist.location, max_value(dist.dtype)


# ---------------------------------------------------------------------------
# Density, distribution and quantile functions
# ---------------------------------------------------------------------------

def pdf(dist: ParetoDistribution, x) -> np.floating:
    """
    Probability density at ``x``.

    Zero for ``x < location`` whatever the shape; otherwise
    ``shape * location**shape / x**(shape + 1)``.
    """
    function = qualified('pdf')
    dist = _ensure_dist(dist)
    x = check_scalar(x, 'x', dist.dtype)
    failed = check_dist_and_x(function, dist, x)
    if failed is not None:
        return failed
    with np.errstate(over='ignore', under='ignore'):
        return dist.dtype.type(_pdf(dist.location, dist.shape, x))


def cdf(dist: ParetoDistribution | Complement, x=None) -> np.floating:
    """
    Cumulative probability P(X <= x).

    Zero for ``x <= location``; otherwise ``1 - (location/x)**shape``,
    evaluated as ``-powm1(location/x, shape)`` so that a result close to
    zero does not lose its significant digits to cancellation.

    ``cdf(complement(dist, x))`` returns P(X > x) instead.
    """
    dist, x, upper = _unpack('cdf', dist, x)
    if upper:
        return cdf_complement(dist, x)

    function = qualified('cdf')
    x = check_scalar(x, 'x', dist.dtype)
    failed = check_dist_and_x(function, dist, x)
    if failed is not None:
        return failed
    if x <= dist.location:
        return dist.dtype.type(0)
    return dist.dtype.type(-sp_special.powm1(dist.location / x, dist.shape))


def cdf_complement(dist: ParetoDistribution, x) -> np.floating:
    """Upper-tail probability P(X > x): 1 at or below the location, else (location/x)**shape."""
    function = qualified('cdf_complement')
    dist = _ensure_dist(dist)
    x = check_scalar(x, 'x', dist.dtype)
    failed = check_dist_and_x(function, dist, x)
    if failed is not None:
        return failed
    with np.errstate(under='ignore'):
        return dist.dtype.type(_sf(dist.location, dist.shape, x))


def quantile(dist: ParetoDistribution | Complement, p=None) -> np.floating:
    """
    Inverse of cdf(): the x with P(X <= x) = p.

    ``p == 0`` gives exactly the location and ``p == 1`` gives the largest
    finite value of the working precision; in between
    ``location / (1 - p)**(1/shape)``.

    ``quantile(complement(dist, q))`` inverts the upper tail instead.
    """
    dist, p, upper = _unpack('quantile', dist, p)
    if upper:
        return quantile_complement(dist, p)

    function = qualified('quantile')
    p = check_scalar(p, 'p', dist.dtype)
    failed = check_dist_and_probability(function, dist, p)
    if failed is not None:
        return failed
    if p == 0:
        return dist.location
    if p == 1:
        return max_value(dist.dtype)
    with np.errstate(over='ignore'):
        return dist.dtype.type(dist.location / (1 - p) ** (1 / dist.shape))


def quantile_complement(dist: ParetoDistribution, q) -> np.floating:
    """
    Inverse of cdf_complement(): the x with P(X > x) = q.

    ``q == 1`` gives exactly the location and ``q == 0`` the largest finite
    value; in between ``location / q**(1/shape)``.
    """
    function = qualified('quantile_complement')
    dist = _ensure_dist(dist)
    q = check_scalar(q, 'q', dist.dtype)
    failed = check_dist_and_probability(function, dist, q)
    if failed is not None:
        return failed
    if q == 1:
        return dist.location
    if q == 0:
        return max_value(dist.dtype)
    with np.errstate(over='ignore'):
        return dist.dtype.type(dist.location / q ** (1 / dist.shape))


# ---------------------------------------------------------------------------
# Moments
# ---------------------------------------------------------------------------

def mean(dist: ParetoDistribution) -> np.floating:
    """
    Mean, ``shape * location / (shape - 1)``.

    Infinite for shape <= 1; the largest finite value is returned and no
    error is reported.
    """
    function = qualified('mean')
    dist = _ensure_dist(dist)
    failed = check_dist(function, dist)
    if failed is not None:
        return failed
    if dist.shape > 1:
        with np.errstate(over='ignore'):
            return dist.dtype.type(dist.shape * dist.location / (dist.shape - 1))
    return max_value(dist.dtype)


def mode(dist: ParetoDistribution) -> np.floating:
    """Mode, equal to the location."""
    dist = _ensure_dist(dist)
    failed = check_dist(qualified('mode'), dist)
    if failed is not None:
        return failed
    return dist.location


def median(dist: ParetoDistribution) -> np.floating:
    """Median, ``location * 2**(1/shape)``."""
    dist = _ensure_dist(dist)
    failed = check_dist(qualified('median'), dist)
    if failed is not None:
        return failed
    two = dist.dtype.type(2)
    with np.errstate(over='ignore'):
        return dist.dtype.type(dist.location * two ** (1 / dist.shape))


def variance(dist: ParetoDistribution) -> np.floating:
    """
    Variance, defined for shape > 2.

    Reports a domain error for shape <= 2, where the variance is infinite.
    """
    return _checked_variance(qualified('variance'), _ensure_dist(dist))


def _checked_variance(function: str, dist: ParetoDistribution) -> np.floating:
    failed = check_dist(function, dist)
    if failed is not None:
        return failed
    if dist.shape > 2:
        with np.errstate(over='ignore'):
            return dist.dtype.type(_variance(dist.location, dist.shape))
    return _undefined(function, dist, 'variance', 2)


def standard_deviation(dist: ParetoDistribution) -> np.floating:
    """Square root of the variance; same domain as variance()."""
    dist = _ensure_dist(dist)
    return dist.dtype.type(
        np.sqrt(_checked_variance(qualified('standard_deviation'), dist))
    )


def skewness(dist: ParetoDistribution) -> np.floating:
    """Skewness, defined for shape > 3."""
    function = qualified('skewness')
    dist = _ensure_dist(dist)
    failed = check_dist(function, dist)
    if failed is not None:
        return failed
    shape = dist.shape
    if shape > 3:
        return dist.dtype.type(
            np.sqrt((shape - 2) / shape) * 2 * (shape + 1) / (shape - 3)
        )
    return _undefined(function, dist, 'skewness', 3)


def kurtosis(dist: ParetoDistribution) -> np.floating:
    """Kurtosis (not excess), defined for shape > 4."""
    function = qualified('kurtosis')
    dist = _ensure_dist(dist)
    failed = check_dist(function, dist)
    if failed is not None:
        return failed
    shape = dist.shape
    if shape > 4:
        with np.errstate(over='ignore'):
            return dist.dtype.type(
                3 * ((shape - 2) * (3 * shape * shape + shape + 2))
                / (shape * (shape - 3) * (shape - 4))
            )
    return _undefined(function, dist, 'kurtosis', 4)


def kurtosis_excess(dist: ParetoDistribution) -> np.floating:
    """Excess kurtosis, kurtosis() - 3, defined for shape > 4."""
    function = qualified('kurtosis_excess')
    dist = _ensure_dist(dist)
    failed = check_dist(function, dist)
    if failed is not None:
        return failed
    shape = dist.shape
    if shape > 4:
        with np.errstate(over='ignore'):
            return dist.dtype.type(
                6 * (shape * shape * shape + shape * shape - 6 * shape - 2)
                / (shape * (shape - 3) * (shape - 4))
            )
    return _undefined(function, dist, 'kurtosis_excess', 4)


# ---------------------------------------------------------------------------
# Derived quantities
# ---------------------------------------------------------------------------

def coefficient_of_variation(dist: ParetoDistribution) -> np.floating:
    """
    Standard deviation divided by the mean, ``1 / sqrt(shape*(shape-2))``.

    Same domain as variance(). Independent of the location.
    """
    function = qualified('coefficient_of_variation')
    dist = _ensure_dist(dist)
    failed = check_dist(function, dist)
    if failed is not None:
        return failed
    shape = dist.shape
    if shape > 2:
        return dist.dtype.type(1 / np.sqrt(shape * (shape - 2)))
    return _undefined(function, dist, 'variance', 2)


def hazard(dist: ParetoDistribution, x) -> np.floating:
    """
    Hazard function ``pdf(x) / cdf_complement(x)``.

    Zero below the location and ``shape / x`` from the location on.
    Reports an overflow error when ``shape / x`` is not representable.
    """
    function = qualified('hazard')
    dist = _ensure_dist(dist)
    x = check_scalar(x, 'x', dist.dtype)
    failed = check_dist_and_x(function, dist, x)
    if failed is not None:
        return failed
    if x < dist.location:
        return dist.dtype.type(0)
    with np.errstate(over='ignore'):
        h = dist.shape / x
    if not np.isfinite(h):
        return dist.policy.report(
            OVERFLOW, function,
            f"hazard overflows at x = {format_value(x)}.",
            x,
        )
    return dist.dtype.type(h)


def chf(dist: ParetoDistribution, x) -> np.floating:
    """Cumulative hazard function ``-log(cdf_complement(x))``."""
    function = qualified('chf')
    dist = _ensure_dist(dist)
    x = check_scalar(x, 'x', dist.dtype)
    failed = check_dist_and_x(function, dist, x)
    if failed is not None:
        return failed
    if x <= dist.location:
        return dist.dtype.type(0)
    # -log((location/x)**shape), without underflowing the power
    return dist.dtype.type(-dist.shape * np.log(dist.location / x))


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

_DESCRIBE_FUNCTIONS = (
    ("mean", mean),
    ("mode", mode),
    ("median", median),
    ("variance", variance),
    ("standard_deviation", standard_deviation),
    ("skewness", skewness),
    ("kurtosis", kurtosis),
    ("kurtosis_excess", kurtosis_excess),
    ("coefficient_of_variation", coefficient_of_variation),
)


def describe(dist: ParetoDistribution) -> ParetoSolution:
    """
    Compute every moment of a distribution at once.

    Moments are evaluated with a non-raising policy: a moment that is
    undefined for the distribution's shape comes back as None and the
    reason is recorded in ``warnings``. Invalid parameters are still
    reported through the distribution's own policy.

    Parameters
    ----------
    dist : ParetoDistribution

    Returns
    -------
    ParetoSolution with every defined moment and the quartiles populated.
    """
    function = qualified('describe')
    dist = _ensure_dist(dist)
    info = {
        'location': float(dist.location),
        'shape': float(dist.shape),
        'dtype': dist.dtype.name,
    }

    probe_policy = IgnorePolicy()
    if check_pareto(function, dist.location, dist.shape, probe_policy) is not None:
        record = probe_policy.last_error
        dist.policy.report(record.kind, record.function, record.message, record.value)
        result = Result(params=ParetoMoments(), info=info, warnings=(record.message,))
        return ParetoSolution(_result=result, _distribution=dist)

    probe = replace(dist, policy=probe_policy)
    warnings_list: list[str] = []
    values = {}
    for name, func in _DESCRIBE_FUNCTIONS:
        probe_policy.clear()
        value = func(probe)
        if probe_policy.last_error is None:
            values[name] = value
            continue
        values[name] = None
        if probe_policy.last_error.message not in warnings_list:
            warnings_list.append(probe_policy.last_error.message)

    if dist.shape <= 1:
        warnings_list.insert(
            0, f"mean is infinite for shape <= 1, but got {format_value(dist.shape)}."
        )

    values['quartiles'] = (
        quantile(probe, 0.25),
        values['median'],
        quantile(probe, 0.75),
    )

    result = Result(
        params=ParetoMoments(**values),
        info=info,
        warnings=tuple(warnings_list),
    )
    return ParetoSolution(_result=result, _distribution=dist)


# Range of permissible values, under the conventional name
range = value_range
