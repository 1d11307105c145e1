"""
Parameter and argument checks for the Pareto distribution.

Each check returns None when the value is valid, otherwise whatever the
error policy returned (a NaN sentinel under the non-raising policies; the
raising policy never returns). Callers stop at the first non-None result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from paretostats.core.policies import ErrorPolicy
from paretostats.core.validation import check_positive_finite, check_probability

if TYPE_CHECKING:
    from paretostats.pareto.design import ParetoDistribution


def qualified(name: str) -> str:
    """Qualified function name used in error messages."""
    return f"paretostats.pareto.{name}"


def check_pareto_location(
    function: str, location: np.floating, policy: ErrorPolicy
) -> np.floating | None:
    return check_positive_finite(function, "Location parameter", location, policy)


def check_pareto_shape(
    function: str, shape: np.floating, policy: ErrorPolicy
) -> np.floating | None:
    return check_positive_finite(function, "Shape parameter", shape, policy)


def check_pareto_x(
    function: str, x: np.floating, policy: ErrorPolicy
) -> np.floating | None:
    return check_positive_finite(function, "x parameter", x, policy)


def check_pareto(
    function: str,
    location: np.floating,
    shape: np.floating,
    policy: ErrorPolicy,
) -> np.floating | None:
    """Check both distribution parameters, location first."""
    failed = check_pareto_location(function, location, policy)
    if failed is None:
        failed = check_pareto_shape(function, shape, policy)
    return failed


def check_dist(function: str, dist: ParetoDistribution) -> np.floating | None:
    """Re-check an instance's parameters with its own policy."""
    return check_pareto(function, dist.location, dist.shape, dist.policy)


def check_dist_and_x(
    function: str, dist: ParetoDistribution, x: np.floating
) -> np.floating | None:
    """Argument first, then parameters."""
    failed = check_pareto_x(function, x, dist.policy)
    if failed is None:
        failed = check_dist(function, dist)
    return failed


def check_dist_and_probability(
    function: str, dist: ParetoDistribution, p: np.floating
) -> np.floating | None:
    """Probability first, then parameters."""
    failed = check_probability(function, p, dist.policy)
    if failed is None:
        failed = check_dist(function, dist)
    return failed
