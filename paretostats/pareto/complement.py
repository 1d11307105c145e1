"""
Upper-tail queries.

complement(dist, x) bundles a distribution with one argument so that
cdf() and quantile() select the upper-tail formula:

    cdf(complement(dist, x))        == cdf_complement(dist, x)   # P(X > x)
    quantile(complement(dist, q))   == quantile_complement(dist, q)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from paretostats.core.exceptions import ValidationError
from paretostats.pareto.design import ParetoDistribution


@dataclass(frozen=True)
class Complement:
    """A distribution paired with a value or probability for an upper-tail query."""
    dist: ParetoDistribution
    param: Any


def complement(dist: ParetoDistribution, param) -> Complement:
    """Pair ``dist`` with ``param`` to request the upper-tail variant."""
    if not isinstance(dist, ParetoDistribution):
        raise ValidationError(
            f"dist: expected ParetoDistribution, got {type(dist).__name__}"
        )
    return Complement(dist=dist, param=param)
