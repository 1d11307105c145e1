"""
Pareto distribution.

Pareto(location, shape): density ``shape * location**shape / x**(shape+1)``
on ``[location, inf)``.

Public API:
    ParetoDistribution(location, shape)   - the distribution (alias: pareto)
    complement(dist, value)               - select the upper tail
    pdf, cdf, cdf_complement, quantile, quantile_complement
    range / value_range, support
    mean, mode, median, variance, standard_deviation,
    skewness, kurtosis, kurtosis_excess, coefficient_of_variation
    hazard, chf
    describe(dist)                        - all moments at once
"""

from paretostats.pareto.design import ParetoDistribution, pareto
from paretostats.pareto.complement import Complement, complement
from paretostats.pareto.solution import ParetoMoments, ParetoSolution
from paretostats.pareto.solvers import (
    range,
    value_range,
    support,
    pdf,
    cdf,
    cdf_complement,
    quantile,
    quantile_complement,
    mean,
    mode,
    median,
    variance,
    standard_deviation,
    skewness,
    kurtosis,
    kurtosis_excess,
    coefficient_of_variation,
    hazard,
    chf,
    describe,
)

__all__ = [
    "ParetoDistribution",
    "pareto",
    "Complement",
    "complement",
    "ParetoMoments",
    "ParetoSolution",
    "range",
    "value_range",
    "support",
    "pdf",
    "cdf",
    "cdf_complement",
    "quantile",
    "quantile_complement",
    "mean",
    "mode",
    "median",
    "variance",
    "standard_deviation",
    "skewness",
    "kurtosis",
    "kurtosis_excess",
    "coefficient_of_variation",
    "hazard",
    "chf",
    "describe",
]
