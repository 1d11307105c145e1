"""
paretostats: the Pareto distribution for Python.

Density, cumulative and quantile functions with their upper-tail
complements, moments and derived quantities of the Pareto(location, shape)
distribution, in float64 or float32, with a configurable error policy.

Submodules:
    pareto: The distribution and its functions
    core: Exceptions, error policies, precision table
"""

__version__ = "0.1.0"

from paretostats import pareto
from paretostats.pareto import ParetoDistribution, complement
from paretostats.core import (
    ParetoStatsError,
    ValidationError,
    DomainError,
    EvaluationOverflowError,
    DomainWarning,
    RaisePolicy,
    IgnorePolicy,
    WarnPolicy,
)

__all__ = [
    "__version__",
    "pareto",
    "ParetoDistribution",
    "complement",
    "ParetoStatsError",
    "ValidationError",
    "DomainError",
    "EvaluationOverflowError",
    "DomainWarning",
    "RaisePolicy",
    "IgnorePolicy",
    "WarnPolicy",
]
