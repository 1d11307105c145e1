"""
Core infrastructure for paretostats.

Shared abstractions used by the distribution package.

Key components:
    exceptions: Exception hierarchy
    policies: Error policies (raise / ignore / warn)
    precision: Supported dtypes and per-dtype constants
    tolerances: Tolerance tiers per precision
    validation: Scalar and domain validators
    result: Generic Result[P] envelope
"""

from paretostats.core.result import Result
from paretostats.core.exceptions import (
    ParetoStatsError,
    ValidationError,
    DomainError,
    NumericalError,
    EvaluationOverflowError,
    DomainWarning,
)
from paretostats.core.policies import (
    ErrorPolicy,
    RaisePolicy,
    IgnorePolicy,
    WarnPolicy,
    DomainErrorRecord,
    get_policy,
)
from paretostats.core.precision import max_value, machine_epsilon

__all__ = [
    # Result
    "Result",
    # Exceptions
    "ParetoStatsError",
    "ValidationError",
    "DomainError",
    "NumericalError",
    "EvaluationOverflowError",
    "DomainWarning",
    # Policies
    "ErrorPolicy",
    "RaisePolicy",
    "IgnorePolicy",
    "WarnPolicy",
    "DomainErrorRecord",
    "get_policy",
    # Precision
    "max_value",
    "machine_epsilon",
]
