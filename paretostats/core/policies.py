"""
Error policies for paretostats.

A policy decides what happens when a value falls outside the domain of
an operation. Every check in the library reports through exactly one
method, ErrorPolicy.report(), so choosing a policy is the only thing that
changes between raising and non-raising evaluation.

Policies:
    RaisePolicy:  raise DomainError / EvaluationOverflowError (default)
    IgnorePolicy: return a sentinel (quiet NaN, or +inf on overflow) and
                  record the error in ``last_error`` / ``errors``
    WarnPolicy:   as IgnorePolicy, and emit a DomainWarning

Usage:
    from paretostats import ParetoDistribution
    from paretostats.core.policies import IgnorePolicy

    policy = IgnorePolicy()
    dist = ParetoDistribution(2.0, 1.5, policy=policy)
    variance(dist)          # nan
    policy.last_error       # DomainErrorRecord(kind='domain', ...)
"""

from __future__ import annotations

import sys
import warnings
from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

import numpy as np

from paretostats.core.exceptions import (
    DomainError,
    DomainWarning,
    EvaluationOverflowError,
    ValidationError,
)

ErrorKind = Literal['domain', 'overflow']
PolicyName = Literal['raise', 'ignore', 'warn']

DOMAIN: ErrorKind = 'domain'
OVERFLOW: ErrorKind = 'overflow'


@dataclass(frozen=True)
class DomainErrorRecord:
    """One error reported to a non-raising policy."""
    kind: ErrorKind
    function: str
    message: str
    value: float | None

    def __str__(self) -> str:
        return f"{self.function}: {self.message}"


def _sentinel(kind: ErrorKind, value) -> np.floating:
    """NaN for domain errors, +inf for overflow, in the value's precision."""
    dtype = value.dtype if isinstance(value, np.floating) else np.dtype(np.float64)
    return dtype.type(np.inf if kind == OVERFLOW else np.nan)


def _as_float(value) -> float | None:
    return None if value is None else float(value)


@runtime_checkable
class ErrorPolicy(Protocol):
    """
    Protocol for error policies.

    report() is called with the kind of error, the qualified name of the
    function that detected it, the formatted message and the offending
    value. It either raises or returns the value the failing function
    should return.
    """

    @property
    def name(self) -> str:
        """Policy identifier: 'raise', 'ignore' or 'warn'."""
        ...

    def report(
        self,
        kind: ErrorKind,
        function: str,
        message: str,
        value,
    ) -> np.floating:
        ...


class RaisePolicy:
    """Raise on every reported error. Stateless."""

    name = 'raise'

    def report(self, kind, function, message, value):
        full = f"{function}: {message}"
        if kind == OVERFLOW:
            raise EvaluationOverflowError(
                full, function=function, value=_as_float(value)
            )
        raise DomainError(full, function=function, value=_as_float(value))

    def __repr__(self) -> str:
        return "RaisePolicy()"


class IgnorePolicy:
    """
    Return a sentinel instead of raising.

    The most recent error is kept in ``last_error`` and every error is
    appended to ``errors``, which acts as the out-channel for callers
    running non-throwing numeric pipelines.
    """

    name = 'ignore'

    def __init__(self):
        self.errors: list[DomainErrorRecord] = []

    @property
    def last_error(self) -> DomainErrorRecord | None:
        return self.errors[-1] if self.errors else None

    def clear(self) -> None:
        """Forget all recorded errors."""
        self.errors.clear()

    def report(self, kind, function, message, value):
        self.errors.append(
            DomainErrorRecord(
                kind=kind,
                function=function,
                message=message,
                value=_as_float(value),
            )
        )
        return _sentinel(kind, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(errors={len(self.errors)})"


def _caller_stacklevel() -> int:
    # stacklevel of the first frame outside the paretostats package,
    # counted from the frame that calls warnings.warn
    frame = sys._getframe(1)
    level = 1
    while frame is not None:
        module = frame.f_globals.get('__name__', '')
        if module != 'paretostats' and not module.startswith('paretostats.'):
            break
        frame = frame.f_back
        level += 1
    return level


class WarnPolicy(IgnorePolicy):
    """Return a sentinel, record the error, and emit a DomainWarning."""

    name = 'warn'

    def report(self, kind, function, message, value):
        result = super().report(kind, function, message, value)
        warnings.warn(f"{function}: {message}", DomainWarning,
                      stacklevel=_caller_stacklevel())
        return result


def get_policy(policy: PolicyName | ErrorPolicy | None = None) -> ErrorPolicy:
    """
    Resolve a policy name or instance.

    Args:
        policy: 'raise', 'ignore', 'warn', an ErrorPolicy instance, or
            None for the default raising policy

    Returns:
        An ErrorPolicy. Names always produce a fresh instance so that
        out-channels are never shared by accident.

    Raises:
        ValidationError: If the name is unknown or the object does not
            implement ErrorPolicy
    """
    if policy is None or policy == 'raise':
        return RaisePolicy()
    if policy == 'ignore':
        return IgnorePolicy()
    if policy == 'warn':
        return WarnPolicy()
    if isinstance(policy, str):
        raise ValidationError(
            f"policy: unknown policy {policy!r}, expected 'raise', 'ignore' or 'warn'"
        )
    if not isinstance(policy, ErrorPolicy):
        raise ValidationError(
            f"policy: {type(policy).__name__} does not implement ErrorPolicy"
        )
    return policy
