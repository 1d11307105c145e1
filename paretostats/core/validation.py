"""
Scalar validation utilities for paretostats.

Two layers live here. check_scalar() enforces API usage and always raises:
a string or None is never a number, whatever the error policy says.
The domain checks (check_positive_finite, check_probability) route their
failures through an ErrorPolicy and return the policy's sentinel, so the
caller can either propagate the sentinel or continue.

Design principles:
    - Each function validates ONE thing
    - Parameter names and actual values included in all error messages
    - Domain checks return None on success, the sentinel on failure
"""

from typing import Any

import numpy as np

from paretostats.core.exceptions import ValidationError
from paretostats.core.policies import ErrorPolicy, DOMAIN


def format_value(value: Any) -> str:
    """Render a scalar for an error message: -1.0, nan, inf."""
    return repr(float(value))


def check_scalar(value: Any, name: str, dtype: np.dtype) -> np.floating:
    """
    Validate and convert a real scalar to the working precision.

    Args:
        value: Input to validate
        name: Parameter name for error messages
        dtype: Working precision

    Returns:
        value as a numpy scalar of ``dtype``

    Raises:
        ValidationError: If the input is not a real numeric scalar
    """
    if isinstance(value, (str, bytes)) or value is None:
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    try:
        arr = np.asarray(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to a number: {e}") from e

    if arr.ndim != 0:
        raise ValidationError(
            f"{name}: expected a scalar, got array with shape {arr.shape}"
        )
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected a real number"
        )
    if np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex value {value!r} is not real")

    return arr.astype(dtype)[()]


def check_positive_finite(
    function: str,
    label: str,
    value: np.floating,
    policy: ErrorPolicy,
) -> np.floating | None:
    """
    Verify a value is finite and strictly positive.

    Args:
        function: Name of the calling function, for diagnostics
        label: Human-readable parameter label, e.g. "Shape parameter"
        value: Value to check
        policy: Error policy deciding how a failure is reported

    Returns:
        None if the value is valid, otherwise the policy's sentinel
    """
    if not np.isfinite(value):
        return policy.report(
            DOMAIN, function,
            f"{label} is {format_value(value)}, but must be finite!",
            value,
        )
    if not value > 0:
        return policy.report(
            DOMAIN, function,
            f"{label} is {format_value(value)}, but must be > 0!",
            value,
        )
    return None


def check_probability(
    function: str,
    p: np.floating,
    policy: ErrorPolicy,
) -> np.floating | None:
    """
    Verify a probability is finite and within [0, 1].

    Shared by every quantile entry point, lower and upper tail alike.

    Returns:
        None if the probability is valid, otherwise the policy's sentinel
    """
    if not np.isfinite(p) or p < 0 or p > 1:
        return policy.report(
            DOMAIN, function,
            f"Probability argument is {format_value(p)}, "
            f"but must be >= 0 and <= 1!",
            p,
        )
    return None
