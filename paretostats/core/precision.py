"""
Floating-point precision table.

Every distribution instance is evaluated in one numpy floating dtype.
This module is the single source of truth for which dtypes are supported
and for the per-dtype constants (largest finite value, machine epsilon).
"""

import numpy as np
from numpy.typing import DTypeLike

from paretostats.core.exceptions import ValidationError


# Precisions with a native scipy.special.powm1 loop
SUPPORTED_DTYPES: tuple[np.dtype, ...] = (
    np.dtype(np.float64),
    np.dtype(np.float32),
)

DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def resolve_dtype(dtype: DTypeLike = None) -> np.dtype:
    """
    Normalize a dtype-like to one of SUPPORTED_DTYPES.

    Args:
        dtype: numpy dtype, scalar type or name; None selects float64

    Returns:
        The matching numpy dtype

    Raises:
        ValidationError: If the dtype is not a supported floating type
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e

    if resolved not in SUPPORTED_DTYPES:
        names = ", ".join(d.name for d in SUPPORTED_DTYPES)
        raise ValidationError(
            f"dtype: {resolved.name} is not supported, expected one of {names}"
        )
    return resolved


def max_value(dtype: DTypeLike = None) -> np.floating:
    """
    Largest finite value of a dtype.

    Stands in for +infinity at the upper end of the Pareto support.
    """
    resolved = resolve_dtype(dtype)
    return resolved.type(np.finfo(resolved).max)


def machine_epsilon(dtype: DTypeLike = None) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(resolve_dtype(dtype)).eps)


def quiet_nan(dtype: DTypeLike = None) -> np.floating:
    """Quiet NaN in the given precision, the non-raising error sentinel."""
    return resolve_dtype(dtype).type(np.nan)


def infinity(dtype: DTypeLike = None) -> np.floating:
    """Positive infinity in the given precision, the overflow sentinel."""
    return resolve_dtype(dtype).type(np.inf)
