"""
Tolerance tiers for numerical validation.

Defines precision expectations for each supported working precision:
- FP64 (reference): agreement with scipy.stats to near machine precision
- FP32: relaxed for single-precision arithmetic
- Near-support variants: the cdf evaluated just above the location
  loses relative accuracy in the ratio location/x itself

Used by the test suite to compare against scipy reference values.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike

from paretostats.core.precision import resolve_dtype


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision reference
FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision, matches scipy.stats.pareto',
)

# Double precision, arguments within a few ulps of the location
FP64_NEAR_SUPPORT = ToleranceTier(
    rtol=1e-8,
    atol=1e-14,
    name='fp64_near_support',
    description='Double precision, x close to the location parameter',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision, statistically equivalent',
)

# Single precision, arguments within a few ulps of the location
FP32_NEAR_SUPPORT = ToleranceTier(
    rtol=1e-3,
    atol=1e-6,
    name='fp32_near_support',
    description='Single precision, x close to the location parameter',
)


def select_tolerance(
    dtype: DTypeLike = None,
    near_support: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a working precision."""
    if resolve_dtype(dtype) == np.dtype(np.float32):
        return FP32_NEAR_SUPPORT if near_support else FP32
    return FP64_NEAR_SUPPORT if near_support else FP64
