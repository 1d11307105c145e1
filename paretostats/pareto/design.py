"""
ParetoDistribution: the Pareto(location, shape) value type.

Holds the two parameters in a fixed working precision together with the
error policy used by every function evaluated on the instance. Immutable
after construction; dataclasses.replace() builds a modified copy and
validates it again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import numpy as np
from numpy.typing import DTypeLike

from paretostats.core.policies import ErrorPolicy, PolicyName, get_policy
from paretostats.core.precision import resolve_dtype
from paretostats.core.validation import check_scalar
from paretostats.pareto._common import check_pareto, qualified


@dataclass(frozen=True)
class ParetoDistribution:
    """
    Pareto distribution with location (Xm) and shape (k, alpha).

    The density is ``shape * location**shape / x**(shape + 1)`` for
    ``x >= location`` and zero below it.

    Parameters
    ----------
    location : float
        Minimum of the support, also the mode. Finite and > 0.
    shape : float
        Tail index. Finite and > 0; larger values give lighter tails.
    dtype : dtype-like
        Working precision, float64 (default) or float32.
    policy : {'raise', 'ignore', 'warn'} or ErrorPolicy
        How domain errors are reported, at construction and by every
        function evaluated on this instance.

    Construction:
        ParetoDistribution()                      # Pareto(1, 1)
        ParetoDistribution(2.0, 3.0)
        ParetoDistribution(2.0, 3.0, dtype=np.float32, policy='ignore')
    """
    location: Any = 1.0
    shape: Any = 1.0
    dtype: DTypeLike = None
    policy: PolicyName | ErrorPolicy | None = field(
        default=None, compare=False, repr=False
    )

    def __post_init__(self):
        dtype = resolve_dtype(self.dtype)
        object.__setattr__(self, 'dtype', dtype)
        object.__setattr__(self, 'policy', get_policy(self.policy))
        object.__setattr__(
            self, 'location', check_scalar(self.location, 'location', dtype)
        )
        object.__setattr__(
            self, 'shape', check_scalar(self.shape, 'shape', dtype)
        )
        check_pareto(
            qualified('ParetoDistribution'), self.location, self.shape, self.policy
        )

    @property
    def is_valid(self) -> bool:
        """Whether both parameters are finite and > 0."""
        return bool(
            np.isfinite(self.location) and self.location > 0
            and np.isfinite(self.shape) and self.shape > 0
        )

    def __repr__(self) -> str:
        return (
            f"ParetoDistribution(location={float(self.location)!r}, "
            f"shape={float(self.shape)!r}, dtype={self.dtype.name})"
        )


# Convenience alias, so callers can write pareto(2.0, 3.0)
pareto = ParetoDistribution
