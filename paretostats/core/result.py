"""
Generic result container for paretostats summaries.

Result is the envelope for computations that produce several numbers at
once (describe()). Domains define their own parameter payload; the
envelope adds metadata and the non-fatal issues met along the way.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (parameters, precision)
    - Immutable (frozen=True) like the distributions it summarizes
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (moments, quantiles, ...)
        info: Structured metadata (parameters, dtype)
        warnings: Non-fatal issues, e.g. moments undefined for the shape

    Examples:
        >>> Result(
        ...     params=ParetoMoments(mean=3.0, ...),
        ...     info={'location': 2.0, 'shape': 3.0, 'dtype': 'float64'},
        ...     warnings=('kurtosis is undefined for shape <= 4, but got 3.0.',),
        ... )
    """
    params: P
    info: dict[str, Any]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
