"""
Pareto summary solution types.

Contains the moment payload and the user-facing solution wrapper returned
by describe().
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING
import numpy as np

from paretostats.core.result import Result

if TYPE_CHECKING:
    from paretostats.pareto.design import ParetoDistribution


@dataclass(frozen=True)
class ParetoMoments:
    """
    Parameter payload for describe().

    A field is None when the quantity is undefined for the distribution's
    shape (variance for shape <= 2, skewness for shape <= 3, kurtosis for
    shape <= 4) or when the parameters themselves are invalid.
    """
    mean: np.floating | None = None
    mode: np.floating | None = None
    median: np.floating | None = None
    variance: np.floating | None = None
    standard_deviation: np.floating | None = None
    skewness: np.floating | None = None
    kurtosis: np.floating | None = None
    kurtosis_excess: np.floating | None = None
    coefficient_of_variation: np.floating | None = None

    # Lower quartile, median, upper quartile
    quartiles: tuple[np.floating, np.floating, np.floating] | None = None


# Row labels for summary(), in display order
_SUMMARY_ROWS = (
    ("mean", "Mean"),
    ("mode", "Mode"),
    ("median", "Median"),
    ("variance", "Variance"),
    ("standard_deviation", "Std. Dev."),
    ("skewness", "Skewness"),
    ("kurtosis", "Kurtosis"),
    ("kurtosis_excess", "Excess Kurt."),
    ("coefficient_of_variation", "Coef. Var."),
)


@dataclass
class ParetoSolution:
    """
    User-facing summary of a Pareto distribution.

    Wraps Result[ParetoMoments] and provides convenient accessors.
    """
    _result: Result[ParetoMoments]
    _distribution: 'ParetoDistribution'

    # --- Moments ---

    @property
    def mean(self) -> np.floating | None:
        """Mean; the largest finite value when shape <= 1."""
        return self._result.params.mean

    @property
    def mode(self) -> np.floating | None:
        return self._result.params.mode

    @property
    def median(self) -> np.floating | None:
        return self._result.params.median

    @property
    def variance(self) -> np.floating | None:
        """Variance, None for shape <= 2."""
        return self._result.params.variance

    @property
    def standard_deviation(self) -> np.floating | None:
        return self._result.params.standard_deviation

    @property
    def skewness(self) -> np.floating | None:
        """Skewness, None for shape <= 3."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> np.floating | None:
        """Kurtosis, None for shape <= 4."""
        return self._result.params.kurtosis

    @property
    def kurtosis_excess(self) -> np.floating | None:
        """Excess kurtosis, None for shape <= 4."""
        return self._result.params.kurtosis_excess

    @property
    def coefficient_of_variation(self) -> np.floating | None:
        return self._result.params.coefficient_of_variation

    @property
    def quartiles(self) -> tuple[np.floating, np.floating, np.floating] | None:
        """(Q1, median, Q3)."""
        return self._result.params.quartiles

    # --- Metadata ---

    @property
    def distribution(self) -> 'ParetoDistribution':
        return self._distribution

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Aligned text table of every defined quantity."""
        params = self._result.params
        dist = self._distribution
        label_width = max(len(label) for _, label in _SUMMARY_ROWS)

        lines = [
            f"Pareto distribution: location = {float(dist.location):.6g}, "
            f"shape = {float(dist.shape):.6g} ({dist.dtype.name})",
        ]
        for attr, label in _SUMMARY_ROWS:
            value = getattr(params, attr)
            text = "undefined" if value is None else f"{float(value):.6g}"
            lines.append(f"  {label.ljust(label_width)}  {text}")

        if params.quartiles is not None:
            q1, q2, q3 = params.quartiles
            lines.append(
                f"  {'Quartiles'.ljust(label_width)}  "
                f"{float(q1):.6g}  {float(q2):.6g}  {float(q3):.6g}"
            )

        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  {w}" for w in self.warnings)

        return "\n".join(lines)

    def __repr__(self) -> str:
        params = self._result.params
        defined = [
            f.name for f in fields(params) if getattr(params, f.name) is not None
        ]
        stats_str = ", ".join(defined) if defined else "none"
        return (
            f"ParetoSolution(location={float(self._distribution.location):g}, "
            f"shape={float(self._distribution.shape):g}, defined=[{stats_str}])"
        )
