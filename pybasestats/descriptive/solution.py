"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING

from pybasestats.core.result import Result

if TYPE_CHECKING:
    from pybasestats.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Statistics that were not computed are None: trimmed_mean without a trim
    count, and the variance family for samples with fewer than two values.
    """
    n: int
    mean: float
    median: float
    mean_absolute_deviation: float
    trimmed_mean: float | None = None
    trim: int | None = None
    variance: float | None = None
    sd: float | None = None
    standard_error: float | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    # --- Central tendency ---

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def trimmed_mean(self) -> float | None:
        """Mean after trimming, or None if no trim count was given."""
        return self._result.params.trimmed_mean

    # --- Dispersion ---

    @property
    def mean_absolute_deviation(self) -> float:
        return self._result.params.mean_absolute_deviation

    @property
    def variance(self) -> float | None:
        """Sample variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float | None:
        """Sample standard deviation."""
        return self._result.params.sd

    @property
    def standard_error(self) -> float | None:
        """Standard error of the mean."""
        return self._result.params.standard_error

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        """Sample name from the design."""
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        """Computed statistics as a plain dict (uncomputed ones omitted)."""
        params = self._result.params
        return {
            f.name: getattr(params, f.name)
            for f in fields(params)
            if getattr(params, f.name) is not None
        }

    def summary(self) -> str:
        """R-style summary output."""
        params = self._result.params
        title = self.name or "x"

        rows = [
            ("N", f"{params.n}"),
            ("Mean", f"{params.mean:.6f}"),
            ("Median", f"{params.median:.6f}"),
        ]
        if params.trimmed_mean is not None:
            rows.append((f"Trimmed mean (n={params.trim})", f"{params.trimmed_mean:.6f}"))
        rows.append(("Mean abs. dev.", f"{params.mean_absolute_deviation:.6f}"))
        for label, value in (
            ("Variance", params.variance),
            ("Std. dev.", params.sd),
            ("Std. error", params.standard_error),
        ):
            rows.append((label, f"{value:.6f}" if value is not None else "NA"))

        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)

        lines = [f"Descriptive Statistics: {title}"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value.rjust(value_width)}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = list(self._result.info.get('computed', []))
        stats_str = ", ".join(computed) if computed else "none"
        return f"DescriptiveSolution(n={self.n}, computed=[{stats_str}])"
