"""
Descriptive statistics module.

Closed-form statistics over in-memory numeric sequences. Each function
takes array-likes and returns a float; none keeps state between calls.

Public API:
    mean(x)                      - Arithmetic mean (optionally trimmed)
    trimmed_mean(x, n)           - Mean after dropping n extreme values
    weighted_mean(v, w)          - Weighted mean (pairs or aligned sequences)
    median(x)                    - Median
    weighted_median(v, w)        - Median of value * weight products
    mean_absolute_deviation(x)   - Mean absolute deviation from the mean
    variance(x)                  - Sample variance (Bessel-corrected, n-1)
    standard_deviation(x)        - Sample standard deviation
    standard_error(x)            - Standard error of the mean
    pearson_correlation(a, b)    - Pearson correlation coefficient
    describe(x)                  - All single-sample statistics at once
"""

from pybasestats.descriptive._inputs import WeightedPair
from pybasestats.descriptive.central import (
    mean,
    trimmed_mean,
    weighted_mean,
    median,
    weighted_median,
)
from pybasestats.descriptive.dispersion import (
    mean_absolute_deviation,
    variance,
    standard_deviation,
    standard_error,
)
from pybasestats.descriptive.correlation import pearson_correlation
from pybasestats.descriptive.design import DescriptiveDesign
from pybasestats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pybasestats.descriptive.solvers import describe

__all__ = [
    "mean",
    "trimmed_mean",
    "weighted_mean",
    "median",
    "weighted_median",
    "mean_absolute_deviation",
    "variance",
    "standard_deviation",
    "standard_error",
    "pearson_correlation",
    "describe",
    "WeightedPair",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
