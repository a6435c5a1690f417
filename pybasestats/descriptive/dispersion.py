"""
Measures of spread: mean absolute deviation, sample variance,
standard deviation and standard error of the mean.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pybasestats.core.validation import check_min_samples, check_not_empty
from pybasestats.descriptive._helpers import (
    absolute_deviation,
    overflow_guard,
    square_deviation,
)
from pybasestats.descriptive._inputs import as_sample
from pybasestats.descriptive.central import mean


def mean_absolute_deviation(x: ArrayLike) -> float:
    """
    Mean of the absolute deviations from the sample mean.

    Raises
    ------
    EmptyInputError
        If x has no elements.
    """
    arr = as_sample(x)
    check_not_empty(arr, 'x')
    m = mean(arr)
    with overflow_guard('x'):
        deviations = absolute_deviation(arr, m)
    return mean(deviations)


def variance(x: ArrayLike) -> float:
    """
    Sample variance with Bessel's correction (divisor n - 1).

    Parameters
    ----------
    x : array-like
        1D numeric sequence with at least two elements.

    Returns
    -------
    float

    Raises
    ------
    InsufficientSamplesError
        If x has fewer than two elements (including none).
    """
    arr = as_sample(x)
    check_min_samples(arr, 2, 'x')

    m = mean(arr)
    with overflow_guard('x'):
        return float(np.sum(square_deviation(arr, m)) / (arr.shape[0] - 1))


def standard_deviation(x: ArrayLike) -> float:
    """Square root of the sample variance. Requires at least two elements."""
    return float(np.sqrt(variance(x)))


def standard_error(x: ArrayLike) -> float:
    """
    Standard error of the mean: standard_deviation(x) / sqrt(n).

    Requires at least two elements.
    """
    arr = as_sample(x)
    return float(standard_deviation(arr) / np.sqrt(arr.shape[0]))
