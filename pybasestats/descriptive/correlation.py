"""
Pearson product-moment correlation of two aligned samples.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pybasestats.core.exceptions import ZeroDivisorError
from pybasestats.core.validation import check_consistent_length, check_not_empty
from pybasestats.descriptive._helpers import (
    deviation,
    overflow_guard,
    square_deviation,
    weighted_value,
)
from pybasestats.descriptive._inputs import as_sample
from pybasestats.descriptive.central import mean


def pearson_correlation(a: ArrayLike, b: ArrayLike) -> float:
    """
    Pearson correlation coefficient between a and b.

    Observations are paired by position: a[i] goes with b[i]. The
    coefficient is

        sum(da * db) / (sqrt(sum(da**2)) * sqrt(sum(db**2)))

    where da and db are the deviations from each sample's mean.

    Parameters
    ----------
    a, b : array-like
        Non-empty 1D numeric sequences of equal length.

    Returns
    -------
    float in [-1, 1] (up to rounding).

    Raises
    ------
    LengthMismatchError
        If a and b differ in length.
    EmptyInputError
        If the samples are empty.
    ZeroDivisorError
        If either sample is constant.
    """
    arr_a = as_sample(a, 'a')
    arr_b = as_sample(b, 'b')
    check_consistent_length(arr_a, arr_b, names=('a', 'b'))
    check_not_empty(arr_a, 'a')

    mean_a = mean(arr_a)
    mean_b = mean(arr_b)

    with overflow_guard('a, b'):
        diff_a = deviation(arr_a, mean_a)
        diff_b = deviation(arr_b, mean_b)

        numerator = np.sum(weighted_value(diff_a, diff_b))
        denominator = (
            np.sqrt(np.sum(square_deviation(arr_a, mean_a)))
            * np.sqrt(np.sum(square_deviation(arr_b, mean_b)))
        )

    if denominator == 0:
        raise ZeroDivisorError(
            "a, b: correlation undefined when either sample is constant",
            divisor_name='product of deviation norms',
        )
    return float(numerator / denominator)
