"""
Measures of central tendency: mean, trimmed mean, weighted mean,
median and weighted median.

Every function accepts array-likes, validates them, and returns a Python
float. Sorting always happens on a copy (np.sort), so caller data keeps
its order.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pybasestats.core.exceptions import ZeroDivisorError
from pybasestats.core.validation import check_not_empty
from pybasestats.descriptive._helpers import (
    overflow_guard,
    trim as _trim,
    weighted_value,
)
from pybasestats.descriptive._inputs import as_sample, as_weighted


def mean(x: ArrayLike, trim: int | None = None) -> float:
    """
    Arithmetic mean: sum of the elements divided by their count.

    Parameters
    ----------
    x : array-like
        Non-empty 1D numeric sequence.
    trim : int, optional
        If given, return trimmed_mean(x, trim) instead.

    Returns
    -------
    float

    Raises
    ------
    EmptyInputError
        If x has no elements.
    """
    if trim is not None:
        return trimmed_mean(x, trim)

    arr = as_sample(x)
    check_not_empty(arr, 'x')
    with overflow_guard('x'):
        return float(np.sum(arr) / arr.shape[0])


def trimmed_mean(x: ArrayLike, n: int) -> float:
    """
    Mean after removing n extreme values from the sorted sample.

    The sample is sorted ascending, then n elements are dropped from the
    ends. For odd n the low end loses one more element than the high end:
    trimmed_mean([1, 2, 3, 4, 5], 3) averages [3, 4].

    Parameters
    ----------
    x : array-like
        1D numeric sequence.
    n : int
        Number of elements to drop in total. Must be non-negative.

    Raises
    ------
    EmptyInputError
        If nothing is left after trimming.
    ValidationError
        If n is negative or not an integer.
    """
    arr = as_sample(x)
    kept = _trim(np.sort(arr), n)
    check_not_empty(kept, 'x')
    return mean(kept)


def median(x: ArrayLike) -> float:
    """
    Middle value of the sorted sample.

    For an even count, the average of the two middle values.

    Raises
    ------
    EmptyInputError
        If x has no elements.
    """
    arr = as_sample(x)
    check_not_empty(arr, 'x')

    ordered = np.sort(arr)
    n = ordered.shape[0]
    mid = n // 2
    if n % 2 == 0:
        with overflow_guard('x'):
            return float((ordered[mid - 1] + ordered[mid]) / 2)
    return float(ordered[mid])


def weighted_mean(values: ArrayLike, weights: ArrayLike | None = None) -> float:
    """
    Weighted arithmetic mean: sum(value * weight) / sum(weight).

    Call either with a sequence of (value, weight) pairs, or with two
    aligned sequences:

        weighted_mean([(1.5, 2), (2, 0), (5.84, 1)])
        weighted_mean([1.5, 2, 5.84], [2, 0, 1])

    Weights are not checked for sign. A zero weight removes the value from
    both sums.

    Parameters
    ----------
    values : array-like
        Values, or (value, weight) pairs when weights is omitted.
    weights : array-like, optional
        Weights aligned by position with values.

    Raises
    ------
    EmptyInputError
        If there are no pairs.
    LengthMismatchError
        If values and weights differ in length.
    ZeroDivisorError
        If the weights sum to zero.
    """
    v, w = as_weighted(values, weights)

    with overflow_guard('weights'):
        total_weight = np.sum(w)
    if total_weight == 0:
        raise ZeroDivisorError(
            "weights: sum of weights is zero, weighted mean undefined",
            divisor_name='sum of weights',
        )
    with overflow_guard('values'):
        return float(np.sum(weighted_value(v, w)) / total_weight)


def weighted_median(values: ArrayLike, weights: ArrayLike | None = None) -> float:
    """
    Median of the value * weight products.

    Note: this is NOT a weight-aware positional median (one that repeats or
    interpolates values in proportion to their weight). Each pair is
    collapsed to its product and the ordinary median of those products is
    returned:

        weighted_median([1, 2, 3], [3, 1, 1])  # median of [3, 2, 3] -> 3.0

    Accepts the same two calling forms as weighted_mean.

    Raises
    ------
    EmptyInputError
        If there are no pairs.
    LengthMismatchError
        If values and weights differ in length.
    """
    v, w = as_weighted(values, weights)
    with overflow_guard('values'):
        products = weighted_value(v, w)
    return median(products)
