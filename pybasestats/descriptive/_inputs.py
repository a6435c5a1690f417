"""
Input coercion for the descriptive statistics.

Turns caller data into validated float64 numpy arrays. The caller's
objects are never written to; every statistic works on these arrays
or on sorted copies of them.
"""

from __future__ import annotations

from typing import Any, NamedTuple
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybasestats.core.exceptions import DimensionError, EmptyInputError
from pybasestats.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_consistent_length,
)


class WeightedPair(NamedTuple):
    """A value together with the weight it carries in weighted statistics."""
    value: float
    weight: float


def as_sample(x: ArrayLike, name: str = 'x') -> NDArray[np.floating[Any]]:
    """Validate a single numeric sequence. Empty sequences are allowed here."""
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


def as_weighted(
    values: ArrayLike,
    weights: ArrayLike | None = None,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Split weighted input into aligned (values, weights) arrays.

    Parameters
    ----------
    values : array-like
        Either the values themselves (when weights is given) or a sequence
        of (value, weight) pairs, such as a list of WeightedPair.
    weights : array-like, optional
        Weights aligned by position with values.

    Returns
    -------
    Tuple of two 1D float arrays of equal, non-zero length.
    """
    if weights is not None:
        v = as_sample(values, 'values')
        w = as_sample(weights, 'weights')
        check_consistent_length(v, w, names=('values', 'weights'))
        if v.shape[0] == 0:
            raise EmptyInputError("values: sequence is empty", name='values')
        return v, w

    pairs = check_array(values, 'pairs')
    if pairs.size == 0:
        raise EmptyInputError("pairs: sequence is empty", name='pairs')
    check_2d(pairs, 'pairs')
    if pairs.shape[1] != 2:
        raise DimensionError(
            f"pairs: expected (value, weight) pairs, got shape {pairs.shape}"
        )
    check_finite(pairs, 'pairs')
    return pairs[:, 0], pairs[:, 1]
