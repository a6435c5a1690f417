"""
Computational building blocks shared by the public statistics.

All helpers are pure: they work elementwise on scalars or numpy arrays
and never modify their inputs.
"""

from __future__ import annotations

from contextlib import contextmanager
from numbers import Integral
from typing import Iterator
import numpy as np

from pybasestats.core.exceptions import NumericalError, ValidationError


def trim(sorted_values, n: int):
    """
    Drop n elements from the ends of an already sorted sequence.

    An even n is split evenly. For an odd n the front absorbs the extra
    element: n // 2 + 1 are dropped from the front and n // 2 from the back.
    The back drop applies to whatever is left after the front drop, so
    trimming at least len(sorted_values) elements yields an empty result.

    Parameters
    ----------
    sorted_values : sequence or ndarray
        Values in ascending order. Anything supporting len() and slicing.
    n : int
        Total number of elements to remove. Must be a non-negative integer
        (Python or numpy integer; floats such as 2.0 are rejected).

    Returns
    -------
    Slice of sorted_values of the same type, order preserved.
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise ValidationError(
            f"n: trim count must be an integer, got {type(n).__name__} {n!r}"
        )
    if n < 0:
        raise ValidationError(f"n: trim count must be non-negative, got {n}")

    front = n // 2 + n % 2
    back = n // 2

    remaining = sorted_values[front:]
    return remaining[:max(len(remaining) - back, 0)]


def weighted_value(value, weight):
    """Product of a value and its weight."""
    return value * weight


def deviation(value, reference):
    return value - reference


def absolute_deviation(value, reference):
    return np.abs(deviation(value, reference))


def square_deviation(value, reference):
    return np.power(deviation(value, reference), 2)


@contextmanager
def overflow_guard(name: str) -> Iterator[None]:
    """
    Raise NumericalError instead of letting overflow turn into inf or nan.

    Inputs are finite after validation, so any overflow or invalid operation
    inside the block comes from the arithmetic itself (e.g. squaring 1e200).
    """
    try:
        with np.errstate(over='raise', invalid='raise'):
            yield
    except FloatingPointError as e:
        raise NumericalError(
            f"{name}: floating-point overflow in intermediate arithmetic ({e})"
        ) from e
