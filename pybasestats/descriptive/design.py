"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a single numeric sample and provides validation and metadata for
describe().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pybasestats.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_not_empty,
)


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps a 1D sample of n observations. Immutable after construction;
    the wrapped array is a private copy, so later changes to the caller's
    data do not leak in.

    Construction:
        DescriptiveDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data) -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sample. Can be a list, numpy array, pandas Series, or any
            object with a .values attribute. A .name attribute, if present,
            is kept for display.
        """
        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            name = getattr(data, 'name', None)
            name = str(name) if name is not None else None
            values = data.values
        else:
            name = None
            values = data

        arr = check_array(values, 'data')
        check_1d(arr, 'data')
        check_not_empty(arr, 'data')
        check_finite(arr, 'data')

        data_array = np.array(arr, dtype=np.float64, copy=True)
        data_array.setflags(write=False)

        return cls(_data=data_array, _n=int(data_array.shape[0]), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only sample, shape (n,)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Sample name, or None if not available."""
        return self._name

    def __repr__(self) -> str:
        name = f", name={self._name!r}" if self._name is not None else ""
        return f"DescriptiveDesign(n={self._n}{name})"
