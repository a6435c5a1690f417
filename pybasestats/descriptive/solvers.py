"""
describe(): every single-sample statistic in one call.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pybasestats.core.result import Result
from pybasestats.core.compute.timing import Timer
from pybasestats.descriptive.design import DescriptiveDesign
from pybasestats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pybasestats.descriptive.central import mean, median, trimmed_mean
from pybasestats.descriptive.dispersion import (
    mean_absolute_deviation,
    variance,
    standard_deviation,
    standard_error,
)


BACKEND_NAME = 'cpu_descriptive'


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    trim: int | None = None,
) -> DescriptiveSolution:
    """
    Compute descriptive statistics for one sample.

    Computes: mean, median, mean absolute deviation, and, when the sample
    has at least two values, variance, standard deviation and standard
    error. With trim, also the trimmed mean.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        Non-empty 1D sample.
    trim : int, optional
        Number of extreme values to drop for the trimmed mean.

    Returns
    -------
    DescriptiveSolution

    Notes
    -----
    A single-value sample is not an error here: the variance family is left
    as None and a warning is recorded on the result. Errors from the
    trimmed mean (negative trim, nothing left after trimming) propagate.
    """
    design = _ensure_design(data)
    x = design.data
    warnings_list: list[str] = []
    computed: list[str] = []

    timer = Timer()
    timer.start()

    with timer.section('mean'):
        mean_value = mean(x)
    computed.append('mean')

    with timer.section('median'):
        median_value = median(x)
    computed.append('median')

    with timer.section('mean_absolute_deviation'):
        mad_value = mean_absolute_deviation(x)
    computed.append('mean_absolute_deviation')

    trimmed_value = None
    if trim is not None:
        with timer.section('trimmed_mean'):
            trimmed_value = trimmed_mean(x, trim)
        computed.append('trimmed_mean')

    var_value = None
    sd_value = None
    se_value = None
    if design.n >= 2:
        with timer.section('variance'):
            var_value = variance(x)
        with timer.section('sd'):
            sd_value = standard_deviation(x)
        with timer.section('standard_error'):
            se_value = standard_error(x)
        computed.extend(['variance', 'sd', 'standard_error'])
    else:
        warnings_list.append(
            f"variance undefined for n < 2 (n={design.n}); "
            f"variance, sd and standard_error not computed"
        )

    timer.stop()

    params = DescriptiveParams(
        n=design.n,
        mean=mean_value,
        median=median_value,
        mean_absolute_deviation=mad_value,
        trimmed_mean=trimmed_value,
        trim=trim,
        variance=var_value,
        sd=sd_value,
        standard_error=se_value,
    )

    result = Result(
        params=params,
        info={'n': design.n, 'computed': computed},
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=tuple(warnings_list),
    )

    return DescriptiveSolution(_result=result, _design=design)
