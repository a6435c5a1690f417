"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_not_empty: empty sequence detection
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
"""

import numpy as np
import pytest

from pybasestats.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientSamplesError,
    LengthMismatchError,
    ValidationError,
)
from pybasestats.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_ndim,
    check_not_empty,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert np.issubdtype(result.dtype, np.floating)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype bool"):
            check_array([True, False], "x")

    def test_empty_list_accepted(self):
        result = check_array([], "x")
        assert result.size == 0

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.int8, np.uint64])
    def test_every_numeric_dtype_becomes_float64(self, dtype):
        result = check_array(np.array([1, 2, 3], dtype=dtype), "x")
        assert result.dtype == np.float64

    def test_float64_array_not_copied(self):
        arr = np.array([1.0, 2.0])
        assert check_array(arr, "x") is arr

    def test_ints_beyond_int64_accepted(self):
        result = check_array([10**20, 10**20], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1e20, 1e20])

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x: non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array([1, "a", None], "x")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="pairs"):
            check_array([[1, 2], [3]], "pairs")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0, 0.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 0 Inf"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match=r"0 NaN, 2 Inf"):
            check_finite(np.array([np.inf, -np.inf, 1.0]), "x")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_fails_1d_check(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")

    def test_2d_passes(self):
        check_2d(np.zeros((3, 2)), "pairs")

    def test_scalar_fails_1d_check(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_ndim(np.asarray(5.0), 1, "x")


# ═══════════════════════════════════════════════════════════════════════
# check_not_empty
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNotEmpty:

    def test_non_empty_passes(self):
        check_not_empty(np.array([0.0]), "x")

    def test_empty_raises_with_name(self):
        with pytest.raises(EmptyInputError) as exc_info:
            check_not_empty(np.array([]), "values")
        assert exc_info.value.name == "values"


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("a", "b"))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(3), names=("a",))

    def test_mismatch_raises(self):
        with pytest.raises(LengthMismatchError, match="a=3, b=2") as exc_info:
            check_consistent_length(np.zeros(3), np.ones(2), names=("a", "b"))
        assert exc_info.value.lengths == {"a": 3, "b": 2}

    def test_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            check_consistent_length(np.zeros(1), np.ones(2), names=("a", "b"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length(np.zeros(3), np.ones(3), names=("a",))


# ═══════════════════════════════════════════════════════════════════════
# check_min_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMinSamples:

    def test_enough_samples_pass(self):
        check_min_samples(np.zeros(2), 2, "x")

    def test_too_few_samples(self):
        with pytest.raises(InsufficientSamplesError, match="at least 2 samples, got 1") as exc_info:
            check_min_samples(np.zeros(1), 2, "x")
        assert exc_info.value.n_samples == 1
        assert exc_info.value.min_samples == 2
