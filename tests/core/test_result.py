"""
Tests for the Result[P] envelope and the Timer.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
    - Timer sections accumulate and require start/stop ordering
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pybasestats.core.compute.timing import Timer, timed
from pybasestats.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"n": 3},
            timing={"total_seconds": 0.01},
            backend_name="cpu_descriptive",
        )
        assert result.params.value == 42.0
        assert result.info["n"] == 3
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_descriptive"

    def test_default_warnings_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert not result.has_warning("anything")

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("variance undefined for n < 2",),
        )
        assert result.has_warning("variance undefined")
        assert not result.has_warning("correlation")

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_reported(self):
        timer = Timer()
        timer.start()
        with timer.section("mean"):
            pass
        with timer.section("median"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "mean", "median"}
        assert all(v >= 0.0 for v in result.values())

    def test_section_accumulates(self):
        timer = Timer()
        timer.start()
        with timer.section("mean"):
            pass
        first = timer._sections["mean"]
        with timer.section("mean"):
            pass
        timer.stop()
        assert timer.result()["mean"] >= first

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context_manager(self):
        with timed() as timer:
            sum(range(10))
        assert timer.result()["total_seconds"] >= 0.0
