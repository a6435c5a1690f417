"""
Shared compute infrastructure for pybasestats.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers
"""

from pybasestats.core.compute.timing import Timer, timed
from pybasestats.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_SUMMATION,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_SUMMATION",
]
