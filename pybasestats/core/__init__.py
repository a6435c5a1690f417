"""
Core infrastructure for pybasestats.

Shared abstractions and utilities used by the descriptive statistics
module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pybasestats.core.result import Result
from pybasestats.core.exceptions import (
    PyBaseStatsError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    EmptyInputError,
    InsufficientSamplesError,
    NumericalError,
    ZeroDivisorError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyBaseStatsError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "EmptyInputError",
    "InsufficientSamplesError",
    "NumericalError",
    "ZeroDivisorError",
]
