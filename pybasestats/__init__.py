"""
pybasestats: basic descriptive statistics for Python.

Reusable statistical primitives for numeric sequences: means, medians,
dispersion measures and Pearson correlation, validated on input and
raising precise exceptions when a statistic is undefined.

Submodules:
    descriptive: Central tendency, dispersion, correlation, describe()
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from pybasestats import descriptive

__all__ = [
    "__version__",
    "descriptive",
]
