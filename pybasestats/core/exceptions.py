"""
Exception hierarchy for pybasestats.

All exceptions inherit from PyBaseStatsError to allow catching any
library-specific error. Precondition violations (empty input, too few
samples, mismatched lengths) are ValidationErrors; arithmetic that cannot
be carried out (a zero divisor) is a NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyBaseStatsError(Exception):
    """Base exception for all pybasestats errors."""
    pass


class ValidationError(PyBaseStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Sequences that must be aligned by position differ in length.

    Attributes:
        lengths: Mapping of parameter name to observed length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths if lengths is not None else {}


class EmptyInputError(ValidationError):
    """
    A statistic was requested over a sequence with no elements.

    Attributes:
        name: Parameter name of the empty sequence
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class InsufficientSamplesError(ValidationError):
    """
    Too few observations for the requested statistic.

    Raised by the sample variance family, which is undefined for n <= 1.

    Attributes:
        n_samples: Number of observations supplied
        min_samples: Minimum number of observations required
    """

    def __init__(
        self,
        message: str,
        n_samples: int | None = None,
        min_samples: int | None = None,
    ):
        super().__init__(message)
        self.n_samples = n_samples
        self.min_samples = min_samples


class NumericalError(PyBaseStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ZeroDivisorError(NumericalError, ZeroDivisionError):
    """
    A statistic's divisor evaluated to zero.

    Raised by weighted_mean when the weights sum to zero and by
    pearson_correlation when either input is constant.

    Attributes:
        divisor_name: Description of the divisor that vanished
    """

    def __init__(self, message: str, divisor_name: str | None = None):
        super().__init__(message)
        self.divisor_name = divisor_name
