"""
Exception hierarchy for pydivergence.

All exceptions inherit from PyDivergenceError so callers can catch any
library-specific error in one place. Non-fatal conditions are reported as
warnings, not exceptions; their category lives here too.

Design principles:
    - Hard input problems raise immediately
    - Error messages name the offending parameter and the actual value
    - Statistical-adequacy problems never raise
"""


class PyDivergenceError(Exception):
    """Base exception for all pydivergence errors."""
    pass


class InvalidInputError(PyDivergenceError):
    """
    Input validation failed.

    Raised when a contingency table or its parameters are malformed:
    negative or non-finite counts, an all-zero table, fewer than two rows
    or columns, an unknown lambda name, and so on.
    """
    pass


class DimensionError(InvalidInputError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a table is not two-dimensional, or when paired observation
    sequences have different lengths.

    Attributes:
        shape: Offending shape, if available
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class MinFrequencyWarning(UserWarning):
    """
    The smallest observed cell count is below ``min_freq``.

    The asymptotic chi-squared approximation is considered unreliable and
    the statistic is reported as NaN.

    Attributes:
        min_observed: Smallest observed cell count
        min_freq: Threshold that was not met
    """

    def __init__(
        self,
        message: str,
        min_observed: float | None = None,
        min_freq: float | None = None,
    ):
        super().__init__(message)
        self.min_observed = min_observed
        self.min_freq = min_freq
