"""
Core infrastructure for pydivergence.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and warning category
    validation: Input validators
"""

from pydivergence.core.result import Result
from pydivergence.core.exceptions import (
    PyDivergenceError,
    InvalidInputError,
    DimensionError,
    MinFrequencyWarning,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyDivergenceError",
    "InvalidInputError",
    "DimensionError",
    "MinFrequencyWarning",
]
