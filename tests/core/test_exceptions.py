"""
Tests for the pydivergence exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyDivergenceError)
    - Diagnostic attributes on DimensionError and MinFrequencyWarning
    - MinFrequencyWarning is a warning, not an error
"""

import warnings

import pytest

from pydivergence.core.exceptions import (
    DimensionError,
    InvalidInputError,
    MinFrequencyWarning,
    PyDivergenceError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyDivergenceError."""

    def test_invalid_input_is_pydivergence_error(self):
        with pytest.raises(PyDivergenceError):
            raise InvalidInputError("bad input")

    def test_dimension_error_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            raise DimensionError("wrong shape")

    def test_min_frequency_warning_is_user_warning(self):
        assert issubclass(MinFrequencyWarning, UserWarning)
        assert not issubclass(MinFrequencyWarning, PyDivergenceError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_dimension_error_shape(self):
        err = DimensionError("1D input", shape=(4,))
        assert err.shape == (4,)
        assert str(err) == "1D input"

    def test_dimension_error_default_shape(self):
        assert DimensionError("x").shape is None

    def test_min_frequency_warning_fields(self):
        w = MinFrequencyWarning("too small", min_observed=1.0, min_freq=5.0)
        assert w.min_observed == 1.0
        assert w.min_freq == 5.0
        assert str(w) == "too small"

    def test_min_frequency_warning_can_be_emitted(self):
        with pytest.warns(MinFrequencyWarning, match="too small"):
            warnings.warn(MinFrequencyWarning("too small"), stacklevel=1)
