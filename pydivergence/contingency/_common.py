"""
Common types for power-divergence statistics.

Defines DivergenceParams (the payload every backend returns), the lambda
name table and the default parameter values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydivergence.core.exceptions import InvalidInputError
from pydivergence.core.validation import check_finite_scalar


DEFAULT_LAMBDA = 1.0
DEFAULT_MIN_FREQ = 5

# Same names as scipy.stats.power_divergence
LAMBDA_NAMES: dict[str, float] = {
    "pearson": 1.0,
    "log-likelihood": 0.0,
    "freeman-tukey": -0.5,
    "mod-log-likelihood": -1.0,
    "neyman": -2.0,
    "cressie-read": 2.0 / 3.0,
}

STATISTIC_NAMES: dict[float, str] = {
    1.0: "Pearson's chi-squared",
    0.0: "likelihood ratio (G-squared)",
    -0.5: "Freeman-Tukey",
    -1.0: "modified likelihood ratio (minimum discrimination information)",
    -2.0: "Neyman's modified chi-squared",
    2.0 / 3.0: "Cressie-Read",
}


def resolve_lambda(lambda_: float | str) -> float:
    """Turn a lambda name or number into a finite float."""
    if isinstance(lambda_, str):
        if lambda_ not in LAMBDA_NAMES:
            names = ", ".join(repr(k) for k in LAMBDA_NAMES)
            raise InvalidInputError(
                f"invalid string for lambda_: {lambda_!r}. Valid strings are {names}"
            )
        return LAMBDA_NAMES[lambda_]
    return check_finite_scalar(lambda_, "lambda_")


def statistic_name(lambda_: float) -> str:
    """Human-readable name of the family member selected by lambda_."""
    return STATISTIC_NAMES.get(lambda_, f"power divergence (lambda = {lambda_:g})")


@dataclass(frozen=True)
class DivergenceParams:
    """
    Parameter payload for power-divergence statistics.

    Attributes
    ----------
    statistic : float
        Value of the statistic, NaN when the minimum-frequency gate failed.
        May be inf for extreme lambda even when the gate passed.
    lambda_ : float
        Family parameter used.
    statistic_name : str
        Name of the family member, e.g. "Pearson's chi-squared".
    df : int
        Degrees of freedom (rows - 1) * (cols - 1).
    n : float
        Grand total of the table.
    min_observed : float
        Smallest observed cell count.
    min_freq : float
        Threshold the smallest observed count was checked against.
    observed : ndarray
        Observed counts, shape (r, c), float64.
    expected : ndarray
        Expected counts under independence, shape (r, c).
    gate_passed : bool
        Whether min_observed >= min_freq held and the sum was evaluated.
    """
    statistic: float
    lambda_: float
    statistic_name: str
    df: int
    n: float
    min_observed: float
    min_freq: float
    observed: NDArray[np.floating[Any]]
    expected: NDArray[np.floating[Any]]
    gate_passed: bool

    @property
    def valid(self) -> bool:
        """True when the minimum-frequency gate passed."""
        return self.gate_passed
