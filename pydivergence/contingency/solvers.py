"""
Public entry points for power-divergence statistics.

power_divergence() returns a full DivergenceSolution. The scalar functions
(power_divergence_statistic(), chi2_statistic(), likelihood_ratio(), ...)
return the bare statistic, NaN plus a MinFrequencyWarning when the smallest
observed count is below min_freq, and a RuntimeWarning when the sum
overflows for an extreme lambda.

Each named wrapper accepts either a table or paired observations with
their levels; both go through the same design and backend.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydivergence.core.exceptions import InvalidInputError, MinFrequencyWarning
from pydivergence.core.validation import validate_table
from pydivergence.contingency._common import DEFAULT_LAMBDA, DEFAULT_MIN_FREQ
from pydivergence.contingency.design import ContingencyDesign
from pydivergence.contingency.solution import DivergenceSolution
from pydivergence.contingency.backends.cpu import CPUDivergenceBackend
from pydivergence.contingency.backends._power_divergence import expected_counts


BackendChoice = Literal['cpu', 'auto']


def _get_backend(backend: str = 'cpu'):
    """Select backend. Only the CPU reference backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUDivergenceBackend()
    raise InvalidInputError(
        f"Unknown backend: {backend!r}. Use 'cpu' or 'auto'."
    )


def power_divergence(
    x: ArrayLike | ContingencyDesign,
    y: ArrayLike | None = None,
    levels: Iterable[Any] | None = None,
    *,
    lambda_: float | str | None = None,
    min_freq: float | None = None,
    backend: str = 'cpu',
) -> DivergenceSolution:
    """
    Cressie-Read power-divergence statistic for a two-way table.

    Parameters
    ----------
    x : array-like or ContingencyDesign
        A 2D contingency table, a 1D sequence of observations (with y),
        or a pre-built ContingencyDesign.
    y : array-like or None
        Observations paired with x. When given, a table is built by
        cross-tabulating x and y over levels.
    levels : iterable or None
        Levels shared by x and y, e.g. ``range(1, 4)``. Defaults to the
        sorted union of observed values. Only valid together with y.
    lambda_ : float, str or None
        Family parameter. 1 (default) is Pearson's chi-squared; names
        such as "log-likelihood" or "neyman" are accepted. With a
        ContingencyDesign, a value given here replaces the design's own.
    min_freq : float or None
        If the smallest observed cell count is below this, the statistic
        is NaN and a warning is recorded. Default 5; 0 disables the check.
        With a ContingencyDesign, a value given here replaces the design's own.
    backend : str
        'cpu' (default) or 'auto'.

    Returns
    -------
    DivergenceSolution
        Statistic, degrees of freedom, observed and expected counts,
        and any warnings.
    """
    if isinstance(x, ContingencyDesign):
        design = x.with_parameters(lambda_=lambda_, min_freq=min_freq)
    else:
        lam = DEFAULT_LAMBDA if lambda_ is None else lambda_
        mf = DEFAULT_MIN_FREQ if min_freq is None else min_freq
        if y is not None:
            design = ContingencyDesign.for_observations(
                x, y, levels,
                lambda_=lam,
                min_freq=mf,
            )
        else:
            if levels is not None:
                raise InvalidInputError("levels requires paired observations x and y")
            design = ContingencyDesign.for_table(
                x,
                lambda_=lam,
                min_freq=mf,
            )

    be = _get_backend(backend)
    result = be.solve(design)
    return DivergenceSolution(_result=result, _design=design)


def _statistic(solution: DivergenceSolution) -> float:
    """Unwrap the statistic, re-emitting recorded warnings at the caller."""
    for message in solution.warnings:
        if solution.valid:
            warnings.warn(message, RuntimeWarning, stacklevel=3)
        else:
            warnings.warn(
                MinFrequencyWarning(
                    message,
                    min_observed=solution.min_observed,
                    min_freq=solution.min_freq,
                ),
                stacklevel=3,
            )
    return solution.statistic


def power_divergence_statistic(
    table: ArrayLike | ContingencyDesign,
    lambda_: float | str = DEFAULT_LAMBDA,
    min_freq: float = DEFAULT_MIN_FREQ,
) -> float:
    """
    Power-divergence statistic of a contingency table.

    Returns NaN, and emits MinFrequencyWarning, when the smallest observed
    cell count is below min_freq.

    Raises
    ------
    InvalidInputError
        If the table has negative or non-finite entries, sums to zero, or
        has fewer than 2 rows or columns.
    """
    return _statistic(power_divergence(table, lambda_=lambda_, min_freq=min_freq))


def chi2_statistic(
    x: ArrayLike | ContingencyDesign,
    y: ArrayLike | None = None,
    levels: Iterable[Any] | None = None,
    *,
    min_freq: float = DEFAULT_MIN_FREQ,
) -> float:
    """Pearson's chi-squared statistic (lambda = 1)."""
    return _statistic(power_divergence(x, y, levels, lambda_=1.0, min_freq=min_freq))


def likelihood_ratio(
    x: ArrayLike | ContingencyDesign,
    y: ArrayLike | None = None,
    levels: Iterable[Any] | None = None,
    *,
    min_freq: float = DEFAULT_MIN_FREQ,
) -> float:
    """Likelihood ratio (G-squared) statistic (lambda = 0)."""
    return _statistic(power_divergence(x, y, levels, lambda_=0.0, min_freq=min_freq))


def mod_likelihood_ratio(
    x: ArrayLike | ContingencyDesign,
    y: ArrayLike | None = None,
    levels: Iterable[Any] | None = None,
    *,
    min_freq: float = DEFAULT_MIN_FREQ,
) -> float:
    """Minimum discrimination information statistic (lambda = -1)."""
    return _statistic(power_divergence(x, y, levels, lambda_=-1.0, min_freq=min_freq))


def neyman_statistic(
    x: ArrayLike | ContingencyDesign,
    y: ArrayLike | None = None,
    levels: Iterable[Any] | None = None,
    *,
    min_freq: float = DEFAULT_MIN_FREQ,
) -> float:
    """Neyman's modified chi-squared statistic (lambda = -2)."""
    return _statistic(power_divergence(x, y, levels, lambda_=-2.0, min_freq=min_freq))


def freeman_tukey_statistic(
    x: ArrayLike | ContingencyDesign,
    y: ArrayLike | None = None,
    levels: Iterable[Any] | None = None,
    *,
    min_freq: float = DEFAULT_MIN_FREQ,
) -> float:
    """Freeman-Tukey statistic (lambda = -1/2)."""
    return _statistic(power_divergence(x, y, levels, lambda_=-0.5, min_freq=min_freq))


def cressie_read_statistic(
    x: ArrayLike | ContingencyDesign,
    y: ArrayLike | None = None,
    levels: Iterable[Any] | None = None,
    *,
    min_freq: float = DEFAULT_MIN_FREQ,
) -> float:
    """Cressie-Read recommended statistic (lambda = 2/3)."""
    return _statistic(
        power_divergence(x, y, levels, lambda_=2.0 / 3.0, min_freq=min_freq)
    )


def expected_frequencies(table: ArrayLike) -> NDArray[np.floating[Any]]:
    """Expected counts of a validated table under independence."""
    return expected_counts(validate_table(table, "table"))


def degrees_of_freedom(table: ArrayLike) -> int:
    """(rows - 1) * (cols - 1) of a validated table."""
    nrow, ncol = validate_table(table, "table").shape
    return (nrow - 1) * (ncol - 1)
