"""
ContingencyDesign: validated, immutable input for power-divergence statistics.

Two factory classmethods cover the two input shapes: a ready-made table, or
paired observations plus their levels. Both end in the same validated
table, so the statistic itself is written once.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pydivergence.core.validation import check_finite_scalar, validate_table
from pydivergence.contingency._common import (
    DEFAULT_LAMBDA,
    DEFAULT_MIN_FREQ,
    resolve_lambda,
)
from pydivergence.contingency._tabulate import crosstab


@dataclass(frozen=True)
class ContingencyDesign:
    """
    Design for power-divergence statistics.

    Do not construct directly; use for_table() or for_observations().
    """
    _table: NDArray[np.floating[Any]]
    _lambda: float = DEFAULT_LAMBDA
    _min_freq: float = DEFAULT_MIN_FREQ
    _levels: tuple[Any, ...] | None = None
    _data_name: str = "x"

    @property
    def table(self) -> NDArray[np.floating[Any]]:
        return self._table

    @property
    def lambda_(self) -> float:
        return self._lambda

    @property
    def min_freq(self) -> float:
        return self._min_freq

    @property
    def levels(self) -> tuple[Any, ...] | None:
        return self._levels

    @property
    def data_name(self) -> str:
        return self._data_name

    @property
    def shape(self) -> tuple[int, int]:
        return self._table.shape

    # --- Factory classmethods ---

    @classmethod
    def for_table(
        cls,
        table: ArrayLike,
        *,
        lambda_: float | str = DEFAULT_LAMBDA,
        min_freq: float = DEFAULT_MIN_FREQ,
    ) -> ContingencyDesign:
        """
        Build design from a two-way table of counts.

        Parameters
        ----------
        table : array-like
            r x c table of nonnegative integer counts, r, c >= 2.
        lambda_ : float or str
            Family parameter, or one of the names in LAMBDA_NAMES.
        min_freq : float
            Smallest acceptable observed cell count.
        """
        lam = resolve_lambda(lambda_)
        mf = check_finite_scalar(min_freq, "min_freq")
        arr = validate_table(table, "table")
        return cls(_table=arr, _lambda=lam, _min_freq=mf, _data_name="x")

    @classmethod
    def for_observations(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        levels: Iterable[Any] | None = None,
        *,
        lambda_: float | str = DEFAULT_LAMBDA,
        min_freq: float = DEFAULT_MIN_FREQ,
    ) -> ContingencyDesign:
        """
        Build design by cross-tabulating paired observations.

        Parameters
        ----------
        x, y : array-like
            Paired categorical observations of equal length.
        levels : iterable or None
            Levels shared by x and y, e.g. ``range(1, 4)``. If None, the
            sorted union of observed values.
        """
        lam = resolve_lambda(lambda_)
        mf = check_finite_scalar(min_freq, "min_freq")
        level_tuple = tuple(levels) if levels is not None else None
        table = crosstab(x, y, level_tuple)
        arr = validate_table(table, "table")
        return cls(
            _table=arr,
            _lambda=lam,
            _min_freq=mf,
            _levels=level_tuple,
            _data_name="x and y",
        )

    def with_parameters(
        self,
        *,
        lambda_: float | str | None = None,
        min_freq: float | None = None,
    ) -> ContingencyDesign:
        """Copy of this design with lambda_ and/or min_freq replaced; None keeps the current value."""
        changes: dict[str, float] = {}
        if lambda_ is not None:
            changes["_lambda"] = resolve_lambda(lambda_)
        if min_freq is not None:
            changes["_min_freq"] = check_finite_scalar(min_freq, "min_freq")
        return replace(self, **changes) if changes else self

    def __repr__(self) -> str:
        return (
            f"ContingencyDesign(table={self._table.shape}, "
            f"lambda_={self._lambda:g}, min_freq={self._min_freq:g})"
        )
