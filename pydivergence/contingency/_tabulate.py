"""
Cross-tabulation of paired categorical observations.

This is a standalone utility (no Design/Backend pipeline). It turns two
parallel sequences into the square count table the statistics consume,
counting with scipy.stats.contingency.crosstab over the shared levels.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.stats import contingency

from pydivergence.core.exceptions import DimensionError, InvalidInputError
from pydivergence.core.validation import check_consistent_length


def _as_1d(values: ArrayLike, name: str) -> NDArray[Any]:
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise DimensionError(
            f"{name}: expected a 1D sequence of observations, got {arr.ndim}D",
            shape=arr.shape,
        )
    return arr


def crosstab(
    x: ArrayLike,
    y: ArrayLike,
    levels: Iterable[Any] | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Count paired observations over a shared set of levels.

    Parameters
    ----------
    x, y : array-like
        Paired categorical observations, same length.
    levels : iterable or None
        Ordered levels shared by both variables, e.g. ``range(1, 4)``.
        Pairs with either value outside ``levels`` are not counted.
        If None, the sorted union of the values in x and y is used.

    Returns
    -------
    ndarray
        Table of shape (L, L) with entry (i, j) the number of pairs equal
        to ``(levels[i], levels[j])``.
    """
    x_arr = _as_1d(x, "x")
    y_arr = _as_1d(y, "y")
    check_consistent_length(x_arr, y_arr, names=("x", "y"))

    if levels is None:
        level_list = np.union1d(x_arr, y_arr).tolist()
    else:
        level_list = list(levels)

    if len(set(level_list)) != len(level_list):
        raise InvalidInputError("levels: contains duplicated values")

    lev = np.asarray(level_list)
    res = contingency.crosstab(x_arr, y_arr, levels=(lev, lev))
    return res.count.astype(np.float64)
