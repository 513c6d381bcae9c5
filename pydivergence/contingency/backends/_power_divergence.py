"""
Power-divergence statistic for a two-way contingency table.

Cressie and Read (1984), Read and Cressie (1988):

    lambda =  1    Pearson's chi-squared
    lambda -> 0    likelihood ratio (G-squared)
    lambda -> -1   minimum discrimination information (Gokhale, Kullback 1978)
    lambda = -2    Neyman's modified chi-squared (Neyman 1949)
    lambda = -1/2  Freeman-Tukey (Freeman, Tukey 1950)

Under regularity conditions all members share the same asymptotic
distribution (Drost 1989); the chi-squared approximation works best for
lambda near 2/3.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
import numpy as np
from numpy.typing import NDArray
from scipy import special

from pydivergence.contingency._common import DivergenceParams, statistic_name

if TYPE_CHECKING:
    from pydivergence.contingency.design import ContingencyDesign


def expected_counts(table: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Expected counts under independence: E[i,j] = row_sum[i] * col_sum[j] / n."""
    row_sums = table.sum(axis=1)
    col_sums = table.sum(axis=0)
    return np.outer(row_sums, col_sums) / table.sum()


def branch_for(lambda_: float) -> str:
    """Which closed form evaluates the sum for this lambda."""
    if lambda_ == 0:
        return "log-likelihood"
    if lambda_ == -1:
        return "mod-log-likelihood"
    return "general"


def divergence_sum(
    observed: NDArray[np.floating[Any]],
    expected: NDArray[np.floating[Any]],
    lambda_: float,
) -> float:
    """
    Evaluate the power-divergence sum over all cells.

    lambda = 0 and lambda = -1 are removable singularities of the general
    formula and get their limiting expressions. Cells with a zero observed
    count contribute exactly 0 in every branch.
    """
    branch = branch_for(lambda_)
    nonzero = observed > 0
    o = observed[nonzero]
    e = expected[nonzero]

    if branch == "log-likelihood":
        # rel_entr(o, e) = o * (ln o - ln e)
        return float(2.0 * np.sum(special.rel_entr(o, e)))

    if branch == "mod-log-likelihood":
        return float(2.0 * np.sum(special.rel_entr(e, o)))

    # Divide step by step: 2 / (lambda * (lambda + 1)) underflows to 0 for
    # huge |lambda| and would turn an infinite sum into NaN
    with np.errstate(over="ignore"):
        terms = o * ((o / e) ** lambda_ - 1.0)
        return float(np.sum(terms) * 2.0 / lambda_ / (lambda_ + 1.0))


def power_divergence(design: ContingencyDesign) -> tuple[DivergenceParams, list[str]]:
    """Power-divergence statistic with the minimum-frequency gate."""
    table = design.table.copy()
    lambda_ = design.lambda_
    min_freq = design.min_freq
    warnings_list: list[str] = []

    nrow, ncol = table.shape
    n = float(table.sum())
    expected = expected_counts(table)
    df = (nrow - 1) * (ncol - 1)

    # Checked on the observed table, not the expected one
    min_observed = float(table.min())
    if min_observed < min_freq:
        warnings_list.append(
            f"Min frequency requirement violated - returning NaN: "
            f"minimum observed count {min_observed:g} < min_freq {min_freq:g}"
        )
        stat = float("nan")
        gate_passed = False
    else:
        stat = divergence_sum(table, expected, lambda_)
        gate_passed = True
        if not np.isfinite(stat):
            warnings_list.append(
                f"Statistic is not finite for lambda = {lambda_:g}: "
                f"the power terms overflow double precision"
            )

    return DivergenceParams(
        statistic=stat,
        lambda_=lambda_,
        statistic_name=statistic_name(lambda_),
        df=df,
        n=n,
        min_observed=min_observed,
        min_freq=min_freq,
        observed=table,
        expected=expected,
        gate_passed=gate_passed,
    ), warnings_list
