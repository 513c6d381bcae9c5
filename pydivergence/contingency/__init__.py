"""
Power-divergence statistics for two-way contingency tables.

Public API:
    power_divergence(x)            - full result (statistic, df, expected, warnings)
    power_divergence_statistic(t)  - statistic for any lambda
    chi2_statistic(x)              - Pearson's chi-squared (lambda = 1)
    likelihood_ratio(x)            - G-squared (lambda = 0)
    mod_likelihood_ratio(x)        - minimum discrimination information (lambda = -1)
    neyman_statistic(x)            - Neyman's modified chi-squared (lambda = -2)
    freeman_tukey_statistic(x)     - Freeman-Tukey (lambda = -1/2)
    cressie_read_statistic(x)      - Cressie-Read (lambda = 2/3)
    crosstab(x, y, levels)         - paired observations to a count table
"""

from pydivergence.contingency.solvers import (
    power_divergence,
    power_divergence_statistic,
    chi2_statistic,
    likelihood_ratio,
    mod_likelihood_ratio,
    neyman_statistic,
    freeman_tukey_statistic,
    cressie_read_statistic,
    expected_frequencies,
    degrees_of_freedom,
)
from pydivergence.contingency._tabulate import crosstab
from pydivergence.contingency._common import (
    DivergenceParams,
    LAMBDA_NAMES,
    DEFAULT_LAMBDA,
    DEFAULT_MIN_FREQ,
)
from pydivergence.contingency.design import ContingencyDesign
from pydivergence.contingency.solution import DivergenceSolution

__all__ = [
    "power_divergence",
    "power_divergence_statistic",
    "chi2_statistic",
    "likelihood_ratio",
    "mod_likelihood_ratio",
    "neyman_statistic",
    "freeman_tukey_statistic",
    "cressie_read_statistic",
    "expected_frequencies",
    "degrees_of_freedom",
    "crosstab",
    "DivergenceParams",
    "LAMBDA_NAMES",
    "DEFAULT_LAMBDA",
    "DEFAULT_MIN_FREQ",
    "ContingencyDesign",
    "DivergenceSolution",
]
