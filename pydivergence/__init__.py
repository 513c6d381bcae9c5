"""
pydivergence: power-divergence goodness-of-fit statistics for Python.

Computes the Cressie-Read family of statistics for two-way contingency
tables: Pearson's chi-squared, the likelihood ratio, the minimum
discrimination information statistic, Neyman's and Freeman-Tukey's.

Submodules:
    core: Result envelope, exceptions, validators
    contingency: Power-divergence statistics and cross-tabulation
"""

__version__ = "0.1.0"

from pydivergence import contingency
from pydivergence.contingency import (
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
    crosstab,
)
from pydivergence.core.exceptions import (
    PyDivergenceError,
    InvalidInputError,
    DimensionError,
    MinFrequencyWarning,
)

__all__ = [
    "__version__",
    "contingency",
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
    "PyDivergenceError",
    "InvalidInputError",
    "DimensionError",
    "MinFrequencyWarning",
]
