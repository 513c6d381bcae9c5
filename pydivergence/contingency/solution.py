"""
Power-divergence solution type.

DivergenceSolution wraps Result[DivergenceParams] and formats it in the
style of R's print.htest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pydivergence.core.result import Result
from pydivergence.contingency._common import DivergenceParams

if TYPE_CHECKING:
    from pydivergence.contingency.design import ContingencyDesign


@dataclass
class DivergenceSolution:
    """
    User-facing power-divergence result.

    The minimum-frequency gate is reported through ``valid`` and
    ``warnings`` rather than an exception; ``statistic`` is NaN when the
    gate failed.
    """
    _result: Result[DivergenceParams]
    _design: 'ContingencyDesign | None'

    @property
    def statistic(self) -> float:
        """Statistic value, NaN if the minimum-frequency gate failed."""
        return self._result.params.statistic

    @property
    def lambda_(self) -> float:
        return self._result.params.lambda_

    @property
    def statistic_name(self) -> str:
        """Name of the family member, e.g. "Pearson's chi-squared"."""
        return self._result.params.statistic_name

    @property
    def df(self) -> int:
        """Degrees of freedom (rows - 1) * (cols - 1)."""
        return self._result.params.df

    @property
    def n(self) -> float:
        return self._result.params.n

    @property
    def observed(self) -> NDArray[np.floating[Any]]:
        return self._result.params.observed

    @property
    def expected(self) -> NDArray[np.floating[Any]]:
        """Expected counts under independence."""
        return self._result.params.expected

    @property
    def min_observed(self) -> float:
        return self._result.params.min_observed

    @property
    def min_freq(self) -> float:
        return self._result.params.min_freq

    @property
    def valid(self) -> bool:
        """True when the minimum-frequency gate passed."""
        return self._result.params.valid

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def data_name(self) -> str:
        return self._design.data_name if self._design is not None else "x"

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format like R's print.htest, without a p-value.

        Produces output like:
            Power divergence statistic (lambda = 1): Pearson's chi-squared

        data:  x
        statistic = 8.3333, df = 1, n = 50
        """
        p = self._result.params
        lines = [
            f"\tPower divergence statistic (lambda = {p.lambda_:.4g}): "
            f"{p.statistic_name}",
            "",
            f"data:  {self.data_name}",
        ]

        if p.valid:
            stat_str = f"{p.statistic:.5g}"
        else:
            stat_str = "NaN"
        lines.append(f"statistic = {stat_str}, df = {p.df}, n = {p.n:g}")

        for w in self._result.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DivergenceSolution(lambda_={p.lambda_:g}, "
            f"statistic={p.statistic:.4g}, df={p.df})"
        )
