"""
CPU reference backend for power-divergence statistics.

Runs a ContingencyDesign through the statistic and wraps the outcome,
including any minimum-frequency warning, in a Result.
"""

from __future__ import annotations

from pydivergence.core.result import Result
from pydivergence.contingency._common import DivergenceParams
from pydivergence.contingency.design import ContingencyDesign
from pydivergence.contingency.backends._power_divergence import (
    branch_for,
    power_divergence,
)


class CPUDivergenceBackend:
    """CPU reference backend for power-divergence statistics."""

    @property
    def name(self) -> str:
        return 'cpu_power_divergence'

    def solve(self, design: ContingencyDesign) -> Result[DivergenceParams]:
        """Compute the statistic for design and collect diagnostics."""
        params, warnings_list = power_divergence(design)

        info = {
            'method': 'power_divergence',
            'lambda_': design.lambda_,
            'branch': branch_for(design.lambda_),
            'gate_passed': params.gate_passed,
            'shape': design.shape,
        }

        return Result(
            params=params,
            info=info,
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
