"""
Generic result container for pydivergence computations.

Every backend returns a Result so that warnings and diagnostics travel
with the numbers instead of through a global side channel.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (statistic, expected counts, ...)
        info: Structured metadata (method, branch taken, gate outcome)
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DivergenceParams(...),
        ...     info={'method': 'power_divergence', 'branch': 'general'},
        ...     backend_name='cpu_power_divergence',
        ... )
    """
    params: P
    info: dict[str, Any]
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
