"""Compute backends for power-divergence statistics."""

from pydivergence.contingency.backends.cpu import CPUDivergenceBackend

__all__ = ["CPUDivergenceBackend"]
