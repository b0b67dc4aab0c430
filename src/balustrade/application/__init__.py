"""Application layer - use cases and orchestration."""

from .commands import CalculateLayoutCommand
from .dtos import CalculationInput, CalculationResult

__all__ = [
    "CalculateLayoutCommand",
    "CalculationInput",
    "CalculationResult",
]
