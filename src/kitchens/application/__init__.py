"""Application layer - use cases and orchestration."""

from .commands import GenerateLayoutCommand, ValidateConfigCommand
from .dtos import LayoutOutput
from .store import KitchenStore

__all__ = [
    "GenerateLayoutCommand",
    "KitchenStore",
    "LayoutOutput",
    "ValidateConfigCommand",
]
