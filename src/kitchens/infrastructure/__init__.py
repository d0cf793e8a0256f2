"""Infrastructure layer - output formatters and exporters."""

from .formatters import JsonExporter, LayoutTableFormatter

__all__ = [
    "JsonExporter",
    "LayoutTableFormatter",
]
