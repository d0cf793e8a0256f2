"""Application services of the layout pipeline.

- validator_engine: Checks a KitchenConfig and returns a fixed copy
- layout_engine: Turns a validated KitchenConfig into RenderableModules
- centering: Moves generated modules to the middle of the room
"""

from .centering import apply_centering
from .layout_engine import (
    LayoutError,
    generate,
    generate_with_centering,
    resolve_line_widths,
    resolve_materials,
)
from .validator_engine import validate_and_fix

__all__ = [
    "LayoutError",
    "apply_centering",
    "generate",
    "generate_with_centering",
    "resolve_line_widths",
    "resolve_materials",
    "validate_and_fix",
]
