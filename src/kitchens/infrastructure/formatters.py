"""Output formatters and exporters for kitchen layouts."""

from __future__ import annotations

import json

from kitchens.application.config.schemas import RenderableModule, count_fronts
from kitchens.application.dtos import LayoutOutput


class LayoutTableFormatter:
    """Formats generated modules as a plain-text table.

    Handle children are listed under their parent, indented.
    """

    def format(self, modules: list[RenderableModule]) -> str:
        """Format modules as a table."""
        if not modules:
            return "No modules in layout."

        lines = [
            "KITCHEN LAYOUT",
            "=" * 96,
            f"{'Module':<20} {'Type':<8} {'Variant':<14} {'Position (x, y, z)':<26} "
            f"{'W x H x D':<20} {'Rot':<5} {'Fronts'}",
            "-" * 96,
        ]
        for module in modules:
            lines.append(self._format_row(module, module.id))
            for child in module.children:
                lines.append(self._format_row(child, f"  {child.id}"))

        lines.append("-" * 96)
        lines.append(f"{len(modules)} module(s)")
        return "\n".join(lines)

    def _format_row(self, module: RenderableModule, label: str) -> str:
        pos, dims = module.position, module.dimensions
        position = f"({pos.x:.1f}, {pos.y:.1f}, {pos.z:.1f})"
        size = f"{dims.width:.1f} x {dims.height:.1f} x {dims.depth:.1f}"
        fronts = "" if module.type == "handle" else str(count_fronts(module.structure))
        return (
            f"{label:<20} {module.type:<8} {module.variant:<14} {position:<26} "
            f"{size:<20} {module.rotation.y:<5.0f} {fronts}"
        )


class JsonExporter:
    """Exports layout output as JSON."""

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as a JSON string."""
        return json.dumps(output.to_dict(), indent=2)
