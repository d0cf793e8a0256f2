"""Validator engine for kitchen configurations.

Checks a KitchenConfig against the module library and global constraints
and returns a corrected copy together with warnings and errors:

1. Fixed widths are clamped to the bounds of their module variant.
2. Lines whose fixed widths overflow the line length are reported, or
   absorbed by shrinking "auto" modules, depending on the mismatch policy.
   Lines that fit but leave their auto modules no free space are errors.
3. Hanging modules aligned with a module that does not exist are dropped.
4. Handles placed closer to the top edge than the global handle
   clearance are reported.

The engine never raises. Raw dictionaries are parsed first and schema
problems come back as errors, so callers such as the assistant's tools
always receive a structured result.
"""

from __future__ import annotations

import logging
from typing import Any

from kitchens.application.config.loader import ConfigError, load_config_from_dict
from kitchens.application.config.schemas import (
    GlobalConstraints,
    HangingModuleConfig,
    KitchenConfig,
    LayoutLine,
    MismatchPolicy,
    ModuleConfig,
    ModuleLibrary,
)
from kitchens.application.config.validator import ValidationResult
from kitchens.domain.value_objects import FixedWidth

logger = logging.getLogger(__name__)


def validate_and_fix(
    config: KitchenConfig | dict[str, Any],
    constraints: GlobalConstraints | None,
    module_library: ModuleLibrary,
) -> ValidationResult:
    """Validate a kitchen configuration and fix what can be fixed.

    Args:
        config: Kitchen configuration, as a model or as raw JSON data.
        constraints: Global constraints; the config's own constraints are
            used when None.
        module_library: Module library providing per-variant width bounds.

    Returns:
        ValidationResult whose ``fixed_config`` is a corrected copy of the
        input. The input itself is never modified.
    """
    result = ValidationResult()

    if not isinstance(config, KitchenConfig):
        try:
            config = load_config_from_dict(config)
        except ConfigError as e:
            for message in e.messages():
                result.add_error(message)
            return result

    constraints = constraints or config.global_constraints
    fixed = config.model_copy(deep=True)

    fixed_lines = [
        _validate_line(line, fixed, constraints, module_library, result)
        for line in fixed.layout_lines
    ]
    hanging_modules = _prune_hanging_modules(config, fixed.hanging_modules, result)

    result.fixed_config = fixed.model_copy(
        update={"layout_lines": fixed_lines, "hanging_modules": hanging_modules}
    )
    logger.debug(
        f"Validated kitchen '{config.kitchen_id}': "
        f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    )
    return result


def _validate_line(
    line: LayoutLine,
    config: KitchenConfig,
    constraints: GlobalConstraints,
    module_library: ModuleLibrary,
    result: ValidationResult,
) -> LayoutLine:
    """Clamp widths on a line, check handle clearances and handle overflow.

    Widths written by an earlier run are discarded and computed afresh.
    """
    line = line.model_copy(
        update={
            "modules": [
                _clamp_width(_clear_final_width(module), module_library, result)
                for module in line.modules
            ]
        }
    )
    for module in line.modules:
        _check_handle_clearance(module, constraints, result)

    total_width = sum(
        m.fixed_width for m in line.modules if m.fixed_width is not None
    )
    if total_width > line.length:
        return _resolve_overflow(line, total_width, config, module_library, result)

    _check_auto_share(line, total_width, config, result)
    return line


def _clear_final_width(module: ModuleConfig) -> ModuleConfig:
    if module.final_width is None:
        return module
    return module.model_copy(update={"final_width": None})


def _clamp_width(
    module: ModuleConfig,
    module_library: ModuleLibrary,
    result: ValidationResult,
) -> ModuleConfig:
    """Clamp a fixed width to the bounds of its library variant.

    Auto widths and modules without a library entry are left untouched.
    """
    variant = module_library.lookup(module.type, module.variant_key)
    if variant is None or module.fixed_width is None:
        return module

    width = module.fixed_width
    if width < variant.min_width:
        result.add_warning(f"Module {module.id} width clamped to min value.")
        width = variant.min_width
    if width > variant.max_width:
        result.add_warning(f"Module {module.id} width clamped to max value.")
        width = variant.max_width

    if width == module.fixed_width:
        return module
    return module.model_copy(update={"width": FixedWidth(width)})


def _check_handle_clearance(
    module: ModuleConfig,
    constraints: GlobalConstraints,
    result: ValidationResult,
) -> None:
    """Warn when a handle is placed closer to the top edge than allowed."""
    if module.handle is None:
        return
    offset = module.handle.placement.offset_from_top
    minimum = constraints.handles.min_distance_from_edge
    if offset is not None and offset < minimum:
        result.add_warning(
            f"Module {module.id} handle is {offset} from the top edge, "
            f"closer than the minimum of {minimum}."
        )


def _check_auto_share(
    line: LayoutLine,
    total_width: float,
    config: KitchenConfig,
    result: ValidationResult,
) -> None:
    """Report auto modules left without room once fixed widths and gaps are placed."""
    auto_modules = line.auto_modules
    if not auto_modules:
        return
    gaps = (len(line.modules) - 1) * config.global_settings.rules.gap_between_modules
    share = (line.length - total_width - gaps) / len(auto_modules)
    if share <= 0:
        result.add_error(
            f"Auto modules on line {line.id} would resolve to non-positive width."
        )


def _resolve_overflow(
    line: LayoutLine,
    total_width: float,
    config: KitchenConfig,
    module_library: ModuleLibrary,
    result: ValidationResult,
) -> LayoutLine:
    """Report an overflowing line or shrink its auto modules.

    Each auto module gives up an equal share of the excess, taken from the
    default width its library variant declares. A module without one has
    no free space to give, so the overflow cannot be fixed.
    """
    if config.global_settings.rules.mismatch_policy is MismatchPolicy.ERROR:
        result.add_error(f"Total width on line {line.id} exceeds line length.")
        return line

    result.add_warning(f"Overflow on line {line.id}. Auto-fixing...")
    auto_modules = line.auto_modules
    if not auto_modules:
        result.add_error(
            f"Cannot fix overflow on line {line.id}: no 'auto' modules to shrink."
        )
        return line

    excess_width = total_width - line.length
    reduction = excess_width / len(auto_modules)

    final_widths: dict[str, float] = {}
    for module in auto_modules:
        variant = module_library.lookup(module.type, module.variant_key)
        if variant is None or variant.default_width is None:
            result.add_error(
                f"Cannot fix overflow on line {line.id}: "
                f"auto module {module.id} has no default width."
            )
            return line
        final_widths[module.id] = variant.default_width - reduction

    if any(width <= 0 for width in final_widths.values()):
        result.add_error(
            f"Cannot fix overflow on line {line.id}: "
            "auto modules would shrink to non-positive width."
        )
        return line

    logger.debug(
        f"Line {line.id}: absorbed {excess_width} overflow across "
        f"{len(auto_modules)} auto module(s)"
    )
    return line.model_copy(
        update={
            "modules": [
                m.model_copy(update={"final_width": final_widths[m.id]})
                if m.id in final_widths
                else m
                for m in line.modules
            ]
        }
    )


def _prune_hanging_modules(
    original: KitchenConfig,
    hanging_modules: list[HangingModuleConfig],
    result: ValidationResult,
) -> list[HangingModuleConfig]:
    """Drop hanging modules whose base module does not exist.

    Base ids are looked up in the original config; width fixes never
    change module ids.
    """
    base_ids = original.line_module_ids()
    kept: list[HangingModuleConfig] = []
    for hanging in hanging_modules:
        if hanging.positioning.align_with_module in base_ids:
            kept.append(hanging)
        else:
            result.add_warning(
                f"Hanging module {hanging.id} has no valid base module. Removing."
            )
    return kept
