"""Pytest configuration and shared fixtures for kitchen tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from kitchens.application.config import MaterialLibrary, ModuleLibrary


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Libraries
# =============================================================================

TEST_MATERIALS: dict[str, Any] = {
    "facades": {
        "test_facade": {"type": "standard", "color": "#333333", "roughness": 0.1, "metalness": 0.0},
        "other_facade": {"type": "paint", "color": "#FFFFFF", "shaderId": "gloss"},
    },
    "countertops": {
        "test_countertop": {"type": "standard", "color": "#666666", "roughness": 0.8},
    },
    "handles": {
        "test_handle": {
            "source": {"type": "procedural", "generator": "bar"},
            "material": {"type": "standard", "color": "#000000", "roughness": 0.2, "metalness": 0.8},
        },
    },
}

TEST_MODULES: dict[str, Any] = {
    "base": {
        "variants": {
            "doors": {"defaultHeight": 90, "minWidth": 30, "maxWidth": 120},
            "drawers": {"defaultHeight": 90, "minWidth": 40, "maxWidth": 120},
        }
    },
    "sink": {"variants": {"single": {"defaultWidth": 80, "minWidth": 60, "maxWidth": 100}}},
    "wall": {"variants": {"doors": {"defaultHeight": 70, "minWidth": 30, "maxWidth": 120}}},
}


@pytest.fixture
def material_library() -> MaterialLibrary:
    """Small material library with one entry per slot plus a second facade."""
    return MaterialLibrary.model_validate(TEST_MATERIALS)


@pytest.fixture
def module_library() -> ModuleLibrary:
    """Module library with base, sink and wall variants."""
    return ModuleLibrary.model_validate(TEST_MODULES)


# =============================================================================
# Config builders
# =============================================================================


@pytest.fixture
def make_module() -> Callable[..., dict[str, Any]]:
    """Build a line module dict. Type defaults to "tall", which no library bounds."""

    def _make(
        module_id: str,
        width: float | str,
        module_type: str = "tall",
        variant: str | None = None,
        **extra: Any,
    ) -> dict[str, Any]:
        module: dict[str, Any] = {"id": module_id, "type": module_type, "width": width}
        if variant is not None:
            module["variant"] = variant
        module.update(extra)
        return module

    return _make


@pytest.fixture
def make_config() -> Callable[..., dict[str, Any]]:
    """Build a single-line kitchen config dict in wire format."""

    def _make(
        modules: list[dict[str, Any]],
        *,
        length: float = 300,
        gap: float = 0,
        policy: str = "auto_fix",
        direction: dict[str, float] | None = None,
        hanging_modules: list[dict[str, Any]] | None = None,
        default_materials: dict[str, str] | None = None,
        dimensions: dict[str, float] | None = None,
        constraints: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        config: dict[str, Any] = {
            "kitchenId": "test_kitchen",
            "name": "Test Kitchen",
            "style": "test",
            "globalSettings": {
                "dimensions": {
                    "height": 220,
                    "countertopHeight": 90,
                    "countertopDepth": 60,
                    "countertopThickness": 2,
                    "wallGap": 50,
                    "baseCabinetHeight": 90,
                    "wallCabinetHeight": 70,
                    "wallCabinetDepth": 35,
                    "plinthHeight": 12,
                    "plinthDepth": 50,
                    **(dimensions or {}),
                },
                "rules": {"mismatchPolicy": policy, "gapBetweenModules": gap},
            },
            "defaultMaterials": (
                default_materials
                if default_materials is not None
                else {
                    "facade": "test_facade",
                    "countertop": "test_countertop",
                    "handle": "test_handle",
                }
            ),
            "layoutLines": [
                {
                    "id": "wall",
                    "name": "Wall",
                    "length": length,
                    "direction": direction or {"x": 1, "z": 0},
                    "modules": modules,
                }
            ],
            "hangingModules": hanging_modules or [],
        }
        if constraints is not None:
            config["globalConstraints"] = constraints
        return config

    return _make
