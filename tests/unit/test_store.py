"""Unit tests for the in-memory kitchen store."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from kitchens.application import KitchenStore
from kitchens.application.config import CenteringOptions, KitchenConfig
from kitchens.domain.value_objects import MaterialSlot


@pytest.fixture
def make_store(make_config, material_library, module_library):
    """Build a store over a single-line config and the test libraries."""

    def _make(modules: list[dict], **config_options) -> KitchenStore:
        config = KitchenConfig.model_validate(make_config(modules, **config_options))
        return KitchenStore(config, material_library, module_library)

    return _make


def _widths(store: KitchenStore) -> dict[str, float]:
    return {m.id: m.dimensions.width for m in store.renderable_modules}


class TestDefaultStore:
    """The store starts with the complete kitchen."""

    def test_starts_with_complete_kitchen(self) -> None:
        store = KitchenStore()

        assert store.errors == []
        assert store.current_config.default_materials.facade == "cabinet_blue"
        assert len(store.renderable_modules) == 11

    def test_change_default_material(self) -> None:
        store = KitchenStore()
        store.change_default_material(MaterialSlot.FACADE, "loft_dark_glossy")

        facade = store.material_library.facades["loft_dark_glossy"]
        assert store.current_config.default_materials.facade == "loft_dark_glossy"
        assert all(m.materials.facade == facade for m in store.renderable_modules)

    def test_change_material_by_slot_name(self) -> None:
        store = KitchenStore()
        store.change_default_material("countertop", "concrete_grey")
        assert store.current_config.default_materials.countertop == "concrete_grey"


class TestLineEditing:
    """Tests for adding, updating and removing line modules."""

    def test_add_module(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 100), make_module("b", "auto")])
        module_id = store.add_module_to_line("wall", {"type": "tall", "width": 50})

        assert module_id == "module-1"
        assert _widths(store) == {"a": 100.0, "b": 150.0, "module-1": 50.0}

    def test_add_module_skips_taken_ids(self, make_store, make_module) -> None:
        store = make_store([make_module("module-1", 100)])
        assert store.add_module_to_line("wall", {"type": "tall", "width": 50}) == "module-2"

    def test_add_module_unknown_line(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 100)])
        assert store.add_module_to_line("island", {"type": "tall", "width": 50}) is None
        assert _widths(store) == {"a": 100.0}

    def test_update_module(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 100), make_module("b", "auto")])

        assert store.update_module("wall", "a", {"width": 150})
        assert _widths(store) == {"a": 150.0, "b": 150.0}

    def test_update_accepts_snake_case(self, make_store, make_module, material_library) -> None:
        store = make_store([make_module("a", 100)])
        store.update_module("wall", "a", {"material_overrides": {"facade": "other_facade"}})

        module = store.renderable_modules[0]
        assert module.materials.facade == material_library.facades["other_facade"]

    def test_invalid_update_leaves_store_unchanged(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 100)])
        with pytest.raises(PydanticValidationError):
            store.update_module("wall", "a", {"width": -5})
        assert _widths(store) == {"a": 100.0}

    def test_update_unknown_module(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 100)])
        assert not store.update_module("wall", "zzz", {"width": 50})
        assert not store.update_module("island", "a", {"width": 50})

    def test_remove_module(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 100), make_module("b", "auto")])

        assert store.remove_module_from_line("wall", "a")
        assert _widths(store) == {"b": 300.0}
        assert not store.remove_module_from_line("wall", "a")
        assert not store.remove_module_from_line("island", "b")


class TestRegeneration:
    """Tests for how the store reacts to validation and layout results."""

    def test_validation_errors_clear_layout(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 100), make_module("b", "auto")])
        store.update_module("wall", "a", {"width": 400})

        assert store.renderable_modules == []
        assert store.errors == [
            "Cannot fix overflow on line wall: auto module b has no default width."
        ]

        store.update_module("wall", "a", {"width": 100})
        assert store.errors == []
        assert _widths(store) == {"a": 100.0, "b": 200.0}

    def test_overflow_fix_does_not_stick(self, make_store, make_module) -> None:
        store = make_store([make_module("s", "auto", "sink", "single"), make_module("a", 310)])
        assert store.warnings == ["Overflow on line wall. Auto-fixing..."]
        assert _widths(store)["s"] == pytest.approx(70.0)

        store.update_module("wall", "a", {"width": 100})

        assert store.warnings == []
        assert _widths(store) == {"s": 200.0, "a": 100.0}

    def test_auto_module_without_room_reported(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 300), make_module("b", "auto")])

        assert store.renderable_modules == []
        assert store.errors == ["Auto modules on line wall would resolve to non-positive width."]

    def test_corrections_adopted(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 10, "base", "doors")])

        assert store.warnings == ["Module a width clamped to min value."]
        assert store.current_config.layout_lines[0].modules[0].fixed_width == 30.0

    def test_set_centering(self, make_store, make_module) -> None:
        store = make_store([make_module("a", 100)], dimensions={"sideA": 400, "sideB": 200})
        store.set_centering(CenteringOptions(enabled=True))

        position = store.renderable_modules[0].position
        assert position.x == pytest.approx(200.0)
        assert position.z == pytest.approx(-100.0)
