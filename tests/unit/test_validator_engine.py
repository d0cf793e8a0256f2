"""Unit tests for the validator engine.

These tests verify:
- Fixed widths are clamped to their library variant bounds
- Overflowing lines follow the mismatch policy
- Auto modules absorb overflow through final_width
- Hanging modules without a base module are dropped
- Handle clearance is checked against the global constraints
- The input configuration is never modified
"""

import pytest

from kitchens.application.config import GlobalConstraints, KitchenConfig, ValidationResult
from kitchens.application.services import validate_and_fix
from kitchens.domain.value_objects import FixedWidth


def _hanging(module_id: str, align_with: str, width: float | str = "auto") -> dict:
    return {
        "id": module_id,
        "type": "wall",
        "variant": "doors",
        "width": width,
        "positioning": {"anchor": "countertop", "alignWithModule": align_with},
    }


def _modules(result: ValidationResult) -> dict:
    assert result.fixed_config is not None
    return {m.id: m for line in result.fixed_config.layout_lines for m in line.modules}


class TestValidInput:
    """Configurations that need no correction."""

    def test_no_errors_or_warnings(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("a", 100), make_module("b", 60, "base", "doors"), make_module("c", "auto")]
        )
        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert result.warnings == []
        assert result.exit_code == 0
        assert result.fixed_config == KitchenConfig.model_validate(config)

    def test_accepts_parsed_config(self, make_config, make_module, module_library) -> None:
        config = KitchenConfig.model_validate(make_config([make_module("a", 100)]))
        result = validate_and_fix(config, None, module_library)
        assert result.is_valid
        assert result.fixed_config is not config

    def test_unparseable_dict_reports_errors(self, module_library) -> None:
        result = validate_and_fix({"name": "No id"}, None, module_library)

        assert not result.is_valid
        assert result.fixed_config is None
        assert any("kitchenId" in e for e in result.errors)


class TestWidthClamping:
    """Tests for clamping fixed widths to library bounds."""

    def test_clamps_to_min(self, make_config, make_module, module_library) -> None:
        config = make_config([make_module("a", 20, "base", "doors")])
        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert result.warnings == ["Module a width clamped to min value."]
        assert _modules(result)["a"].width == FixedWidth(30.0)

    def test_clamps_to_max(self, make_config, make_module, module_library) -> None:
        config = make_config([make_module("a", 150, "base", "doors")])
        result = validate_and_fix(config, None, module_library)

        assert result.warnings == ["Module a width clamped to max value."]
        assert _modules(result)["a"].width == FixedWidth(120.0)
        assert result.exit_code == 2

    def test_unknown_type_or_variant_untouched(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("a", 200), make_module("b", 10, "base")],
            length=600,
        )
        result = validate_and_fix(config, None, module_library)

        assert result.warnings == []
        assert _modules(result)["a"].width == FixedWidth(200.0)
        assert _modules(result)["b"].width == FixedWidth(10.0)

    def test_auto_widths_not_clamped(self, make_config, make_module, module_library) -> None:
        config = make_config([make_module("a", "auto", "base", "doors")], length=500)
        result = validate_and_fix(config, None, module_library)

        assert result.warnings == []
        assert _modules(result)["a"].is_auto

    def test_clamping_can_resolve_overflow(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("a", 200, "base", "doors"), make_module("b", 150, "base", "doors")],
            policy="error",
        )
        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert len(result.warnings) == 2


class TestOverflow:
    """Tests for lines whose fixed widths exceed the line length."""

    def test_error_policy(self, make_config, make_module, module_library) -> None:
        config = make_config([make_module("a", 200), make_module("b", 200)], policy="error")
        result = validate_and_fix(config, None, module_library)

        assert result.errors == ["Total width on line wall exceeds line length."]
        assert result.exit_code == 1

    def test_auto_fix_without_auto_modules(self, make_config, make_module, module_library) -> None:
        config = make_config([make_module("a", 200), make_module("b", 200)])
        result = validate_and_fix(config, None, module_library)

        assert result.warnings == ["Overflow on line wall. Auto-fixing..."]
        assert result.errors == [
            "Cannot fix overflow on line wall: no 'auto' modules to shrink."
        ]

    def test_auto_module_absorbs_overflow(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [
                make_module("s", "auto", "sink", "single"),
                make_module("a", 200),
                make_module("b", 120),
            ]
        )
        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert result.warnings == ["Overflow on line wall. Auto-fixing..."]
        modules = _modules(result)
        # Default width 80 minus the 20 overflow
        assert modules["s"].final_width == pytest.approx(60.0)
        assert modules["s"].is_auto
        assert modules["a"].final_width is None

    def test_overflow_shrinking_below_zero(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [
                make_module("s", "auto", "sink", "single"),
                make_module("a", 200),
                make_module("b", 200),
            ]
        )
        result = validate_and_fix(config, None, module_library)

        # 100 of overflow against a default width of 80
        assert result.errors == [
            "Cannot fix overflow on line wall: auto modules would shrink to non-positive width."
        ]
        assert _modules(result)["s"].final_width is None

    def test_auto_module_without_default_width(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [
                make_module("d", "auto", "base", "doors"),
                make_module("a", 200),
                make_module("b", 120),
            ]
        )
        result = validate_and_fix(config, None, module_library)

        assert result.warnings == ["Overflow on line wall. Auto-fixing..."]
        assert result.errors == [
            "Cannot fix overflow on line wall: auto module d has no default width."
        ]
        assert _modules(result)["d"].final_width is None

    def test_warn_policy_also_fixes(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("s", "auto", "sink", "single"), make_module("a", 310)],
            policy="warn",
        )
        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert _modules(result)["s"].final_width == pytest.approx(70.0)

    def test_exact_fit_is_not_overflow(self, make_config, make_module, module_library) -> None:
        config = make_config([make_module("a", 150), make_module("b", 150)], policy="error")
        result = validate_and_fix(config, None, module_library)
        assert result.is_valid

    def test_stale_final_width_cleared(self, make_config, make_module, module_library) -> None:
        config = make_config([make_module("a", 100), make_module("b", "auto", finalWidth=10)])
        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert _modules(result)["b"].final_width is None


class TestAutoShare:
    """Tests for auto modules left without free space on their line."""

    def test_fixed_widths_fill_line(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("a", 150), make_module("b", 150), make_module("c", "auto")]
        )
        result = validate_and_fix(config, None, module_library)

        assert not result.is_valid
        assert result.warnings == []
        assert result.errors == [
            "Auto modules on line wall would resolve to non-positive width."
        ]

    def test_gaps_consume_free_space(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("a", 140), make_module("b", 150), make_module("c", "auto")],
            gap=5,
        )
        result = validate_and_fix(config, None, module_library)

        assert result.errors == [
            "Auto modules on line wall would resolve to non-positive width."
        ]

    def test_positive_share_is_valid(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("a", 140), make_module("b", 150), make_module("c", "auto")],
            gap=2,
        )
        result = validate_and_fix(config, None, module_library)
        assert result.is_valid

    def test_fills_remaining_space_hint(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [
                make_module("a", 100),
                make_module("b", 500, constraints={"fillsRemainingSpace": True}),
            ]
        )
        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert result.warnings == []
        assert _modules(result)["b"].is_auto
        assert _modules(result)["b"].fixed_width is None


class TestVerticalOffset:
    """A negative vertical offset is a schema error."""

    def test_negative_offset_rejected(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("a", 100, positioning={"anchor": "floor", "offset": {"y": -5}})]
        )
        result = validate_and_fix(config, None, module_library)

        assert not result.is_valid
        assert result.fixed_config is None
        assert any("offset.y" in e for e in result.errors)


class TestHangingModules:
    """Tests for pruning hanging modules."""

    def test_missing_base_removed(self, make_config, make_module, module_library) -> None:
        config = make_config(
            [make_module("a", 100)],
            hanging_modules=[_hanging("upper-1", "a"), _hanging("upper-2", "ghost")],
        )
        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert result.warnings == ["Hanging module upper-2 has no valid base module. Removing."]
        assert result.fixed_config is not None
        assert [h.id for h in result.fixed_config.hanging_modules] == ["upper-1"]


class TestHandleClearance:
    """Tests for the handle clearance check."""

    def _config(self, make_config, make_module, offset: float, constraints=None) -> dict:
        module = make_module("a", 60, handle={"placement": {"offsetFromTop": offset}})
        return make_config([module], constraints=constraints)

    def test_handle_too_close_to_top(self, make_config, make_module, module_library) -> None:
        result = validate_and_fix(self._config(make_config, make_module, 5), None, module_library)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("Module a handle is 5")
        assert "minimum of 10" in result.warnings[0]

    def test_handle_clearance_ok(self, make_config, make_module, module_library) -> None:
        result = validate_and_fix(self._config(make_config, make_module, 10), None, module_library)
        assert result.warnings == []

    def test_config_constraints_used(self, make_config, make_module, module_library) -> None:
        config = self._config(
            make_config, make_module, 5, constraints={"handles": {"minDistanceFromEdge": 2}}
        )
        result = validate_and_fix(config, None, module_library)
        assert result.warnings == []

    def test_explicit_constraints_win(self, make_config, make_module, module_library) -> None:
        constraints = GlobalConstraints.model_validate({"handles": {"minDistanceFromEdge": 20}})
        result = validate_and_fix(
            self._config(make_config, make_module, 15), constraints, module_library
        )
        assert len(result.warnings) == 1


class TestPurity:
    """The validator returns a corrected copy and leaves its input alone."""

    def test_input_not_modified(self, make_config, make_module, module_library) -> None:
        config = KitchenConfig.model_validate(
            make_config(
                [
                    make_module("a", 20, "base", "doors"),
                    make_module("s", "auto", "sink", "single"),
                    make_module("t", 300),
                ],
                hanging_modules=[_hanging("upper-1", "ghost")],
            )
        )
        before = config.model_dump()

        result = validate_and_fix(config, None, module_library)

        assert result.is_valid
        assert config.model_dump() == before
        assert _modules(result)["a"].width == FixedWidth(30.0)

    def test_result_to_dict(self, make_config, make_module, module_library) -> None:
        result = validate_and_fix(make_config([make_module("a", 100)]), None, module_library)
        data = result.to_dict()

        assert data["isValid"] is True
        assert data["errors"] == []
        assert data["fixedConfig"]["kitchenId"] == "test_kitchen"
        assert data["fixedConfig"]["layoutLines"][0]["modules"][0]["width"] == 100.0
