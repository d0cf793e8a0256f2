"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Corrections are reported as warnings
- Exit codes are correct
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from kitchens.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner) -> None:
        """Valid config should pass with exit code 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_kitchen.json")])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        """Unknown fields should cause validation failure."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "ovenCount" in result.output

    def test_config_with_warnings(self, runner: CliRunner) -> None:
        """Corrected configs are valid with exit code 2."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "kitchen_with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Module base-1 width clamped to max value." in result.output
        assert "Hanging module upper-1 has no valid base module. Removing." in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_overflow_error(self, runner: CliRunner) -> None:
        """The error mismatch policy turns an overflow into a failure."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "overflow_error.json")])

        assert result.exit_code == 1
        assert "Total width on line main_wall exceeds line length." in result.output
        assert "Validation failed: 1 error(s), 0 warning(s)" in result.output

    def test_writes_fixed_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """--output writes the corrected configuration."""
        output = tmp_path / "fixed.json"
        result = runner.invoke(
            app,
            [
                "validate",
                str(FIXTURES_PATH / "kitchen_with_warnings.json"),
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 2
        assert f"Fixed configuration written to {output}" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["layoutLines"][0]["modules"][0]["width"] == 120.0
        assert data["hangingModules"] == []

    def test_custom_module_library(self, runner: CliRunner, tmp_path: Path) -> None:
        """--modules replaces the bundled module library."""
        modules = tmp_path / "modules.json"
        modules.write_text(
            json.dumps({"base": {"variants": {"doors": {"minWidth": 30, "maxWidth": 200}}}}),
            encoding="utf-8",
        )
        result = runner.invoke(
            app,
            [
                "validate",
                str(FIXTURES_PATH / "kitchen_with_warnings.json"),
                "--modules",
                str(modules),
            ],
        )

        assert result.exit_code == 2
        assert "clamped" not in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_invalid_module_library(self, runner: CliRunner, tmp_path: Path) -> None:
        """A broken library file fails before validation runs."""
        modules = tmp_path / "modules.json"
        modules.write_text("{not json", encoding="utf-8")
        result = runner.invoke(
            app,
            ["validate", str(FIXTURES_PATH / "valid_kitchen.json"), "--modules", str(modules)],
        )

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
