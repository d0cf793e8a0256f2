"""Configuration file loader with comprehensive error handling.

This module loads JSON kitchen configurations and library files. It turns
file system errors, JSON parsing errors and Pydantic validation errors into
a single ConfigError carrying clear, actionable messages.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from kitchens.application.config.schemas import (
    KitchenConfig,
    MaterialLibrary,
    ModuleLibrary,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message

    def messages(self) -> list[str]:
        """One message per problem, suitable for a flat error list."""
        if self.error_type != "validation" or not self.details:
            return [self.message]
        return [f"{d['path']}: {d['message']}" for d in self.details]


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("globalSettings", "rules"))
        'globalSettings.rules'
        >>> _format_json_path(("layoutLines", 0, "modules", 1, "width"))
        'layoutLines[0].modules[1].width'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            # Array index - append to last part with brackets
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts) or "<root>"


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract and format validation errors from a Pydantic ValidationError."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a human-readable message."""
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    """Read and parse a JSON file, raising ConfigError on failure."""
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def _validate(model: type[ModelT], data: Any, path: Path | None = None) -> ModelT:
    """Validate data against a model, raising ConfigError on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> KitchenConfig:
    """Load and validate a kitchen configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated KitchenConfig instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.

    Example:
        >>> try:
        ...     config = load_config(Path("my-kitchen.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    return _validate(KitchenConfig, _read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> KitchenConfig:
    """Load and validate a kitchen configuration from a dictionary.

    This is how configurations from API requests and assistant tool calls
    enter the pipeline.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(KitchenConfig, data)


def load_material_library(path: Path) -> MaterialLibrary:
    """Load a material library from a JSON file."""
    return _validate(MaterialLibrary, _read_json(path), path)


def load_module_library(path: Path) -> ModuleLibrary:
    """Load a module library from a JSON file."""
    return _validate(ModuleLibrary, _read_json(path), path)


def load_material_library_from_dict(data: dict[str, Any]) -> MaterialLibrary:
    """Validate material library data that is already in memory."""
    return _validate(MaterialLibrary, data)


def load_module_library_from_dict(data: dict[str, Any]) -> ModuleLibrary:
    """Validate module library data that is already in memory."""
    return _validate(ModuleLibrary, data)
