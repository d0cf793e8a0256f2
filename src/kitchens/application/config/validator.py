"""Validation result structure shared by the validator engine and its callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kitchens.application.config.schemas import KitchenConfig


@dataclass
class ValidationResult:
    """Container for validation errors, warnings and the fixed configuration.

    Errors block layout generation; warnings describe problems that were
    corrected (clamped widths, absorbed overflow, dropped hanging modules).

    Attributes:
        errors: Blocking problems, one message each
        warnings: Non-blocking problems, one message each
        fixed_config: Copy of the input with corrections applied, or None
            when the input could not be parsed at all
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    fixed_config: KitchenConfig | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, message: str) -> ValidationResult:
        """Add a validation error and return self for chaining."""
        self.errors.append(message)
        return self

    def add_warning(self, message: str) -> ValidationResult:
        """Add a validation warning and return self for chaining."""
        self.warnings.append(message)
        return self

    def to_dict(self) -> dict:
        """Serialize to the camelCase shape used by tools and the REST API."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "fixedConfig": (
                self.fixed_config.model_dump(
                    mode="json", by_alias=True, exclude_none=True
                )
                if self.fixed_config is not None
                else None
            ),
        }
