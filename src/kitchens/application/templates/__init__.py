"""Kitchen templates and preset configurations.

This package provides bundled template configurations for common kitchen
layouts and a TemplateManager class for accessing them.
"""

from kitchens.application.templates.manager import (
    DEFAULT_FACADE,
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
    create_kitchen_config,
)

__all__ = [
    "DEFAULT_FACADE",
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
    "create_kitchen_config",
]
