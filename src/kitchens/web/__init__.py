"""FastAPI REST API for kitchen layout generation.

This module provides a REST API for validating kitchen configurations,
generating layouts, browsing the libraries and templates, and saving
generated designs in memory.

Usage:
    uvicorn kitchens.web:app --reload
"""

from kitchens.web.app import app, create_app

__all__ = ["app", "create_app"]
