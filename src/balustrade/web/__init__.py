"""FastAPI REST API for balustrade layout and ordering.

This module provides a REST API for calculating panel layouts, looking up
certified spacing, validating project files, browsing the calculator
catalog, and exporting order lists.

Usage:
    uvicorn balustrade.web:app --reload
"""

from balustrade.web.app import app, create_app

__all__ = ["app", "create_app"]
