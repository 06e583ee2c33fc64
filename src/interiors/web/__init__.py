"""FastAPI REST API for furniture quotations.

Usage:
    uvicorn interiors.web:app --reload
"""

from interiors.web.app import app, create_app

__all__ = ["app", "create_app"]
