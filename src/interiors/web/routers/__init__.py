"""API routers for the REST API."""

from interiors.web.routers.catalog import router as catalog_router
from interiors.web.routers.quotations import router as quotations_router
from interiors.web.routers.templates import router as templates_router
from interiors.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "quotations_router",
    "templates_router",
    "validate_router",
]
