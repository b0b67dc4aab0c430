"""API routers for the REST API."""

from balustrade.web.routers.calculate import router as calculate_router
from balustrade.web.routers.catalog import router as catalog_router
from balustrade.web.routers.export import router as export_router
from balustrade.web.routers.solve import router as solve_router
from balustrade.web.routers.spacing import router as spacing_router
from balustrade.web.routers.validate import router as validate_router

__all__ = [
    "calculate_router",
    "catalog_router",
    "export_router",
    "solve_router",
    "spacing_router",
    "validate_router",
]
