"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from app.api.catalog import router as catalog_router
from app.api.categories import router as categories_router
from app.api.health import router as health_router

__all__ = [
    "catalog_router",
    "categories_router",
    "health_router",
]
