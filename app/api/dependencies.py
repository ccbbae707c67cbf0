"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.repository import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyProductRepository,
)
from app.catalog.service import CatalogService
from app.infrastructure.database import get_session


def get_catalog_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Get catalog service bound to the request's session."""
    return CatalogService(
        SqlAlchemyProductRepository(session),
        SqlAlchemyCategoryRepository(session),
    )
