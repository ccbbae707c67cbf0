"""Shared fixtures for API tests."""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.dependencies import get_catalog_service
from app.catalog.memory import InMemoryCategoryRepository, InMemoryProductRepository
from app.catalog.service import CatalogService
from app.infrastructure.database import get_session
from app.main import app


async def sqlite_session() -> AsyncGenerator[AsyncSession, None]:
    """Stand-in for the Postgres session used by the readiness probe."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    try:
        async with async_sessionmaker(engine)() as session:
            yield session
    finally:
        await engine.dispose()


@pytest.fixture
def catalog_service(
    product_repository: InMemoryProductRepository,
    category_repository: InMemoryCategoryRepository,
) -> CatalogService:
    """Catalog service over the in-memory demo catalog."""
    return CatalogService(product_repository, category_repository)


@pytest.fixture
def client(catalog_service: CatalogService) -> Generator[TestClient, None, None]:
    """Create test client backed by the in-memory catalog."""
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service
    app.dependency_overrides[get_session] = sqlite_session
    yield TestClient(app)
    app.dependency_overrides.clear()
