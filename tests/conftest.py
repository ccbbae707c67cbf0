"""Shared fixtures for catalog tests.

Provides an in-memory SQLite database seeded with the demo catalog and
matching in-memory repositories.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import app.catalog.models  # noqa: F401  (registers tables on Base.metadata)
from app.catalog.memory import InMemoryCategoryRepository, InMemoryProductRepository
from app.catalog.seed import build_catalog, seed_catalog
from app.infrastructure.database import Base

SQLITE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an empty in-memory database with the catalog schema."""
    engine = create_async_engine(SQLITE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory over the seeded database."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as seed_session:
        await seed_catalog(seed_session)
        await seed_session.commit()
    return factory


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Fresh session over the seeded database.

    Nothing from seeding is in this session's identity map, so every
    relationship a test reads must have been loaded by the query itself.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def category_repository() -> InMemoryCategoryRepository:
    """In-memory categories matching the demo catalog."""
    categories, _ = build_catalog()
    return InMemoryCategoryRepository(categories)


@pytest.fixture
def product_repository(category_repository: InMemoryCategoryRepository) -> InMemoryProductRepository:
    """In-memory products matching the demo catalog."""
    _, products = build_catalog()
    # Reuse the stored categories so IDs line up
    for product in products:
        product.category = category_repository.get_by_code(product.category.code)
    return InMemoryProductRepository(products)
