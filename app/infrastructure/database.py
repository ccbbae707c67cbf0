"""Database engine and session management.

One async engine per process; one session per request, committed when the
request succeeds and rolled back when it raises.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.domain.exceptions import StorageError
from app.infrastructure.config import settings

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Declarative base for catalog tables
Base = declarative_base()


async def create_tables() -> None:
    """Create any catalog tables that don't exist yet.

    Alembic owns the schema in deployed environments; this is for local
    databases seeded by ``scripts/seed_catalog.py``.
    """
    import app.catalog.models  # noqa: F401  (registers tables on Base.metadata)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a request-scoped database session.

    Yields:
        AsyncSession, committed after the request handler returns.

    Raises:
        StorageError: If the commit fails.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise

        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            raise StorageError(str(e)) from e
