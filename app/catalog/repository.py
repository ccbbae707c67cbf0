"""Catalog repositories for database operations.

Provides the storage protocols the catalog service depends on and their
SQLAlchemy implementations. Every product returned by a repository has its
category and variants already loaded.
"""

from collections.abc import Sequence
from typing import Protocol

from sqlalchemy import Select, and_, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.catalog.filters import ProductFilter, ProductListResult
from app.catalog.models import Category, Product
from app.domain.exceptions import ProductNotFoundError, StorageError


class ProductRepository(Protocol):
    """Read access to products with eager-loaded category and variants."""

    async def query(self, product_filter: ProductFilter) -> ProductListResult:
        """Get one page of matching products plus the total match count."""
        ...

    async def get_by_code(self, code: str) -> Product:
        """Get a product by code, raising ProductNotFoundError if absent."""
        ...


class CategoryRepository(Protocol):
    """Read/create access to categories."""

    async def list_all(self) -> Sequence[Category]:
        """Get all categories in storage order."""
        ...

    async def create(self, code: str, name: str) -> Category:
        """Store a new category and return it with its assigned ID."""
        ...


class SqlAlchemyProductRepository:
    """Product repository backed by an async SQLAlchemy session.

    Example usage:
        async with async_session_factory() as session:
            repo = SqlAlchemyProductRepository(session)
            result = await repo.query(
                ProductFilter(category_code="clothing", limit=20),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def query(self, product_filter: ProductFilter) -> ProductListResult:
        """Find products with filtering and pagination.

        Args:
            product_filter: Filter and pagination parameters.

        Returns:
            Page of products and the count of all matches.

        Raises:
            StorageError: If either query fails.
        """
        filtered = self._apply_filter(select(Product), product_filter)

        try:
            count_query = select(func.count()).select_from(filtered.subquery())
            total = (await self.session.execute(count_query)).scalar_one()

            if product_filter.limit <= 0 or product_filter.offset >= total:
                return ProductListResult(items=[], total=total)

            page_query = (
                self._eager(filtered)
                .order_by(Product.id)
                .offset(product_filter.offset)
                .limit(product_filter.limit)
            )
            result = await self.session.execute(page_query)
            products = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        return ProductListResult(items=products, total=total)

    async def get_by_code(self, code: str) -> Product:
        """Get product by code.

        Args:
            code: Product code.

        Returns:
            Product with category and variants loaded.

        Raises:
            ProductNotFoundError: If no product has this code.
            StorageError: If the query fails.
        """
        query = self._eager(select(Product).where(Product.code == code))

        try:
            result = await self.session.execute(query)
            product = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        if product is None:
            raise ProductNotFoundError(code)
        return product

    @staticmethod
    def _apply_filter(query: Select, product_filter: ProductFilter) -> Select:
        conditions = []

        if product_filter.category_code:
            query = query.join(Category, Category.id == Product.category_id)
            conditions.append(Category.code == product_filter.category_code)

        if product_filter.price_less_than is not None:
            conditions.append(Product.price < product_filter.price_less_than)

        if conditions:
            query = query.where(and_(*conditions))
        return query

    @staticmethod
    def _eager(query: Select) -> Select:
        return query.options(
            selectinload(Product.category),
            selectinload(Product.variants),
        )


class SqlAlchemyCategoryRepository:
    """Category repository backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> Sequence[Category]:
        """Get all categories ordered by ID.

        Raises:
            StorageError: If the query fails.
        """
        try:
            result = await self.session.execute(select(Category).order_by(Category.id))
            return result.scalars().all()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    async def create(self, code: str, name: str) -> Category:
        """Insert a category.

        Args:
            code: Unique category code.
            name: Display name.

        Returns:
            The stored category with its ID populated.

        Raises:
            StorageError: If the insert fails (e.g. duplicate code).
        """
        category = Category(code=code, name=name)
        self.session.add(category)
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        return category
