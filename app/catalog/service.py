"""Catalog service for product and category operations.

High-level service that combines repository operations with
assembly into external views.
"""

from dataclasses import dataclass, field

from app.catalog.assembly import (
    CategoryView,
    ProductView,
    assemble_category,
    assemble_product,
)
from app.catalog.filters import ProductFilter
from app.catalog.repository import CategoryRepository, ProductRepository
from app.domain.exceptions import ValidationError


@dataclass
class CatalogPage:
    """Assembled page of products.

    Attributes:
        products: Product views for the requested page.
        total: Count of all matching products, ignoring pagination.
    """

    products: list[ProductView] = field(default_factory=list)
    total: int = 0


class CatalogService:
    """Service for catalog operations.

    Errors from the repositories are propagated unchanged.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(
                SqlAlchemyProductRepository(session),
                SqlAlchemyCategoryRepository(session),
            )
            page = await service.list_products(ProductFilter(category_code="shoes"))
    """

    def __init__(
        self,
        products: ProductRepository,
        categories: CategoryRepository,
    ) -> None:
        """Initialize service with its repositories.

        Args:
            products: Product repository.
            categories: Category repository.
        """
        self.products = products
        self.categories = categories

    async def list_products(self, product_filter: ProductFilter) -> CatalogPage:
        """List products matching a filter.

        Args:
            product_filter: Filter and pagination parameters.

        Returns:
            Assembled page and total match count.
        """
        result = await self.products.query(product_filter)
        return CatalogPage(
            products=[assemble_product(p) for p in result.items],
            total=result.total,
        )

    async def get_product_by_code(self, code: str) -> ProductView:
        """Get a single product by code.

        Raises:
            ProductNotFoundError: If no product has this code.
        """
        product = await self.products.get_by_code(code)
        return assemble_product(product)

    async def list_categories(self) -> list[CategoryView]:
        """List all categories."""
        categories = await self.categories.list_all()
        return [assemble_category(c) for c in categories]

    async def create_category(self, code: str, name: str) -> CategoryView:
        """Create a category.

        Args:
            code: Category code; surrounding whitespace is stripped.
            name: Category name; surrounding whitespace is stripped.

        Returns:
            The created category.

        Raises:
            ValidationError: If code or name is blank.
        """
        code = (code or "").strip()
        name = (name or "").strip()
        if not code or not name:
            raise ValidationError("Code and Name are required")

        category = await self.categories.create(code, name)
        return assemble_category(category)
