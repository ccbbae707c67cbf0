"""In-memory catalog repositories.

Implement the same protocols as the SQLAlchemy repositories over plain
lists, keeping insertion order. Used as test doubles for the catalog
service and the HTTP layer.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from app.catalog.filters import ProductFilter, ProductListResult
from app.catalog.models import Category, Product, ProductVariant
from app.domain.exceptions import ProductNotFoundError, StorageError


class InMemoryCategoryRepository:
    """In-memory repository for categories."""

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        self._categories: list[Category] = []
        for category in categories:
            self._store(category)

    async def list_all(self) -> Sequence[Category]:
        """Get all categories in insertion order."""
        return list(self._categories)

    async def create(self, code: str, name: str) -> Category:
        """Store a category, enforcing code uniqueness.

        Raises:
            StorageError: If the code is already taken.
        """
        return self._store(Category(code=code, name=name))

    def get_by_code(self, code: str) -> Category | None:
        """Get category by code."""
        for category in self._categories:
            if category.code == code:
                return category
        return None

    def _store(self, category: Category) -> Category:
        if self.get_by_code(category.code) is not None:
            raise StorageError(
                f"UNIQUE constraint failed: categories.code ({category.code})"
            )
        if category.id is None:
            category.id = len(self._categories) + 1
        self._categories.append(category)
        return category


class InMemoryProductRepository:
    """In-memory repository for products.

    Products are expected to arrive with category and variants attached,
    which is how they are handed back.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: list[Product] = []
        self._variant_count = 0
        for product in products:
            self.add(product)

    def add(self, product: Product) -> Product:
        """Store a product."""
        if product.id is None:
            product.id = len(self._products) + 1
        product.category_id = product.category.id
        for variant in product.variants:
            if variant.id is None:
                self._variant_count += 1
                variant.id = self._variant_count
            variant.product_id = product.id
        self._products.append(product)
        return product

    async def query(self, product_filter: ProductFilter) -> ProductListResult:
        """Filter, count and page the stored products."""
        matches = [p for p in self._products if _matches(p, product_filter)]

        if product_filter.limit <= 0:
            return ProductListResult(items=[], total=len(matches))

        start = product_filter.offset
        end = start + product_filter.limit
        return ProductListResult(items=matches[start:end], total=len(matches))

    async def get_by_code(self, code: str) -> Product:
        """Get product by code."""
        for product in self._products:
            if product.code == code:
                return product
        raise ProductNotFoundError(code)


def _matches(product: Product, product_filter: ProductFilter) -> bool:
    if product_filter.category_code and product.category.code != product_filter.category_code:
        return False
    if (
        product_filter.price_less_than is not None
        and not product.price < product_filter.price_less_than
    ):
        return False
    return True


def build_product(
    code: str,
    price: Decimal | str,
    category: Category,
    variants: Iterable[tuple[str, str, Decimal | str | None]] = (),
) -> Product:
    """Build a detached product with its category and variants attached.

    Args:
        code: Product code.
        price: Base price.
        category: Owning category.
        variants: (name, sku, price) tuples; a None price means unset.

    Returns:
        Product ready to hand to InMemoryProductRepository.add.
    """
    product = Product(code=code, price=Decimal(price), category=category)
    product.variants = [
        ProductVariant(
            name=name,
            sku=sku,
            price=None if variant_price is None else Decimal(variant_price),
        )
        for name, sku, variant_price in variants
    ]
    return product
