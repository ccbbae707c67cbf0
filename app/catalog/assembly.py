"""Conversion of stored catalog rows into their external form.

Views are plain frozen dataclasses so the service layer stays independent
of both the ORM session and the HTTP schemas.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from app.catalog.models import Category, Product, ProductVariant
from app.catalog.pricing import resolve_price


@dataclass(frozen=True)
class CategoryView:
    """External category representation."""

    id: int
    code: str
    name: str


@dataclass(frozen=True)
class VariantView:
    """External variant representation.

    Attributes:
        price: Effective price, already resolved against the product.
    """

    id: int
    product_id: int
    name: str
    sku: str
    price: Decimal


@dataclass(frozen=True)
class ProductView:
    """External product representation."""

    id: int
    code: str
    price: Decimal
    category: CategoryView
    variants: list[VariantView] = field(default_factory=list)


def assemble_category(category: Category) -> CategoryView:
    """Convert a category row to its view."""
    return CategoryView(id=category.id, code=category.code, name=category.name)


def assemble_variant(variant: ProductVariant, product_price: Decimal) -> VariantView:
    """Convert a variant row to its view, resolving its effective price."""
    return VariantView(
        id=variant.id,
        product_id=variant.product_id,
        name=variant.name,
        sku=variant.sku,
        price=resolve_price(variant.price, product_price),
    )


def assemble_product(product: Product) -> ProductView:
    """Convert a product row, with its category and variants, to its view.

    Args:
        product: Product with category and variants loaded.

    Returns:
        Product view with every variant priced.
    """
    return ProductView(
        id=product.id,
        code=product.code,
        price=product.price,
        category=assemble_category(product.category),
        variants=[assemble_variant(v, product.price) for v in product.variants],
    )
