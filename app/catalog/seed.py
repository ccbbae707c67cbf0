"""Demo catalog data.

A small fixed catalog used by the seed script and the test suite.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import Category, Product, ProductVariant

# (code, name)
CATEGORIES: list[tuple[str, str]] = [
    ("clothing", "Clothing"),
    ("shoes", "Shoes"),
    ("accessories", "Accessories"),
]

# (code, price, category code, [(variant name, sku, price or None)])
PRODUCTS: list[tuple[str, str, str, list[tuple[str, str, str | None]]]] = [
    ("PROD001", "100.00", "clothing", [
        ("Small", "PROD001-S", None),
        ("Medium", "PROD001-M", "110.00"),
    ]),
    ("PROD002", "50.00", "shoes", [
        ("Size 8", "PROD002-8", "0.00"),
    ]),
    ("PROD003", "75.00", "accessories", []),
    ("PROD004", "150.00", "clothing", []),
]


def build_catalog() -> tuple[list[Category], list[Product]]:
    """Build transient categories and products.

    Products come with their category and variants attached.

    Returns:
        Categories and products, each in insertion order.
    """
    categories = {code: Category(code=code, name=name) for code, name in CATEGORIES}
    products = [
        Product(
            code=code,
            price=Decimal(price),
            category=categories[category_code],
            variants=[
                ProductVariant(
                    name=name,
                    sku=sku,
                    price=None if variant_price is None else Decimal(variant_price),
                )
                for name, sku, variant_price in variants
            ],
        )
        for code, price, category_code, variants in PRODUCTS
    ]
    return list(categories.values()), products


async def seed_catalog(session: AsyncSession, clear_existing: bool = True) -> dict[str, Any]:
    """Insert the demo catalog.

    Args:
        session: Async SQLAlchemy session.
        clear_existing: Whether to delete existing catalog rows first.

    Returns:
        Seeding result with counts.
    """
    if clear_existing:
        await session.execute(delete(ProductVariant))
        await session.execute(delete(Product))
        await session.execute(delete(Category))

    categories, products = build_catalog()
    # Categories first so their IDs follow declaration order
    session.add_all(categories)
    await session.flush()
    for product in products:
        session.add(product)
        await session.flush()

    return {
        "categories_created": len(categories),
        "products_created": len(products),
        "variants_created": sum(len(p.variants) for p in products),
    }
