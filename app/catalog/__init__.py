"""Product Catalog.

Product filtering, variant price resolution, and assembly of
catalog rows into their external form.
"""

from app.catalog.assembly import (
    CategoryView,
    ProductView,
    VariantView,
    assemble_category,
    assemble_product,
)
from app.catalog.filters import ProductFilter, ProductListResult
from app.catalog.models import Category, Product, ProductVariant
from app.catalog.pricing import resolve_price
from app.catalog.repository import (
    CategoryRepository,
    ProductRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyProductRepository,
)
from app.catalog.service import CatalogPage, CatalogService

# app.catalog.memory holds in-memory repositories for tests and local runs; not re-exported.

__all__ = [
    # Models
    "Category",
    "Product",
    "ProductVariant",
    # Filtering
    "ProductFilter",
    "ProductListResult",
    # Pricing
    "resolve_price",
    # Assembly
    "CategoryView",
    "ProductView",
    "VariantView",
    "assemble_category",
    "assemble_product",
    # Repository
    "CategoryRepository",
    "ProductRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyProductRepository",
    # Service
    "CatalogPage",
    "CatalogService",
]
