"""Catalog API endpoints.

Provides endpoints for listing products and fetching a product by code.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_catalog_service
from app.api.schemas import CatalogResponse, ErrorResponse, ProductSchema
from app.catalog.filters import ProductFilter
from app.catalog.service import CatalogService
from app.infrastructure.config import settings

router = APIRouter(prefix="/catalog", tags=["Catalog"])


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CatalogResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="List products",
    description="List products with optional category and price filters.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    offset: Annotated[str | None, Query(description="Products to skip")] = None,
    limit: Annotated[str | None, Query(description="Page size (1-100)")] = None,
    category: Annotated[str | None, Query(description="Category code")] = None,
    price_less_than: Annotated[
        str | None,
        Query(alias="priceLessThan", description="Exclusive upper bound on base price"),
    ] = None,
) -> CatalogResponse:
    """List products with filtering and pagination.

    Query values are taken as raw strings so that malformed numbers
    surface as a 400 rather than a schema error.

    Args:
        service: Catalog service.
        offset: Number of products to skip (default 0).
        limit: Page size, clamped to 1..100 (default 10).
        category: Exact category code.
        price_less_than: Only products cheaper than this.

    Returns:
        Page of products with the total match count.

    Raises:
        ValidationError: If a numeric parameter is malformed.
    """
    product_filter = ProductFilter.from_query(
        category=category,
        price_less_than=price_less_than,
        offset=offset,
        limit=limit,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )

    page = await service.list_products(product_filter)

    return CatalogResponse(
        products=[ProductSchema.from_view(p) for p in page.products],
        total=page.total,
    )


@router.get(
    "/{code}",
    response_model=ProductSchema,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product",
    description="Get a single product, with its category and variants, by code.",
)
async def get_product(
    code: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductSchema:
    """Get a product by code.

    Raises:
        ProductNotFoundError: If no product has this code.
    """
    product = await service.get_product_by_code(code)
    return ProductSchema.from_view(product)
