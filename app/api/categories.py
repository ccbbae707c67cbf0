"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_catalog_service
from app.api.schemas import CategoryCreateRequest, CategorySchema, ErrorResponse
from app.catalog.service import CatalogService

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=list[CategorySchema],
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> list[CategorySchema]:
    """List all categories."""
    categories = await service.list_categories()
    return [CategorySchema.from_view(c) for c in categories]


@router.post(
    "",
    response_model=CategorySchema,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create category",
    description="Create a category. Code and name are trimmed and must be non-empty.",
)
async def create_category(
    request: CategoryCreateRequest,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> CategorySchema:
    """Create a category.

    Args:
        request: Category code and name.
        service: Catalog service.

    Returns:
        The created category.
    """
    category = await service.create_category(request.code, request.name)
    return CategorySchema.from_view(category)
