"""API schemas for the Catalog API.

Pydantic models for request/response validation and serialization.
Prices are rendered as JSON numbers here and nowhere else.
"""

from pydantic import BaseModel, Field

from app.catalog.assembly import CategoryView, ProductView, VariantView


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Category representation."""

    id: int = Field(..., description="Category identifier")
    code: str = Field(..., description="Unique category code")
    name: str = Field(..., description="Display name")

    @classmethod
    def from_view(cls, view: CategoryView) -> "CategorySchema":
        """Build from a category view."""
        return cls(id=view.id, code=view.code, name=view.name)


class CategoryCreateRequest(BaseModel):
    """Request to create a category.

    Missing fields bind to empty strings and are rejected by the service.
    """

    code: str = Field(default="", description="Unique category code")
    name: str = Field(default="", description="Display name")


# ============================================================================
# Product Schemas
# ============================================================================


class VariantSchema(BaseModel):
    """Variant representation with its effective price."""

    id: int = Field(..., description="Variant identifier")
    product_id: int = Field(..., description="Owning product identifier")
    name: str = Field(..., description="Variant name")
    sku: str = Field(..., description="Stock keeping unit")
    price: float = Field(..., description="Effective price")

    @classmethod
    def from_view(cls, view: VariantView) -> "VariantSchema":
        """Build from a variant view."""
        return cls(
            id=view.id,
            product_id=view.product_id,
            name=view.name,
            sku=view.sku,
            price=float(view.price),
        )


class ProductSchema(BaseModel):
    """Product representation."""

    id: int = Field(..., description="Product identifier")
    code: str = Field(..., description="Unique product code")
    price: float = Field(..., description="Base price")
    category: CategorySchema = Field(..., description="Product category")
    variants: list[VariantSchema] = Field(
        default_factory=list, description="Product variants"
    )

    @classmethod
    def from_view(cls, view: ProductView) -> "ProductSchema":
        """Build from a product view."""
        return cls(
            id=view.id,
            code=view.code,
            price=float(view.price),
            category=CategorySchema.from_view(view.category),
            variants=[VariantSchema.from_view(v) for v in view.variants],
        )


class CatalogResponse(BaseModel):
    """Page of products."""

    products: list[ProductSchema] = Field(..., description="Products on this page")
    total: int = Field(..., description="Total number of matching products")
