"""SQLAlchemy models for the product catalog.

Defines Category, Product and ProductVariant tables.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database import Base


class Category(Base):
    """Product category.

    Attributes:
        id: Storage-assigned identifier.
        code: Unique slug (e.g., "clothing").
        name: Display name.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, code={self.code})>"


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Storage-assigned identifier.
        code: Unique product code (e.g., "PROD001").
        price: Base price with two fractional digits.
        category_id: Owning category.
        category: Loaded category.
        variants: Loaded variants, in id order.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    category: Mapped[Category] = relationship(Category)
    variants: Mapped[list["ProductVariant"]] = relationship(
        "ProductVariant",
        back_populates="product",
        order_by="ProductVariant.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, code={self.code}, price={self.price})>"


class ProductVariant(Base):
    """Product variant (e.g., a size).

    A variant without a price of its own is sold at the product's price.

    Attributes:
        id: Storage-assigned identifier.
        product_id: Parent product ID.
        name: Variant name (e.g., "Small").
        sku: Unique stock keeping unit.
        price: Own price, or None when unset.
    """

    __tablename__ = "product_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    sku: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    # Relationships
    product: Mapped[Product] = relationship(Product, back_populates="variants")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductVariant(id={self.id}, sku={self.sku})>"
