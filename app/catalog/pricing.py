"""Variant price resolution."""

from decimal import Decimal


def resolve_price(variant_price: Decimal | None, product_price: Decimal) -> Decimal:
    """Get the price a variant is sold at.

    A variant with no price, or a stored price of exactly zero, inherits
    its product's price.

    Args:
        variant_price: The variant's own price, if any.
        product_price: The owning product's base price.

    Returns:
        Effective variant price.
    """
    if variant_price is None or variant_price == Decimal(0):
        return product_price
    return variant_price
