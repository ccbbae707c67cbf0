"""Filter and result types for product listing."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from app.domain.exceptions import ValidationError

if TYPE_CHECKING:
    from app.catalog.models import Product

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class ProductFilter:
    """Filter parameters for product listing.

    Attributes:
        category_code: Exact category code to match; empty means any.
        price_less_than: Exclusive upper bound on the product base price.
        offset: Number of matching products to skip.
        limit: Maximum number of products to return.
    """

    category_code: str = ""
    price_less_than: Decimal | None = None
    offset: int = 0
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_query(
        cls,
        category: str | None = None,
        price_less_than: str | None = None,
        offset: str | None = None,
        limit: str | None = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "ProductFilter":
        """Build a filter from raw query-string values.

        The category code is kept exactly as sent. Missing offset defaults
        to 0 and negative offsets clamp to 0.
        Missing limit defaults to ``default_limit``; any limit is clamped
        to ``[1, max_limit]``.

        Args:
            category: Category code, or None.
            price_less_than: Decimal string, or None/empty for no bound.
            offset: Integer string, or None.
            limit: Integer string, or None.
            default_limit: Limit used when none is given.
            max_limit: Upper clamp for the limit.

        Returns:
            Normalized filter.

        Raises:
            ValidationError: If a numeric parameter cannot be parsed.
        """
        parsed_offset = _parse_int(offset, "offset", default=0)
        parsed_limit = _parse_int(limit, "limit", default=default_limit)

        return cls(
            category_code=category or "",
            price_less_than=_parse_price(price_less_than),
            offset=max(parsed_offset, 0),
            limit=min(max(parsed_limit, 1), max_limit),
        )


@dataclass
class ProductListResult:
    """Page of products plus the unpaginated match count."""

    items: list["Product"] = field(default_factory=list)
    total: int = 0


def _parse_int(raw: str | None, name: str, default: int) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Invalid {name} parameter", field=name) from None


def _parse_price(raw: str | None) -> Decimal | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise ValidationError(
            "Invalid priceLessThan parameter", field="priceLessThan"
        ) from None
    if not value.is_finite():
        raise ValidationError("Invalid priceLessThan parameter", field="priceLessThan")
    return value
