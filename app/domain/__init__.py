"""Domain layer.

Error taxonomy shared by the catalog core and the HTTP layer.
"""

from app.domain.exceptions import (
    DomainError,
    NotFoundError,
    ProductNotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "NotFoundError",
    "ProductNotFoundError",
    "StorageError",
    "ValidationError",
]
