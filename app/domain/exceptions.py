"""Domain exceptions.

All errors the catalog core can raise. The core never logs or swallows
these; the HTTP layer decides how each one is rendered.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Input Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when filter input or a create payload is malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Explanation of what is wrong.
            field: Name of the offending field, if any.
        """
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


# ============================================================================
# Lookup Errors
# ============================================================================


class NotFoundError(DomainError):
    """Base class for lookups that matched nothing."""

    pass


class ProductNotFoundError(NotFoundError):
    """Raised when no product has the requested code."""

    def __init__(self, code: str) -> None:
        """Initialize product not found error.

        Args:
            code: The product code that was looked up.
        """
        super().__init__(
            f"Product not found: {code}",
            details={"code": code},
        )
        self.code = code


# ============================================================================
# Storage Errors
# ============================================================================


class StorageError(DomainError):
    """Raised when the underlying store fails a query or write.

    Carries the driver's message unchanged.
    """

    pass
