"""
Domain exceptions for the stock ledger.

Every error raised by the engine is local and recoverable: validation
happens before any state change, so a rejected call never leaves the
catalog or the ledger half-updated.
"""

from typing import Any


class StockLedgerError(Exception):
    """Base exception for all stock ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for callers that render errors."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(StockLedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class DuplicateSkuError(ValidationError):
    """Another live product already uses this SKU."""

    def __init__(self, sku: str, existing_id: int):
        super().__init__(
            field="sku",
            message=f"SKU '{sku}' is already used by product {existing_id}",
            value=sku,
        )
        self.code = "DUPLICATE_SKU"
        self.details["existing_id"] = existing_id


# Lookup Exceptions
class NotFoundError(StockLedgerError):
    """Base exception for unknown identifiers."""

    pass


class ProductNotFoundError(NotFoundError):
    """Product not found in the catalog."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


# Policy Exceptions
class ProductHasMovementsError(StockLedgerError):
    """Product cannot be deleted while the ledger references it."""

    def __init__(self, product_id: int, movement_count: int):
        super().__init__(
            f"Product {product_id} has {movement_count} movement(s) and cannot be deleted",
            code="PRODUCT_HAS_MOVEMENTS",
            details={"product_id": product_id, "movement_count": movement_count},
        )


class ConfigurationError(StockLedgerError):
    """Configuration error."""

    pass
