"""Product catalog entities."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ProductStatus(str, Enum):
    """Catalog status of a product."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class StockStatus(str, Enum):
    """Stock level relative to the product's thresholds."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class Product(BaseModel):
    """
    A stock-keeping unit and its cached stock position.

    ``current_stock`` and ``total_value`` are derived fields: the ledger
    engine is their only writer. ``current_stock`` may go negative when an
    exit is recorded against insufficient stock.
    """

    id: int | None = None
    sku: str
    name: str
    description: str = ""
    category: str = ""
    supplier: str = ""
    unit: str = "unit"
    location: str = ""
    unit_cost: Decimal = Decimal("0")
    min_stock: int = 0
    max_stock: int = 0
    barcode: str = ""
    status: ProductStatus = ProductStatus.ACTIVE
    image: str | None = None
    expiration_date: date | None = None
    serial_numbers: list[str] = Field(default_factory=list)

    # Derived stock position
    current_stock: int = 0
    opening_stock: int = 0  # stock supplied at creation, origin of the kardex
    total_value: Decimal = Decimal("0")

    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None  # set only by the tombstone delete policy

    @model_validator(mode="after")
    def derive_total_value(self) -> "Product":
        self.total_value = self.current_stock * self.unit_cost
        return self

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_low_stock(self) -> bool:
        return self.current_stock <= self.min_stock

    def stock_status(self, high_stock_ratio: float = 0.8) -> StockStatus:
        """Classify the stock level: low, normal, or high (near max)."""
        if self.is_low_stock:
            return StockStatus.LOW
        if self.current_stock >= self.max_stock * high_stock_ratio:
            return StockStatus.HIGH
        return StockStatus.NORMAL

    def restocked(self, current_stock: int, at: datetime) -> "Product":
        """Copy with a new stock level, revalued at the product's own unit cost."""
        return self.model_copy(
            update={
                "current_stock": current_stock,
                "total_value": current_stock * self.unit_cost,
                "updated_at": at,
            }
        )

    def merged(self, updates: dict[str, Any], at: datetime) -> "Product":
        """Copy with ``updates`` applied and ``total_value`` re-derived."""
        data = self.model_dump()
        data.update(updates)
        data["updated_at"] = at
        return Product.model_validate(data)
