"""Request DTOs for catalog callers.

Pydantic v2 models for the forms that create and edit products. Movement
requests use the domain ``MovementRequest`` directly, since the ledger
engine owns their validation order.
"""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from stockledger.core.entities.product import Product, ProductStatus


class CreateProductRequest(BaseModel):
    """Request to add a product to the catalog."""

    sku: str = Field(..., description="Unique business key", examples=["SKU-001"])
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Free-text description")
    category: str = Field(default="", description="Category used for grouping")
    supplier: str = Field(default="", description="Supplier name")
    unit: str = Field(default="unit", description="Unit of measure", examples=["unit", "ream"])
    location: str = Field(default="", description="Storage location", examples=["A-01-001"])
    unit_cost: Decimal = Field(default=Decimal("0"), description="Cost per unit")
    min_stock: int = Field(default=0, description="Low-stock threshold")
    max_stock: int = Field(default=0, description="Maximum stock level")
    barcode: str = Field(default="", description="Barcode")
    status: ProductStatus = Field(default=ProductStatus.ACTIVE)
    image: str | None = Field(default=None, description="Image URL or path")
    expiration_date: date | None = Field(default=None)
    serial_numbers: list[str] = Field(default_factory=list)
    current_stock: int = Field(
        default=0,
        description="Opening stock; later changes only come from movements",
    )

    def to_product(self) -> Product:
        return Product(**self.model_dump())


class UpdateProductRequest(BaseModel):
    """Partial product update. Only fields that are set are applied."""

    sku: str | None = None
    name: str | None = None
    description: str | None = None
    category: str | None = None
    supplier: str | None = None
    unit: str | None = None
    location: str | None = None
    unit_cost: Decimal | None = None
    min_stock: int | None = None
    max_stock: int | None = None
    barcode: str | None = None
    status: ProductStatus | None = None
    image: str | None = None
    expiration_date: date | None = None
    serial_numbers: list[str] | None = None

    def to_updates(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class GenerateReportRequest(BaseModel):
    """Request for an inventory report."""

    kardex_product_id: int | None = Field(
        default=None,
        description="Include the kardex for this product",
    )
    top_limit: int | None = Field(
        default=None,
        ge=0,
        description="Number of most-moved products (defaults to report limit)",
    )
