"""Stock movement entities."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from stockledger.core.exceptions import ValidationError


class MovementType(str, Enum):
    """Direction of a stock movement."""

    ENTRY = "entry"
    EXIT = "exit"


class MovementReason(str, Enum):
    """Business reason for a stock movement."""

    PURCHASE = "purchase"
    SALE = "sale"
    TRANSFER = "transfer"
    ADJUSTMENT = "adjustment"
    RETURN = "return"
    WASTE = "waste"


ALLOWED_REASONS: dict[MovementType, frozenset[MovementReason]] = {
    MovementType.ENTRY: frozenset(
        {
            MovementReason.PURCHASE,
            MovementReason.RETURN,
            MovementReason.TRANSFER,
            MovementReason.ADJUSTMENT,
        }
    ),
    MovementType.EXIT: frozenset(
        {
            MovementReason.SALE,
            MovementReason.TRANSFER,
            MovementReason.WASTE,
            MovementReason.ADJUSTMENT,
        }
    ),
}


def is_reason_allowed(movement_type: MovementType, reason: MovementReason) -> bool:
    """Check whether ``reason`` may be used with ``movement_type``."""
    return reason in ALLOWED_REASONS[movement_type]


class Movement(BaseModel):
    """
    A single, immutable stock change for one product.

    ``total_cost`` is fixed when the movement is appended and is never
    recomputed, even if the product's unit cost changes later.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None  # ledger sequence, assigned on append
    product_id: int  # FK → products.id
    movement_type: MovementType
    reason: MovementReason
    quantity: int  # always positive
    unit_cost: Decimal
    total_cost: Decimal
    reference: str  # e.g., PO or sales order number
    notes: str | None = None
    user_id: str = ""
    user_name: str = ""
    timestamp: datetime
    location: str = ""

    @property
    def signed_quantity(self) -> int:
        """Quantity with the sign it applies to stock."""
        if self.movement_type == MovementType.ENTRY:
            return self.quantity
        return -self.quantity


class MovementRequest(BaseModel):
    """
    Caller input for recording a movement.

    Constraints are checked by the ledger engine rather than here, so that
    rejections come back as domain errors in a fixed order. When
    ``unit_cost`` or ``location`` is omitted the product's current values
    are used.
    """

    product_id: int
    movement_type: MovementType
    reason: MovementReason
    quantity: int
    unit_cost: Decimal | None = None
    reference: str = ""
    notes: str | None = None
    location: str | None = None
    user_id: str = ""
    user_name: str = ""

    @field_validator("quantity", mode="before")
    @classmethod
    def whole_quantity(cls, v: Any) -> Any:
        # sign is checked by the engine, after the product lookup
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValidationError("quantity", "quantity must be a positive integer", v)
        return v
