"""Core domain entities."""

from stockledger.core.entities.movement import (
    ALLOWED_REASONS,
    Movement,
    MovementRequest,
    MovementReason,
    MovementType,
    is_reason_allowed,
)
from stockledger.core.entities.product import (
    Product,
    ProductStatus,
    StockStatus,
)
from stockledger.core.entities.report import (
    CategoryTotal,
    KardexRow,
    MovementTotals,
    StockCheck,
    SummaryStatistics,
    TopMovedProduct,
)

__all__ = [
    # Catalog entities
    "Product",
    "ProductStatus",
    "StockStatus",
    # Ledger entities
    "Movement",
    "MovementRequest",
    "MovementType",
    "MovementReason",
    "ALLOWED_REASONS",
    "is_reason_allowed",
    # Read models
    "KardexRow",
    "TopMovedProduct",
    "StockCheck",
    "CategoryTotal",
    "MovementTotals",
    "SummaryStatistics",
]
