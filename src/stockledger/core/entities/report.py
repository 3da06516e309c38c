"""Read models produced by the query layer."""

from decimal import Decimal

from pydantic import BaseModel, Field

from stockledger.core.entities.movement import Movement
from stockledger.core.entities.product import Product


class KardexRow(BaseModel):
    """One kardex line: a movement and the stock balance right after it."""

    movement: Movement
    running_balance: int


class TopMovedProduct(BaseModel):
    """A product ranked by total moved quantity (entries and exits alike)."""

    product: Product
    total_moved: int


class StockCheck(BaseModel):
    """Stock position a caller can show before submitting an exit."""

    product_id: int
    current_stock: int
    requested_quantity: int
    resulting_stock: int

    @property
    def sufficient(self) -> bool:
        return self.resulting_stock >= 0


class CategoryTotal(BaseModel):
    """Aggregates for one product category."""

    category: str
    product_count: int = 0
    total_stock: int = 0
    total_value: Decimal = Decimal("0")


class MovementTotals(BaseModel):
    """Ledger totals split by movement type."""

    total_movements: int = 0
    entry_count: int = 0
    exit_count: int = 0
    entry_value: Decimal = Decimal("0")
    exit_value: Decimal = Decimal("0")

    @property
    def net_value(self) -> Decimal:
        return self.entry_value - self.exit_value


class SummaryStatistics(BaseModel):
    """Catalog valuation and ledger activity summary."""

    product_count: int = 0
    total_value: Decimal = Decimal("0")
    active_products: int = 0
    category_count: int = 0
    average_value: Decimal = Decimal("0")
    low_stock_count: int = 0
    categories: list[CategoryTotal] = Field(default_factory=list)
    movements: MovementTotals = Field(default_factory=MovementTotals)
