"""Record Movement Use Case: entry or exit with a stock-sufficiency warning."""

from dataclasses import dataclass

from stockledger.config import get_logger
from stockledger.core.entities.movement import Movement, MovementRequest
from stockledger.core.entities.product import Product
from stockledger.core.entities.report import StockCheck
from stockledger.core.services.ledger_engine import LedgerEngine

logger = get_logger(__name__)


@dataclass
class RecordMovementResult:
    """Result of recording a movement."""

    movement: Movement
    product: Product
    stock_check: StockCheck | None = None  # only for exits

    @property
    def insufficient_stock(self) -> bool:
        return self.stock_check is not None and not self.stock_check.sufficient


class RecordMovementUseCase:
    """Record a movement; exits beyond available stock go through but are flagged."""

    def __init__(self, engine: LedgerEngine | None = None):
        self._engine = engine

    def _get_engine(self) -> LedgerEngine:
        if self._engine is None:
            from stockledger.application.services import get_engine

            self._engine = get_engine()
        return self._engine

    def preview(self, product_id: int, quantity: int) -> StockCheck:
        """Stock position an exit would leave, for warning before submission."""
        return self._get_engine().check_stock(product_id, quantity)

    def execute(self, request: MovementRequest) -> RecordMovementResult:
        """
        Execute record movement use case.

        The stock check for an exit comes from the engine's write itself,
        so it reflects the stock the movement was actually applied to.
        """
        outcome = self._get_engine().apply_movement(request)
        result = RecordMovementResult(
            movement=outcome.movement,
            product=outcome.product,
            stock_check=outcome.stock_check,
        )

        check = outcome.stock_check
        if check is not None and not check.sufficient:
            logger.warning(
                "movement_recorded_with_insufficient_stock",
                movement_id=outcome.movement.id,
                product_id=request.product_id,
                available=check.current_stock,
                requested=outcome.movement.quantity,
            )
        return result
