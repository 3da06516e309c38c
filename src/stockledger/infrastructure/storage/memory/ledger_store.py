"""In-memory implementation of the movement ledger."""

from stockledger.config import get_logger
from stockledger.core.entities.movement import Movement
from stockledger.core.interfaces.ledger_store import IMovementLedger

logger = get_logger(__name__)


class InMemoryMovementLedger(IMovementLedger):
    """List-backed, append-only ledger. Movements are frozen, so no copies."""

    def __init__(self) -> None:
        self._movements: list[Movement] = []

    def append(self, movement: Movement) -> Movement:
        """Append a movement; its id is its 1-based position in the ledger."""
        stored = movement.model_copy(update={"id": len(self._movements) + 1})
        self._movements.append(stored)
        logger.debug(
            "ledger_append",
            movement_id=stored.id,
            product_id=stored.product_id,
            type=stored.movement_type.value,
            qty=stored.quantity,
        )
        return stored

    def list_all(self) -> list[Movement]:
        return list(self._movements)

    def list_for_product(self, product_id: int) -> list[Movement]:
        return [m for m in self._movements if m.product_id == product_id]

    def count(self, product_id: int | None = None) -> int:
        if product_id is None:
            return len(self._movements)
        return sum(1 for m in self._movements if m.product_id == product_id)
