"""Abstract interface for the movement ledger."""

from abc import ABC, abstractmethod

from stockledger.core.entities.movement import Movement


class IMovementLedger(ABC):
    """Append-only movement storage. There is no update or delete."""

    @abstractmethod
    def append(self, movement: Movement) -> Movement:
        """Append a movement and assign the next sequence id."""
        pass

    @abstractmethod
    def list_all(self) -> list[Movement]:
        """All movements in append order."""
        pass

    @abstractmethod
    def list_for_product(self, product_id: int) -> list[Movement]:
        """Movements referencing a product, in append order."""
        pass

    @abstractmethod
    def count(self, product_id: int | None = None) -> int:
        """Number of movements, optionally for one product."""
        pass
