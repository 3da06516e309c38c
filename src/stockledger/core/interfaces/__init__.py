"""Core interfaces (ports) for dependency injection."""

from stockledger.core.interfaces.catalog_store import ICatalogStore
from stockledger.core.interfaces.ledger_store import IMovementLedger

__all__ = [
    "ICatalogStore",
    "IMovementLedger",
]
