"""In-memory storage implementations."""

from stockledger.infrastructure.storage.memory.catalog_store import InMemoryCatalogStore
from stockledger.infrastructure.storage.memory.ledger_store import InMemoryMovementLedger

__all__ = [
    "InMemoryCatalogStore",
    "InMemoryMovementLedger",
]
