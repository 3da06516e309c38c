"""Core domain services."""

from stockledger.core.services.inventory_queries import InventoryQueryService, build_kardex
from stockledger.core.services.ledger_engine import LedgerEngine, LedgerSnapshot, MovementOutcome

__all__ = [
    "LedgerEngine",
    "LedgerSnapshot",
    "MovementOutcome",
    "InventoryQueryService",
    "build_kardex",
]
