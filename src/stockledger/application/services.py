"""
Service factory functions for dependency injection.

This module wires the in-memory stores, clock and settings into a ledger
engine. Consumers receive the engine explicitly; ``get_engine`` only
provides one process-scoped instance for callers that do not build
their own.
"""

from stockledger.config import Settings, configure_logging, get_logger, get_settings
from stockledger.core.clock import Clock
from stockledger.core.services import InventoryQueryService, LedgerEngine

logger = get_logger(__name__)

# Process-scoped instance
_engine: LedgerEngine | None = None


def create_engine(
    settings: Settings | None = None,
    clock: Clock | None = None,
) -> LedgerEngine:
    """
    Build a fresh engine with empty in-memory stores.

    Seeds the demo catalog when ``ledger.seed_demo_data`` is enabled.

    Args:
        settings: Optional settings override
        clock: Optional clock override (defaults to system time)

    Returns:
        Configured LedgerEngine
    """
    from stockledger.infrastructure.storage.memory import (
        InMemoryCatalogStore,
        InMemoryMovementLedger,
    )

    settings = settings or get_settings()
    engine = LedgerEngine(
        catalog=InMemoryCatalogStore(),
        ledger=InMemoryMovementLedger(),
        clock=clock,
        settings=settings.ledger,
    )

    if settings.ledger.seed_demo_data:
        from stockledger.infrastructure.seed import load_demo_data

        load_demo_data(engine)

    logger.info(
        "ledger_engine_created",
        delete_policy=settings.ledger.delete_policy,
        seeded=settings.ledger.seed_demo_data,
    )
    return engine


def get_engine() -> LedgerEngine:
    """Get or create the process-scoped engine, configuring logging on first use."""
    global _engine
    if _engine is None:
        settings = get_settings()
        configure_logging(settings)
        _engine = create_engine(settings)
    return _engine


def get_query_service(engine: LedgerEngine | None = None) -> InventoryQueryService:
    """Query service over ``engine`` (or the process-scoped engine)."""
    return InventoryQueryService(engine or get_engine())


def reset_engine() -> None:
    """Drop the process-scoped engine (for testing)."""
    global _engine
    _engine = None
