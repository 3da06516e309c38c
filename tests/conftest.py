"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from stockledger.application.services import reset_engine
from stockledger.config import LedgerSettings, reset_settings
from stockledger.core.clock import DeterministicClock
from stockledger.core.entities import (
    MovementReason,
    MovementRequest,
    MovementType,
    Product,
)
from stockledger.core.services import InventoryQueryService, LedgerEngine


@pytest.fixture(autouse=True)
def _fresh_globals() -> Generator[None, None, None]:
    """Drop cached settings and the process-scoped engine around each test."""
    reset_settings()
    reset_engine()
    yield
    reset_settings()
    reset_engine()


@pytest.fixture
def clock() -> DeterministicClock:
    return DeterministicClock(datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def ledger_settings() -> LedgerSettings:
    return LedgerSettings()


@pytest.fixture
def engine(clock: DeterministicClock, ledger_settings: LedgerSettings) -> LedgerEngine:
    """Engine with empty in-memory stores and a controlled clock."""
    return LedgerEngine(clock=clock, settings=ledger_settings)


@pytest.fixture
def queries(engine: LedgerEngine) -> InventoryQueryService:
    return InventoryQueryService(engine)


@pytest.fixture
def laptop(engine: LedgerEngine) -> Product:
    """Product P: 25 laptops at 650.00 each."""
    return engine.add_product(
        Product(
            sku="SKU-001",
            name="Laptop Dell Inspiron 15",
            category="Electronics",
            supplier="Dell Inc.",
            location="A-01-001",
            current_stock=25,
            min_stock=5,
            max_stock=50,
            unit_cost=Decimal("650.00"),
            barcode="123456789012",
        )
    )


@pytest.fixture
def paper(engine: LedgerEngine) -> Product:
    """Product Q: 3 reams of paper, minimum 20."""
    return engine.add_product(
        Product(
            sku="SKU-003",
            name="A4 Bond Paper",
            category="Supplies",
            unit="ream",
            location="C-01-005",
            current_stock=3,
            min_stock=20,
            max_stock=100,
            unit_cost=Decimal("4.50"),
            barcode="123456789014",
        )
    )


@pytest.fixture
def make_request() -> Callable[..., MovementRequest]:
    """Factory for movement requests with sensible defaults."""

    def _make(
        product_id: int,
        movement_type: MovementType = MovementType.ENTRY,
        quantity: int = 1,
        reason: MovementReason | None = None,
        reference: str = "REF-001",
        **kwargs,
    ) -> MovementRequest:
        if reason is None:
            reason = (
                MovementReason.PURCHASE
                if movement_type == MovementType.ENTRY
                else MovementReason.SALE
            )
        return MovementRequest(
            product_id=product_id,
            movement_type=movement_type,
            reason=reason,
            quantity=quantity,
            reference=reference,
            **kwargs,
        )

    return _make
