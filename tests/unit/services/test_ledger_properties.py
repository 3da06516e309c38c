"""
Property-based tests for the ledger engine.

Random sequences of movement requests, valid and invalid, are applied to
a fresh engine; after every step the catalog and the ledger must still
agree with each other.
"""

from datetime import datetime, timezone
from decimal import Decimal

from hypothesis import given, settings
from hypothesis import strategies as st

from stockledger.config import LedgerSettings
from stockledger.core.clock import DeterministicClock
from stockledger.core.entities import MovementReason, MovementRequest, MovementType, Product
from stockledger.core.exceptions import StockLedgerError
from stockledger.core.services import InventoryQueryService, LedgerEngine

costs = st.decimals(min_value=0, max_value=10_000, places=2, allow_nan=False, allow_infinity=False)

movement_requests = st.builds(
    dict,
    product_index=st.integers(min_value=0, max_value=2),
    movement_type=st.sampled_from(list(MovementType)),
    reason=st.sampled_from(list(MovementReason)),
    quantity=st.integers(min_value=-3, max_value=60),
    reference=st.sampled_from(["PO-1", "SO-9", "", "  "]),
    advance=st.integers(min_value=0, max_value=3),
)

products = st.lists(
    st.builds(
        dict,
        current_stock=st.integers(min_value=-10, max_value=100),
        min_stock=st.integers(min_value=0, max_value=50),
        unit_cost=costs,
    ),
    min_size=3,
    max_size=3,
)


def _build(product_specs: list[dict]) -> tuple[LedgerEngine, list[int]]:
    engine = LedgerEngine(
        clock=DeterministicClock(datetime(2024, 1, 1, tzinfo=timezone.utc)),
        settings=LedgerSettings(),
    )
    ids = [
        engine.add_product(Product(sku=f"SKU-{i}", name=f"P{i}", **spec)).id
        for i, spec in enumerate(product_specs)
    ]
    return engine, ids


@settings(max_examples=75, deadline=None)
@given(product_specs=products, steps=st.lists(movement_requests, max_size=25))
def test_catalog_and_ledger_stay_consistent(product_specs, steps):
    engine, ids = _build(product_specs)
    queries = InventoryQueryService(engine)
    expected = {pid: spec["current_stock"] for pid, spec in zip(ids, product_specs)}

    for step in steps:
        engine.clock.advance(step["advance"])
        pid = ids[step["product_index"]]
        request = MovementRequest(
            product_id=pid,
            movement_type=step["movement_type"],
            reason=step["reason"],
            quantity=step["quantity"],
            reference=step["reference"],
        )
        before = engine.snapshot()
        try:
            mvmt = engine.record_movement(request)
        except StockLedgerError:
            after = engine.snapshot()
            assert after.products == before.products
            assert after.movements == before.movements
            continue
        expected[pid] += mvmt.signed_quantity

        for product in engine.list_products():
            assert product.current_stock == expected[product.id]
            assert product.total_value == product.current_stock * product.unit_cost

    for pid in ids:
        rows = queries.kardex(pid)
        final = rows[-1].running_balance if rows else engine.get_by_id(pid).opening_stock
        assert final == engine.get_by_id(pid).current_stock
    assert queries.verify_stock_consistency() == []


@settings(max_examples=50, deadline=None)
@given(product_specs=products, limit=st.integers(min_value=0, max_value=5), data=st.data())
def test_rankings_and_low_stock(product_specs, limit, data):
    engine, ids = _build(product_specs)
    queries = InventoryQueryService(engine)
    for pid in ids:
        for qty in data.draw(st.lists(st.integers(min_value=1, max_value=20), max_size=4)):
            engine.record_movement(
                MovementRequest(
                    product_id=pid,
                    movement_type=MovementType.ENTRY,
                    reason=MovementReason.ADJUSTMENT,
                    quantity=qty,
                    reference="ADJ",
                    unit_cost=Decimal("1"),
                )
            )

    top = queries.top_moved_products(limit=limit)
    assert len(top) <= limit
    totals = [t.total_moved for t in top]
    assert totals == sorted(totals, reverse=True)

    low = {p.id for p in queries.low_stock_products()}
    assert low == {p.id for p in engine.list_products() if p.current_stock <= p.min_stock}
