"""Tests for the demo data loader."""

from decimal import Decimal

from stockledger.core.entities import MovementType
from stockledger.infrastructure.seed import DEMO_MOVEMENTS, DEMO_PRODUCTS, load_demo_data


class TestLoadDemoData:
    def test_stock_levels_after_replay(self, engine):
        products = load_demo_data(engine)
        stock = {p.sku: p.current_stock for p in products}
        assert stock == {"SKU-001": 25, "SKU-002": 15, "SKU-003": 3}

    def test_opening_stock_back_computed(self, engine):
        products = {p.sku: p for p in load_demo_data(engine)}
        assert products["SKU-001"].opening_stock == 17
        assert products["SKU-002"].opening_stock == 15
        assert products["SKU-003"].opening_stock == 18

    def test_movements_recorded(self, engine, queries):
        load_demo_data(engine)
        movements = engine.snapshot().movements
        assert len(movements) == len(DEMO_MOVEMENTS)
        assert [m.reference for m in movements] == ["PO-001", "SO-001", "SO-002"]
        assert movements[0].movement_type == MovementType.ENTRY
        assert movements[0].total_cost == Decimal("6500.00")
        assert movements[1].user_name == "Operator Maria"

    def test_ledger_consistent(self, engine, queries):
        load_demo_data(engine)
        assert queries.verify_stock_consistency() == []
        assert [p.sku for p in queries.low_stock_products()] == ["SKU-003"]

    def test_catalog_size(self, engine):
        assert len(load_demo_data(engine)) == len(DEMO_PRODUCTS)
