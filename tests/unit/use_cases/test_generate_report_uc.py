"""Tests for GenerateInventoryReportUseCase."""

from decimal import Decimal

import pytest

from stockledger.application.dto.requests import GenerateReportRequest
from stockledger.application.use_cases.generate_report import GenerateInventoryReportUseCase
from stockledger.config import LedgerSettings
from stockledger.core.entities import MovementType, Product
from stockledger.core.exceptions import ProductNotFoundError
from stockledger.core.services import LedgerEngine


@pytest.fixture
def use_case(engine):
    return GenerateInventoryReportUseCase(engine=engine)


class TestGenerateInventoryReport:
    def test_summary_and_low_stock(self, use_case, laptop, paper, clock):
        report = use_case.execute()
        assert report.generated_at == clock.now()
        assert report.summary.product_count == 2
        assert report.summary.total_value == Decimal("16263.50")
        assert [p.sku for p in report.low_stock] == ["SKU-003"]
        assert report.kardex == []
        assert report.kardex_product is None

    def test_top_moved_excludes_unmoved(self, use_case, engine, laptop, paper, make_request):
        engine.record_movement(make_request(paper.id, MovementType.EXIT, quantity=15))
        report = use_case.execute()
        assert [(t.product.sku, t.total_moved) for t in report.top_moved] == [("SKU-003", 15)]

    def test_report_limit_from_settings(self, clock, make_request):
        engine = LedgerEngine(clock=clock, settings=LedgerSettings(report_top_moved_limit=10))
        for i in range(12):
            p = engine.add_product(Product(sku=f"S-{i}", name=f"P{i}"))
            engine.record_movement(make_request(p.id, quantity=i + 1))
        report = GenerateInventoryReportUseCase(engine=engine).execute()
        assert len(report.top_moved) == 10
        assert report.top_moved[0].total_moved == 12

    def test_explicit_top_limit(self, use_case, engine, laptop, paper, make_request):
        engine.record_movement(make_request(laptop.id, quantity=1))
        engine.record_movement(make_request(paper.id, quantity=1))
        report = use_case.execute(GenerateReportRequest(top_limit=1))
        assert len(report.top_moved) == 1

    def test_with_kardex(self, use_case, engine, laptop, make_request):
        engine.record_movement(make_request(laptop.id, quantity=10))
        engine.record_movement(make_request(laptop.id, MovementType.EXIT, quantity=2))
        report = use_case.execute(GenerateReportRequest(kardex_product_id=laptop.id))
        assert report.kardex_product.id == laptop.id
        assert [r.running_balance for r in report.kardex] == [35, 33]

    def test_kardex_for_unknown_product(self, use_case):
        with pytest.raises(ProductNotFoundError):
            use_case.execute(GenerateReportRequest(kardex_product_id=404))
