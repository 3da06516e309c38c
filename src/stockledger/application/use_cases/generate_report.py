"""Generate Inventory Report Use Case."""

from dataclasses import dataclass, field
from datetime import datetime

from stockledger.application.dto.requests import GenerateReportRequest
from stockledger.config import get_logger
from stockledger.core.entities.product import Product
from stockledger.core.entities.report import KardexRow, SummaryStatistics, TopMovedProduct
from stockledger.core.exceptions import ProductNotFoundError
from stockledger.core.services.inventory_queries import InventoryQueryService
from stockledger.core.services.ledger_engine import LedgerEngine

logger = get_logger(__name__)


@dataclass
class InventoryReport:
    """Everything the reports page shows in one pass."""

    generated_at: datetime
    summary: SummaryStatistics
    low_stock: list[Product]
    top_moved: list[TopMovedProduct]
    kardex_product: Product | None = None
    kardex: list[KardexRow] = field(default_factory=list)


class GenerateInventoryReportUseCase:
    """Build the inventory, movement, ranking and kardex report."""

    def __init__(
        self,
        engine: LedgerEngine | None = None,
        query_service: InventoryQueryService | None = None,
    ):
        self._engine = engine
        self._query_service = query_service

    def _get_engine(self) -> LedgerEngine:
        if self._engine is None:
            from stockledger.application.services import get_engine

            self._engine = get_engine()
        return self._engine

    def _get_query_service(self) -> InventoryQueryService:
        if self._query_service is None:
            self._query_service = InventoryQueryService(self._get_engine())
        return self._query_service

    def execute(self, request: GenerateReportRequest | None = None) -> InventoryReport:
        """Execute generate report use case."""
        request = request or GenerateReportRequest()
        engine = self._get_engine()
        queries = self._get_query_service()

        kardex_product = None
        kardex: list[KardexRow] = []
        if request.kardex_product_id is not None:
            kardex_product = engine.get_by_id(request.kardex_product_id)
            if kardex_product is None:
                raise ProductNotFoundError(request.kardex_product_id)
            kardex = queries.kardex(request.kardex_product_id)

        limit = request.top_limit
        if limit is None:
            limit = engine.settings.report_top_moved_limit

        report = InventoryReport(
            generated_at=engine.clock.now(),
            summary=queries.summary_statistics(),
            low_stock=queries.low_stock_products(),
            top_moved=queries.top_moved_products(limit=limit, exclude_unmoved=True),
            kardex_product=kardex_product,
            kardex=kardex,
        )

        logger.info(
            "inventory_report_generated",
            products=report.summary.product_count,
            low_stock=len(report.low_stock),
            kardex_rows=len(report.kardex),
        )
        return report
