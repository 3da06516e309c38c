"""Manage Products Use Case: catalog create, update and delete."""

from stockledger.application.dto.requests import CreateProductRequest, UpdateProductRequest
from stockledger.config import get_logger
from stockledger.core.entities.product import Product
from stockledger.core.services.ledger_engine import LedgerEngine

logger = get_logger(__name__)


class ManageProductsUseCase:
    """Catalog maintenance on behalf of product forms."""

    def __init__(self, engine: LedgerEngine | None = None):
        self._engine = engine

    def _get_engine(self) -> LedgerEngine:
        if self._engine is None:
            from stockledger.application.services import get_engine

            self._engine = get_engine()
        return self._engine

    def create(self, request: CreateProductRequest) -> Product:
        return self._get_engine().add_product(request.to_product())

    def update(self, product_id: int, request: UpdateProductRequest) -> Product:
        updates = request.to_updates()
        if not updates:
            logger.debug("product_update_noop", product_id=product_id)
        return self._get_engine().update_product(product_id, updates)

    def delete(self, product_id: int) -> None:
        self._get_engine().delete_product(product_id)
