"""In-memory implementation of catalog storage."""

from itertools import count

from stockledger.config import get_logger
from stockledger.core.entities.product import Product
from stockledger.core.interfaces.catalog_store import ICatalogStore

logger = get_logger(__name__)


class InMemoryCatalogStore(ICatalogStore):
    """
    Dict-backed product store.

    Records are copied on the way in and out, so callers never hold a
    reference into the store's own state.
    """

    def __init__(self) -> None:
        self._products: dict[int, Product] = {}
        self._ids = count(1)

    def insert(self, product: Product) -> Product:
        """Insert a new product and assign its id."""
        stored = product.model_copy(update={"id": next(self._ids)}, deep=True)
        self._products[stored.id] = stored  # type: ignore[index]
        logger.debug("catalog_insert", product_id=stored.id, sku=stored.sku)
        return stored.model_copy(deep=True)

    def get(self, product_id: int) -> Product | None:
        product = self._products.get(product_id)
        if product is None:
            return None
        return product.model_copy(deep=True)

    def find_by_sku(self, sku: str) -> Product | None:
        for product in self._products.values():
            if product.sku == sku and not product.is_deleted:
                return product.model_copy(deep=True)
        return None

    def replace(self, product: Product) -> Product:
        """Replace the stored record; dict order keeps its catalog position."""
        if product.id not in self._products:
            raise KeyError(product.id)
        self._products[product.id] = product.model_copy(deep=True)
        return product

    def remove(self, product_id: int) -> None:
        del self._products[product_id]
        logger.debug("catalog_remove", product_id=product_id)

    def list_all(self, include_deleted: bool = False) -> list[Product]:
        return [
            p.model_copy(deep=True)
            for p in self._products.values()
            if include_deleted or not p.is_deleted
        ]
