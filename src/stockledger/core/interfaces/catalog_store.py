"""Abstract interface for product catalog storage."""

from abc import ABC, abstractmethod

from stockledger.core.entities.product import Product


class ICatalogStore(ABC):
    """Interface for product persistence, kept in catalog (insertion) order."""

    @abstractmethod
    def insert(self, product: Product) -> Product:
        """Insert a new product and assign its id."""
        pass

    @abstractmethod
    def get(self, product_id: int) -> Product | None:
        """Get product by ID, tombstoned products included."""
        pass

    @abstractmethod
    def find_by_sku(self, sku: str) -> Product | None:
        """Get the live product with this SKU, if any."""
        pass

    @abstractmethod
    def replace(self, product: Product) -> Product:
        """Replace the stored record, keeping its catalog position."""
        pass

    @abstractmethod
    def remove(self, product_id: int) -> None:
        """Hard-remove a product."""
        pass

    @abstractmethod
    def list_all(self, include_deleted: bool = False) -> list[Product]:
        """List products in catalog order."""
        pass
