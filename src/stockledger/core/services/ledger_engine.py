"""
Ledger engine.

The single write path for stock state. Every catalog mutation and every
movement goes through one re-entrant lock, and each call validates its
input completely before touching the stores, so the catalog and the ledger
never diverge and a rejected call has no observable effect.
"""

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from stockledger.config import LedgerSettings, get_logger
from stockledger.core.clock import Clock, SystemClock
from stockledger.core.entities.movement import (
    Movement,
    MovementRequest,
    MovementType,
    is_reason_allowed,
)
from stockledger.core.entities.product import Product, ProductStatus
from stockledger.core.entities.report import StockCheck
from stockledger.core.exceptions import (
    DuplicateSkuError,
    ProductHasMovementsError,
    ProductNotFoundError,
    StockLedgerError,
    ValidationError,
)
from stockledger.core.interfaces.catalog_store import ICatalogStore
from stockledger.core.interfaces.ledger_store import IMovementLedger

logger = get_logger(__name__)

# Fields callers may not patch through update_product
_READ_ONLY_FIELDS = frozenset(
    {"id", "created_at", "updated_at", "deleted_at", "opening_stock", "total_value"}
)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Consistent view of catalog and ledger at one point in time."""

    products: tuple[Product, ...]  # catalog order, tombstones included
    movements: tuple[Movement, ...]  # append order

    @property
    def live_products(self) -> list[Product]:
        return [p for p in self.products if not p.is_deleted]

    def product(self, product_id: int) -> Product | None:
        for p in self.products:
            if p.id == product_id:
                return p
        return None


@dataclass(frozen=True)
class MovementOutcome:
    """A recorded movement with the product state it produced."""

    movement: Movement
    product: Product
    stock_check: StockCheck | None = None  # exits only


class LedgerEngine:
    """Owns the product catalog and the movement ledger."""

    def __init__(
        self,
        catalog: ICatalogStore | None = None,
        ledger: IMovementLedger | None = None,
        clock: Clock | None = None,
        settings: LedgerSettings | None = None,
    ):
        if catalog is None or ledger is None:
            from stockledger.infrastructure.storage.memory import (
                InMemoryCatalogStore,
                InMemoryMovementLedger,
            )

            catalog = catalog or InMemoryCatalogStore()
            ledger = ledger or InMemoryMovementLedger()
        self._catalog = catalog
        self._ledger = ledger
        self._clock = clock or SystemClock()
        self._settings = settings or LedgerSettings()
        self._lock = threading.RLock()

    @property
    def settings(self) -> LedgerSettings:
        return self._settings

    @property
    def clock(self) -> Clock:
        return self._clock

    # Catalog

    def add_product(self, product: Product) -> Product:
        """
        Add a product to the catalog.

        Any ``id`` or timestamps on the input are replaced. The supplied
        ``current_stock`` becomes the product's opening stock.

        Raises:
            ValidationError: empty SKU or negative unit cost
            DuplicateSkuError: SKU already used by a live product
        """
        with self._lock:
            self._validate_product(product.sku, product.unit_cost)
            now = self._clock.now()
            new_product = Product.model_validate(
                {
                    **product.model_dump(),
                    "id": None,
                    "opening_stock": product.current_stock,
                    "created_at": now,
                    "updated_at": now,
                    "deleted_at": None,
                }
            )
            stored = self._catalog.insert(new_product)

        logger.info(
            "product_added",
            product_id=stored.id,
            sku=stored.sku,
            opening_stock=stored.opening_stock,
        )
        return stored

    def update_product(self, product_id: int, updates: Mapping[str, Any]) -> Product:
        """
        Merge ``updates`` over an existing product and refresh ``updated_at``.

        ``total_value`` is always re-derived. Setting ``current_stock`` here
        bypasses the ledger; it is allowed but logged as a warning.

        Raises:
            ProductNotFoundError: unknown or deleted product
            ValidationError: unknown or read-only field, bad value
        """
        for field in updates:
            if field not in Product.model_fields:
                raise ValidationError(field, "unknown product field")
            if field in _READ_ONLY_FIELDS:
                raise ValidationError(field, "field cannot be updated", updates[field])

        with self._lock:
            current = self._get_live(product_id)
            try:
                updated = current.merged(dict(updates), self._clock.now())
            except PydanticValidationError as e:
                err = e.errors()[0]
                raise ValidationError(
                    ".".join(str(part) for part in err["loc"]) or "product",
                    err["msg"],
                    err.get("input"),
                ) from e
            self._validate_product(updated.sku, updated.unit_cost, product_id)
            self._catalog.replace(updated)

        if "current_stock" in updates:
            logger.warning(
                "stock_set_outside_ledger",
                product_id=product_id,
                old_stock=current.current_stock,
                new_stock=updated.current_stock,
            )
        logger.info("product_updated", product_id=product_id, fields=sorted(updates))
        return updated

    def delete_product(self, product_id: int) -> None:
        """
        Delete a product according to the configured delete policy.

        Raises:
            ProductNotFoundError: unknown or already deleted product
            ProductHasMovementsError: policy is ``forbid`` and movements exist
        """
        policy = self._settings.delete_policy
        with self._lock:
            product = self._get_live(product_id)
            movement_count = self._ledger.count(product_id)

            if policy == "forbid" and movement_count:
                raise ProductHasMovementsError(product_id, movement_count)

            if policy == "tombstone":
                now = self._clock.now()
                self._catalog.replace(
                    product.model_copy(
                        update={
                            "deleted_at": now,
                            "updated_at": now,
                            "status": ProductStatus.INACTIVE,
                        }
                    )
                )
            else:
                self._catalog.remove(product_id)

        logger.info(
            "product_deleted",
            product_id=product_id,
            policy=policy,
            movements=movement_count,
        )

    def get_by_id(self, product_id: int) -> Product | None:
        """Get a product, tombstoned ones included. Never raises."""
        with self._lock:
            return self._catalog.get(product_id)

    def list_products(self) -> list[Product]:
        """Live products in catalog order."""
        with self._lock:
            return self._catalog.list_all()

    # Ledger

    def check_stock(self, product_id: int, quantity: int) -> StockCheck:
        """Report what an exit of ``quantity`` would leave in stock."""
        with self._lock:
            product = self._get_live(product_id)
        return StockCheck(
            product_id=product_id,
            current_stock=product.current_stock,
            requested_quantity=quantity,
            resulting_stock=product.current_stock - quantity,
        )

    def record_movement(self, request: MovementRequest) -> Movement:
        """
        Append a movement and apply it to the product's stock.

        Exits larger than the current stock are accepted; stock goes
        negative and a warning is logged.

        Raises:
            ProductNotFoundError: unknown or deleted product
            ValidationError: bad quantity, reason, unit cost or reference
        """
        return self.apply_movement(request).movement

    def apply_movement(self, request: MovementRequest) -> MovementOutcome:
        """
        Same as ``record_movement``, also returning the updated product and,
        for exits, the stock check taken under the same lock as the write.
        """
        with self._lock:
            try:
                product, unit_cost = self._validate_movement(request)
            except StockLedgerError as e:
                logger.info(
                    "movement_rejected",
                    product_id=request.product_id,
                    code=e.code,
                    reason=e.message,
                )
                raise

            now = self._clock.now()
            movement = Movement(
                product_id=request.product_id,
                movement_type=request.movement_type,
                reason=request.reason,
                quantity=request.quantity,
                unit_cost=unit_cost,
                total_cost=request.quantity * unit_cost,
                reference=request.reference.strip(),
                notes=request.notes,
                user_id=request.user_id,
                user_name=request.user_name,
                timestamp=now,
                location=request.location or product.location,
            )
            new_stock = product.current_stock + movement.signed_quantity
            updated = product.restocked(new_stock, now)

            movement = self._ledger.append(movement)
            self._catalog.replace(updated)

        stock_check = None
        if movement.movement_type == MovementType.EXIT:
            stock_check = StockCheck(
                product_id=request.product_id,
                current_stock=product.current_stock,
                requested_quantity=movement.quantity,
                resulting_stock=new_stock,
            )
            if not stock_check.sufficient:
                logger.warning(
                    "exit_exceeds_stock",
                    product_id=product.id,
                    available=product.current_stock,
                    requested=movement.quantity,
                    resulting_stock=new_stock,
                )
        logger.info(
            "movement_recorded",
            movement_id=movement.id,
            product_id=product.id,
            type=movement.movement_type.value,
            qty=movement.quantity,
            new_stock=new_stock,
        )
        return MovementOutcome(movement=movement, product=updated, stock_check=stock_check)

    def snapshot(self) -> LedgerSnapshot:
        """Take a consistent copy of catalog and ledger for read-side queries."""
        with self._lock:
            return LedgerSnapshot(
                products=tuple(self._catalog.list_all(include_deleted=True)),
                movements=tuple(self._ledger.list_all()),
            )

    # Internals

    def _get_live(self, product_id: int) -> Product:
        product = self._catalog.get(product_id)
        if product is None or product.is_deleted:
            raise ProductNotFoundError(product_id)
        return product

    def _validate_product(
        self, sku: str, unit_cost: Decimal, product_id: int | None = None
    ) -> None:
        if not sku or not sku.strip():
            raise ValidationError("sku", "SKU must not be empty", sku)
        if unit_cost < 0:
            raise ValidationError("unit_cost", "unit cost must not be negative", unit_cost)
        existing = self._catalog.find_by_sku(sku)
        if existing is not None and existing.id != product_id:
            raise DuplicateSkuError(sku, existing.id)  # type: ignore[arg-type]

    def _validate_movement(self, request: MovementRequest) -> tuple[Product, Decimal]:
        """Check a request in order; return the product and effective unit cost."""
        product = self._get_live(request.product_id)

        quantity = request.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError(
                "quantity", "quantity must be a positive integer", quantity
            )

        if not is_reason_allowed(request.movement_type, request.reason):
            raise ValidationError(
                "reason",
                f"reason '{request.reason.value}' is not allowed for "
                f"'{request.movement_type.value}' movements",
                request.reason.value,
            )

        unit_cost = product.unit_cost if request.unit_cost is None else request.unit_cost
        if unit_cost < 0:
            raise ValidationError("unit_cost", "unit cost must not be negative", unit_cost)

        if not request.reference.strip():
            raise ValidationError("reference", "reference must not be empty")

        return product, unit_cost
