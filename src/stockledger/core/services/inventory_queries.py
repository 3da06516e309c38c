"""Read-side queries and aggregations over a ledger snapshot."""

from collections import Counter
from datetime import date, timezone
from decimal import Decimal

from stockledger.core.entities.movement import Movement, MovementReason, MovementType
from stockledger.core.entities.product import Product, ProductStatus, StockStatus
from stockledger.core.entities.report import (
    CategoryTotal,
    KardexRow,
    MovementTotals,
    SummaryStatistics,
    TopMovedProduct,
)
from stockledger.core.exceptions import ValidationError
from stockledger.core.services.ledger_engine import LedgerEngine, LedgerSnapshot


def build_kardex(opening_stock: int, movements: list[Movement]) -> list[KardexRow]:
    """
    Fold movements into running-balance rows.

    Rows are ordered by timestamp; movements with equal timestamps keep
    their ledger order.
    """
    ordered = sorted(enumerate(movements), key=lambda pair: (pair[1].timestamp, pair[0]))
    balance = opening_stock
    rows = []
    for _, movement in ordered:
        balance += movement.signed_quantity
        rows.append(KardexRow(movement=movement, running_balance=balance))
    return rows


class InventoryQueryService:
    """
    Pure reads for dashboards and reports.

    Each call takes its own snapshot from the engine, so it never observes
    a mutation in progress. Tombstoned products are left out of listings
    and aggregates but still resolve for kardex and movement lookups.
    """

    def __init__(self, engine: LedgerEngine):
        self._engine = engine

    def low_stock_products(self) -> list[Product]:
        """Products at or below their minimum stock, in catalog order."""
        snap = self._engine.snapshot()
        return [p for p in snap.live_products if p.is_low_stock]

    def top_moved_products(
        self, limit: int | None = None, exclude_unmoved: bool = False
    ) -> list[TopMovedProduct]:
        """
        Rank products by total moved quantity, entries and exits both counted.

        Ties keep catalog order. ``limit`` defaults to the configured
        ``top_moved_limit``.
        """
        if limit is None:
            limit = self._engine.settings.top_moved_limit
        if limit < 0:
            raise ValidationError("limit", "limit must not be negative", limit)

        snap = self._engine.snapshot()
        moved: Counter[int] = Counter()
        for m in snap.movements:
            moved[m.product_id] += m.quantity

        ranked = [
            TopMovedProduct(product=p, total_moved=moved[p.id])
            for p in snap.live_products
            if p.id is not None
        ]
        # stable: ties keep catalog order
        ranked.sort(key=lambda t: -t.total_moved)
        if exclude_unmoved:
            ranked = [t for t in ranked if t.total_moved]
        return ranked[:limit]

    def movements_for_product(self, product_id: int) -> list[Movement]:
        """All movements referencing the product, in ledger order."""
        snap = self._engine.snapshot()
        return [m for m in snap.movements if m.product_id == product_id]

    def kardex(self, product_id: int) -> list[KardexRow]:
        """
        Running-balance history for one product.

        The fold starts at the product's opening stock, or at zero when the
        product has been hard-deleted and only orphaned movements remain.
        """
        snap = self._engine.snapshot()
        product = snap.product(product_id)
        opening = product.opening_stock if product is not None else 0
        movements = [m for m in snap.movements if m.product_id == product_id]
        return build_kardex(opening, movements)

    def summary_statistics(self) -> SummaryStatistics:
        snap = self._engine.snapshot()
        products = snap.live_products

        total_value = sum((p.total_value for p in products), Decimal("0"))
        categories: dict[str, CategoryTotal] = {}
        for p in products:
            cat = categories.setdefault(p.category, CategoryTotal(category=p.category))
            cat.product_count += 1
            cat.total_stock += p.current_stock
            cat.total_value += p.total_value

        totals = MovementTotals(total_movements=len(snap.movements))
        for m in snap.movements:
            if m.movement_type == MovementType.ENTRY:
                totals.entry_count += 1
                totals.entry_value += m.total_cost
            else:
                totals.exit_count += 1
                totals.exit_value += m.total_cost

        return SummaryStatistics(
            product_count=len(products),
            total_value=total_value,
            active_products=sum(1 for p in products if p.status == ProductStatus.ACTIVE),
            category_count=len(categories),
            average_value=total_value / len(products) if products else Decimal("0"),
            low_stock_count=sum(1 for p in products if p.is_low_stock),
            categories=list(categories.values()),
            movements=totals,
        )

    # Catalog browsing

    def search_products(self, term: str = "", category: str | None = None) -> list[Product]:
        """Match name or SKU case-insensitively, or barcode by substring."""
        needle = term.lower()
        return [
            p
            for p in self._engine.snapshot().live_products
            if (
                needle in p.name.lower()
                or needle in p.sku.lower()
                or term in p.barcode
            )
            and (not category or p.category == category)
        ]

    def categories(self) -> list[str]:
        """Distinct categories in first-seen catalog order."""
        return list(dict.fromkeys(p.category for p in self._engine.snapshot().live_products))

    def stock_status(self, product: Product) -> StockStatus:
        return product.stock_status(self._engine.settings.high_stock_ratio)

    # Ledger browsing

    def filter_movements(
        self,
        term: str = "",
        movement_type: MovementType | None = None,
        reason: MovementReason | None = None,
    ) -> list[Movement]:
        """
        Filter the ledger by free text, type and reason.

        ``term`` matches the product's name or SKU, or the movement
        reference, case-insensitively.
        """
        snap = self._engine.snapshot()
        needle = term.lower()
        by_id = {p.id: p for p in snap.products}
        result = []
        for m in snap.movements:
            if movement_type is not None and m.movement_type != movement_type:
                continue
            if reason is not None and m.reason != reason:
                continue
            product = by_id.get(m.product_id)
            if not (
                needle in m.reference.lower()
                or (
                    product is not None
                    and (needle in product.name.lower() or needle in product.sku.lower())
                )
            ):
                continue
            result.append(m)
        return result

    def movements_on(self, day: date) -> list[Movement]:
        """Movements whose UTC timestamp falls on ``day``."""
        return [
            m
            for m in self._engine.snapshot().movements
            if m.timestamp.astimezone(timezone.utc).date() == day
        ]

    def movement_reasons(self) -> list[MovementReason]:
        """Distinct reasons used so far, in first-seen ledger order."""
        return list(dict.fromkeys(m.reason for m in self._engine.snapshot().movements))

    # Cross-checks

    def verify_stock_consistency(self) -> list[int]:
        """
        Recompute every live product's stock from the ledger.

        Returns the ids whose cached ``current_stock`` disagrees with the
        kardex fold; an empty list means catalog and ledger agree.
        """
        snap = self._engine.snapshot()
        return [
            p.id
            for p in snap.live_products
            if p.id is not None and _folded_stock(snap, p) != p.current_stock
        ]


def _folded_stock(snap: LedgerSnapshot, product: Product) -> int:
    return product.opening_stock + sum(
        m.signed_quantity for m in snap.movements if m.product_id == product.id
    )
