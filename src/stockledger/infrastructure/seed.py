"""
Demo catalog and ledger.

Loads three sample products and replays their sample movements through
the ledger engine, so the demo data obeys the same invariants as real
data. Opening stock is chosen so that, after the replay, each product
shows its sample stock level.
"""

from decimal import Decimal

from stockledger.config import get_logger
from stockledger.core.entities.movement import MovementReason, MovementRequest, MovementType
from stockledger.core.entities.product import Product
from stockledger.core.services.ledger_engine import LedgerEngine

logger = get_logger(__name__)

DEMO_PRODUCTS: list[dict] = [
    {
        "sku": "SKU-001",
        "name": "Laptop Dell Inspiron 15",
        "description": "Office laptop with Intel i5 processor",
        "category": "Electronics",
        "supplier": "Dell Inc.",
        "unit": "unit",
        "location": "A-01-001",
        "current_stock": 25,
        "min_stock": 5,
        "max_stock": 50,
        "unit_cost": Decimal("650.00"),
        "barcode": "123456789012",
    },
    {
        "sku": "SKU-002",
        "name": "Premium Executive Chair",
        "description": "Ergonomic office chair",
        "category": "Furniture",
        "supplier": "Muebles SA",
        "unit": "unit",
        "location": "B-02-003",
        "current_stock": 15,
        "min_stock": 10,
        "max_stock": 30,
        "unit_cost": Decimal("180.00"),
        "barcode": "123456789013",
    },
    {
        "sku": "SKU-003",
        "name": "A4 Bond Paper",
        "description": "Ream of white 75g paper",
        "category": "Supplies",
        "supplier": "Central Stationery",
        "unit": "ream",
        "location": "C-01-005",
        "current_stock": 3,
        "min_stock": 20,
        "max_stock": 100,
        "unit_cost": Decimal("4.50"),
        "barcode": "123456789014",
    },
]

# (sku, type, reason, quantity, reference, notes, user_id, user_name)
DEMO_MOVEMENTS: list[tuple] = [
    ("SKU-001", MovementType.ENTRY, MovementReason.PURCHASE, 10, "PO-001",
     "Initial inventory purchase", "1", "Admin User"),
    ("SKU-001", MovementType.EXIT, MovementReason.SALE, 2, "SO-001",
     "Sale to corporate customer", "3", "Operator Maria"),
    ("SKU-003", MovementType.EXIT, MovementReason.SALE, 15, "SO-002",
     "Regular sale", "3", "Operator Maria"),
]


def load_demo_data(engine: LedgerEngine) -> list[Product]:
    """Seed ``engine`` with the demo catalog and movements."""
    net: dict[str, int] = {}
    for sku, movement_type, _, qty, *_ in DEMO_MOVEMENTS:
        net[sku] = net.get(sku, 0) + (qty if movement_type == MovementType.ENTRY else -qty)

    ids: dict[str, int] = {}
    for fields in DEMO_PRODUCTS:
        opening = fields["current_stock"] - net.get(fields["sku"], 0)
        product = engine.add_product(Product(**{**fields, "current_stock": opening}))
        ids[product.sku] = product.id  # type: ignore[assignment]

    for sku, movement_type, reason, qty, reference, notes, user_id, user_name in DEMO_MOVEMENTS:
        engine.record_movement(
            MovementRequest(
                product_id=ids[sku],
                movement_type=movement_type,
                reason=reason,
                quantity=qty,
                reference=reference,
                notes=notes,
                user_id=user_id,
                user_name=user_name,
            )
        )

    logger.info(
        "demo_data_loaded",
        products=len(DEMO_PRODUCTS),
        movements=len(DEMO_MOVEMENTS),
    )
    return engine.list_products()
