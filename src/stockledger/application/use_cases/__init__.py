"""Application use cases."""

from stockledger.application.use_cases.generate_report import (
    GenerateInventoryReportUseCase,
    InventoryReport,
)
from stockledger.application.use_cases.manage_products import ManageProductsUseCase
from stockledger.application.use_cases.record_movement import (
    RecordMovementResult,
    RecordMovementUseCase,
)

__all__ = [
    "RecordMovementUseCase",
    "RecordMovementResult",
    "ManageProductsUseCase",
    "GenerateInventoryReportUseCase",
    "InventoryReport",
]
