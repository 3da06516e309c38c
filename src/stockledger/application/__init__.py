"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates the ledger engine on behalf of UI collaborators:
1. Defining request DTOs for catalog forms
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection
"""

from stockledger.application.dto.requests import (
    CreateProductRequest,
    GenerateReportRequest,
    UpdateProductRequest,
)
from stockledger.application.services import (
    create_engine,
    get_engine,
    get_query_service,
    reset_engine,
)
from stockledger.application.use_cases import (
    GenerateInventoryReportUseCase,
    InventoryReport,
    ManageProductsUseCase,
    RecordMovementResult,
    RecordMovementUseCase,
)

__all__ = [
    # Request DTOs
    "CreateProductRequest",
    "UpdateProductRequest",
    "GenerateReportRequest",
    # Services
    "create_engine",
    "get_engine",
    "get_query_service",
    "reset_engine",
    # Use cases
    "RecordMovementUseCase",
    "RecordMovementResult",
    "ManageProductsUseCase",
    "GenerateInventoryReportUseCase",
    "InventoryReport",
]
