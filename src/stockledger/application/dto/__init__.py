"""Data transfer objects."""

from stockledger.application.dto.requests import (
    CreateProductRequest,
    GenerateReportRequest,
    UpdateProductRequest,
)

__all__ = [
    "CreateProductRequest",
    "UpdateProductRequest",
    "GenerateReportRequest",
]
