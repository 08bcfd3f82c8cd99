"""Pydantic schemas for API request/response validation.

This module exports all Pydantic schemas used throughout the application.
"""

from portfolio_tracker.schemas.base import CamelModel, StrictBaseModel
from portfolio_tracker.schemas.portfolio import (
    ErrorResponse,
    PortfolioResponse,
    TransactionResponse,
    TransactionType,
)
from portfolio_tracker.schemas.stock import (
    FieldError,
    StockCreate,
    StockResponse,
    ValidationResult,
    validate_stock_payload,
)

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "FieldError",
    "PortfolioResponse",
    "StockCreate",
    "StockResponse",
    "StrictBaseModel",
    "TransactionResponse",
    "TransactionType",
    "ValidationResult",
    "validate_stock_payload",
]
