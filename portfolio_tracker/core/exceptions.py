"""Core exception classes for the Portfolio Tracker application."""
from typing import Any


class PortfolioTrackerError(Exception):
    """Base exception for portfolio tracker operations."""

    pass


class StockValidationError(PortfolioTrackerError):
    """Raised when a stock creation payload fails field-level validation."""

    def __init__(self, errors: list[dict[str, Any]], message: str = "Invalid stock data"):
        super().__init__(message)
        self.message = message
        self.errors = errors


class NotFoundError(PortfolioTrackerError):
    """Raised when a requested resource does not exist."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)
        self.message = message


class StorageError(PortfolioTrackerError):
    """Raised when the storage layer fails unexpectedly."""

    pass


class NetworkError(PortfolioTrackerError):
    """Raised by the API client when a request cannot reach the server."""

    pass


class ApiResponseError(PortfolioTrackerError):
    """Raised by the API client for a non-2xx status or an unreadable response body."""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
