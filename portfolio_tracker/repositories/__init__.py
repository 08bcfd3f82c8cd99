"""Data access repositories with base repository pattern.

This module provides the base repository class and common exceptions
for all repository implementations in the Portfolio Tracker application.
"""

from .base import BaseRepository
from .base import DatabaseError
from .base import RepositoryError
from .portfolio_repository import PortfolioRepository
from .portfolio_repository import TransactionRepository
from .stock_repository import StockRepository

__all__ = [
    "BaseRepository",
    "PortfolioRepository",
    "StockRepository",
    "TransactionRepository",
    "RepositoryError",
    "DatabaseError",
]
