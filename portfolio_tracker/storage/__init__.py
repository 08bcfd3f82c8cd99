"""Storage backends for stocks, portfolios and transactions."""

from portfolio_tracker.storage.base import Storage
from portfolio_tracker.storage.database import DatabaseStorage
from portfolio_tracker.storage.factory import create_storage
from portfolio_tracker.storage.memory import MemoryStorage

__all__ = [
    "DatabaseStorage",
    "MemoryStorage",
    "Storage",
    "create_storage",
]
