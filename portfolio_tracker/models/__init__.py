"""Database models for the Portfolio Tracker application.

This module exports all SQLAlchemy models used throughout the application.
Import models from this module to ensure proper dependency resolution.
"""

# Import base classes
from portfolio_tracker.models.base import Base

# Import all models
from portfolio_tracker.models.portfolio import Portfolio, Transaction
from portfolio_tracker.models.stock import Stock

# Export all models for easy importing
__all__ = [
    "Base",
    "Portfolio",
    "Stock",
    "Transaction",
]
