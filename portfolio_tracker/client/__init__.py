"""Client-side library for the Portfolio Tracker API.

Provides the HTTP client, the query cache and the add-stock submission flow
used by front-ends that talk to the backend.
"""

from portfolio_tracker.client.api_client import PortfolioApiClient
from portfolio_tracker.client.cache import CacheInvalidated, QueryCache
from portfolio_tracker.client.forms import StockForm
from portfolio_tracker.client.submission import (
    AddStockFlow,
    InputSurface,
    Notification,
    Notifier,
    SubmissionState,
)
from portfolio_tracker.client.watchlist import Watchlist

__all__ = [
    "AddStockFlow",
    "CacheInvalidated",
    "InputSurface",
    "Notification",
    "Notifier",
    "PortfolioApiClient",
    "QueryCache",
    "StockForm",
    "SubmissionState",
    "Watchlist",
]
