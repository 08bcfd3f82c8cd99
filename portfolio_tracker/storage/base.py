"""Abstract storage interface.

All storage backends must implement this interface so route handlers can
work with any backend without modification.
"""
from abc import ABC, abstractmethod

from portfolio_tracker.schemas.portfolio import PortfolioResponse, TransactionResponse
from portfolio_tracker.schemas.stock import StockCreate, StockResponse


class Storage(ABC):
    """Persistence boundary for stocks, portfolios and transactions.

    Implementations raise ``StorageError`` for any unexpected internal
    failure. A missing portfolio is not an error: ``get_portfolio`` returns
    None.
    """

    @abstractmethod
    async def get_portfolio(self, user_id: int) -> PortfolioResponse | None:
        """Get the portfolio owned by ``user_id``.

        Returns:
            The portfolio, or None if the user has none

        Raises:
            StorageError: If the backend fails
        """
        pass

    @abstractmethod
    async def get_all_stocks(self) -> list[StockResponse]:
        """Get every stock in insertion order.

        Raises:
            StorageError: If the backend fails
        """
        pass

    @abstractmethod
    async def get_transactions(self, user_id: int) -> list[TransactionResponse]:
        """Get a user's transactions; empty when there are none.

        Raises:
            StorageError: If the backend fails
        """
        pass

    @abstractmethod
    async def create_stock(self, record: StockCreate) -> StockResponse:
        """Persist a validated stock and return it with its assigned id.

        The record is persisted before this returns. Symbols are not
        required to be unique.

        Raises:
            StorageError: If the backend fails
        """
        pass

    async def check_health(self) -> dict[str, str]:
        """Report backend health as ``{"status": ..., "message": ...}``."""
        return {"status": "healthy", "message": f"{type(self).__name__} ready"}

    async def close(self) -> None:
        """Release backend resources. Default implementation does nothing."""
        return None
