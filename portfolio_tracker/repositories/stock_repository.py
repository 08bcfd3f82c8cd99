"""Repository for Stock CRUD operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.models.stock import Stock
from portfolio_tracker.repositories.base import BaseRepository


class StockRepository(BaseRepository[Stock]):
    """Repository for Stock database operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Stock, session)

    async def get_all(self) -> list[Stock]:
        """Get every stock in insertion order."""
        return await self.list()
