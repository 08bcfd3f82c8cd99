"""Repositories for Portfolio and Transaction reads."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.models.portfolio import Portfolio, Transaction
from portfolio_tracker.repositories.base import BaseRepository, DatabaseError


class PortfolioRepository(BaseRepository[Portfolio]):
    """Repository for Portfolio database operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Portfolio, session)

    async def get_by_user(self, user_id: int) -> Portfolio | None:
        """Get the portfolio owned by ``user_id``, if any."""
        try:
            result = await self.session.execute(
                select(Portfolio).where(Portfolio.user_id == user_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Failed to get portfolio for user {user_id}: {e}")
            raise DatabaseError(f"Database error retrieving portfolio: {str(e)}")


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for Transaction database operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Transaction, session)

    async def get_by_user(self, user_id: int) -> list[Transaction]:
        """Get a user's transactions in the order they were recorded."""
        return await self.list(filters={"user_id": user_id})
