"""SQLAlchemy-backed storage.

Each operation runs in its own session; ``create_stock`` commits before
returning so the record is durable once the caller sees it.
"""
import logging

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import async_sessionmaker

from portfolio_tracker.core.exceptions import StorageError
from portfolio_tracker.models import Portfolio, Stock, Transaction
from portfolio_tracker.repositories import (
    PortfolioRepository,
    RepositoryError,
    StockRepository,
    TransactionRepository,
)
from portfolio_tracker.schemas.portfolio import PortfolioResponse, TransactionResponse
from portfolio_tracker.schemas.stock import StockCreate, StockResponse
from portfolio_tracker.storage.base import Storage
from portfolio_tracker.storage.seed import DEMO_PORTFOLIO, DEMO_STOCKS, DEMO_TRANSACTIONS

logger = logging.getLogger(__name__)


class DatabaseStorage(Storage):
    """Storage backend persisting records through the repository layer."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize with a session factory.

        Args:
            session_factory: Factory creating one AsyncSession per operation
        """
        self._session_factory = session_factory

    async def get_portfolio(self, user_id: int) -> PortfolioResponse | None:
        try:
            async with self._session_factory() as session:
                portfolio = await PortfolioRepository(session).get_by_user(user_id)
                if portfolio is None:
                    return None
                return PortfolioResponse.model_validate(portfolio)
        except (RepositoryError, SQLAlchemyError) as e:
            logger.error(f"Failed to load portfolio for user {user_id}: {e}")
            raise StorageError("Failed to load portfolio") from e

    async def get_all_stocks(self) -> list[StockResponse]:
        try:
            async with self._session_factory() as session:
                stocks = await StockRepository(session).get_all()
                return [StockResponse.model_validate(s) for s in stocks]
        except (RepositoryError, SQLAlchemyError) as e:
            logger.error(f"Failed to load stocks: {e}")
            raise StorageError("Failed to load stocks") from e

    async def get_transactions(self, user_id: int) -> list[TransactionResponse]:
        try:
            async with self._session_factory() as session:
                transactions = await TransactionRepository(session).get_by_user(user_id)
                return [TransactionResponse.model_validate(t) for t in transactions]
        except (RepositoryError, SQLAlchemyError) as e:
            logger.error(f"Failed to load transactions for user {user_id}: {e}")
            raise StorageError("Failed to load transactions") from e

    async def create_stock(self, record: StockCreate) -> StockResponse:
        try:
            async with self._session_factory() as session:
                stock = await StockRepository(session).create(**record.model_dump())
                await session.commit()
                return StockResponse.model_validate(stock)
        except (RepositoryError, SQLAlchemyError) as e:
            logger.error(f"Failed to create stock {record.symbol}: {e}")
            raise StorageError("Failed to create stock") from e

    async def check_health(self) -> dict[str, str]:
        """Check database connection health."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(text("SELECT 1 as health_check"))
                if result.scalar() == 1:
                    return {"status": "healthy", "message": "Database connection successful"}
                return {
                    "status": "unhealthy",
                    "message": "Database query returned unexpected result",
                }
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return {"status": "unhealthy", "message": "Database connection failed"}

    async def seed(self) -> None:
        """Insert the demo records unless the stock table already has rows."""
        try:
            async with self._session_factory() as session:
                count = await session.scalar(select(func.count()).select_from(Stock))
                if count:
                    return
                session.add_all([Stock(**data) for data in DEMO_STOCKS])
                session.add(Portfolio(**DEMO_PORTFOLIO))
                session.add_all([Transaction(**data) for data in DEMO_TRANSACTIONS])
                await session.commit()
                logger.info("Seeded database storage with demo data")
        except SQLAlchemyError as e:
            logger.error(f"Failed to seed database: {e}")
            raise StorageError("Failed to seed database") from e
