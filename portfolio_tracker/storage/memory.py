"""In-process storage backend.

Keeps every record in dictionaries owned by the storage instance. Writes are
serialized with an asyncio lock so ids stay unique and monotonic.
"""
import asyncio
import itertools

from pydantic import ValidationError

from portfolio_tracker.core.exceptions import StorageError
from portfolio_tracker.schemas.portfolio import PortfolioResponse, TransactionResponse
from portfolio_tracker.schemas.stock import StockCreate, StockResponse
from portfolio_tracker.storage.base import Storage
from portfolio_tracker.storage.seed import DEMO_PORTFOLIO, DEMO_STOCKS, DEMO_TRANSACTIONS
from portfolio_tracker.utils.structured_logging import get_logger

logger = get_logger(__name__)


class MemoryStorage(Storage):
    """Storage backend holding all records in memory.

    Example:
        ```python
        storage = MemoryStorage(seed=True)
        stocks = await storage.get_all_stocks()
        ```
    """

    def __init__(self, seed: bool = False):
        self._stocks: dict[int, StockResponse] = {}
        self._portfolios: dict[int, PortfolioResponse] = {}
        self._transactions: dict[int, TransactionResponse] = {}
        self._stock_ids = itertools.count(1)
        self._portfolio_ids = itertools.count(1)
        self._transaction_ids = itertools.count(1)
        self._lock = asyncio.Lock()

        if seed:
            self._seed()

    def _seed(self) -> None:
        for data in DEMO_STOCKS:
            stock_id = next(self._stock_ids)
            self._stocks[stock_id] = StockResponse(id=stock_id, **data)

        portfolio_id = next(self._portfolio_ids)
        portfolio = PortfolioResponse(id=portfolio_id, **DEMO_PORTFOLIO)
        self._portfolios[portfolio.user_id] = portfolio

        for data in DEMO_TRANSACTIONS:
            transaction_id = next(self._transaction_ids)
            self._transactions[transaction_id] = TransactionResponse(id=transaction_id, **data)

        logger.info(
            "Seeded in-memory storage",
            stocks=len(self._stocks),
            portfolios=len(self._portfolios),
            transactions=len(self._transactions),
        )

    async def get_portfolio(self, user_id: int) -> PortfolioResponse | None:
        return self._portfolios.get(user_id)

    async def get_all_stocks(self) -> list[StockResponse]:
        return list(self._stocks.values())

    async def get_transactions(self, user_id: int) -> list[TransactionResponse]:
        return [t for t in self._transactions.values() if t.user_id == user_id]

    async def create_stock(self, record: StockCreate) -> StockResponse:
        async with self._lock:
            stock_id = next(self._stock_ids)
            try:
                stock = StockResponse(id=stock_id, **record.model_dump())
            except ValidationError as e:
                logger.error("Failed to build stock record", symbol=record.symbol, error=str(e))
                raise StorageError(f"Could not store stock {record.symbol}") from e
            self._stocks[stock_id] = stock

        logger.info("Stock created", stock_id=stock_id, symbol=stock.symbol)
        return stock
