"""Unit tests for the SQLAlchemy storage backend (in-memory SQLite)."""
from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from portfolio_tracker.core.exceptions import StorageError
from portfolio_tracker.schemas.portfolio import TransactionResponse, TransactionType
from portfolio_tracker.schemas.stock import StockCreate
from portfolio_tracker.storage import DatabaseStorage, MemoryStorage
from portfolio_tracker.storage.seed import DEMO_STOCKS, DEMO_TRANSACTIONS, DEMO_USER_ID

pytestmark = pytest.mark.database


def make_stock(symbol: str = "AAPL") -> StockCreate:
    return StockCreate(
        symbol=symbol,
        name="Apple Inc.",
        price="173.50",
        change="4.12",
        change_percent="2.4",
        volume=45200000,
        market_cap="$2.7T",
    )


def failing_session_factory() -> MagicMock:
    """Session factory whose sessions fail on entry."""
    factory = MagicMock()
    factory.return_value.__aenter__.side_effect = OperationalError(
        "SELECT 1", {}, Exception("unable to open database file")
    )
    return factory


class TestDatabaseStorage:
    """Tests for DatabaseStorage."""

    @pytest.mark.asyncio
    async def test_empty_database(self, database_storage: DatabaseStorage) -> None:
        assert await database_storage.get_all_stocks() == []
        assert await database_storage.get_portfolio(DEMO_USER_ID) is None
        assert await database_storage.get_transactions(DEMO_USER_ID) == []

    @pytest.mark.asyncio
    async def test_create_stock_persists(self, database_storage: DatabaseStorage) -> None:
        created = await database_storage.create_stock(make_stock())

        assert created.id == 1
        assert created.model_dump(exclude={"id"}) == make_stock().model_dump()
        assert await database_storage.get_all_stocks() == [created]

    @pytest.mark.asyncio
    async def test_insertion_order_and_duplicates(
        self, database_storage: DatabaseStorage
    ) -> None:
        for symbol in ["TSLA", "AAPL", "TSLA"]:
            await database_storage.create_stock(make_stock(symbol))

        stocks = await database_storage.get_all_stocks()
        assert [s.symbol for s in stocks] == ["TSLA", "AAPL", "TSLA"]
        assert [s.id for s in stocks] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_seed_loads_demo_data_once(self, database_storage: DatabaseStorage) -> None:
        await database_storage.seed()
        await database_storage.seed()

        stocks = await database_storage.get_all_stocks()
        assert [s.symbol for s in stocks] == [s["symbol"] for s in DEMO_STOCKS]

        portfolio = await database_storage.get_portfolio(DEMO_USER_ID)
        assert portfolio.total_value == "127842.50"

        transactions = await database_storage.get_transactions(DEMO_USER_ID)
        assert len(transactions) == len(DEMO_TRANSACTIONS)
        assert transactions[0].type is TransactionType.BUY

    @pytest.mark.asyncio
    async def test_health(self, database_storage: DatabaseStorage) -> None:
        health = await database_storage.check_health()

        assert health["status"] == "healthy"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation",
        [
            lambda s: s.get_all_stocks(),
            lambda s: s.get_portfolio(1),
            lambda s: s.get_transactions(1),
            lambda s: s.create_stock(make_stock()),
        ],
    )
    async def test_database_errors_become_storage_errors(self, operation) -> None:
        storage = DatabaseStorage(failing_session_factory())

        with pytest.raises(StorageError):
            await operation(storage)

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_unreachable(self) -> None:
        health = await DatabaseStorage(failing_session_factory()).check_health()

        assert health["status"] == "unhealthy"

    @pytest.mark.asyncio
    async def test_transaction_timestamps_match_memory_backend(
        self, database_storage: DatabaseStorage
    ) -> None:
        """Test both backends serialize the same seeded transactions identically."""
        await database_storage.seed()

        from_database = await database_storage.get_transactions(DEMO_USER_ID)
        from_memory = await MemoryStorage(seed=True).get_transactions(DEMO_USER_ID)

        assert all(t.created_at.tzinfo is not None for t in from_database)
        assert [t.created_at for t in from_database] == [
            t["created_at"] for t in DEMO_TRANSACTIONS
        ]
        assert [t.model_dump(mode="json", by_alias=True)["createdAt"] for t in from_database] == [
            t.model_dump(mode="json", by_alias=True)["createdAt"] for t in from_memory
        ]


class TestTransactionResponse:
    """Tests for TransactionResponse timestamp handling."""

    def make(self, created_at: datetime) -> TransactionResponse:
        return TransactionResponse(
            id=1,
            user_id=DEMO_USER_ID,
            type=TransactionType.BUY,
            symbol="AAPL",
            shares=10,
            price="173.50",
            total="1735.00",
            created_at=created_at,
        )

    def test_naive_timestamp_is_read_as_utc(self) -> None:
        transaction = self.make(datetime(2024, 1, 8, 14, 30))

        assert transaction.created_at == datetime(2024, 1, 8, 14, 30, tzinfo=UTC)
        assert transaction.model_dump(mode="json")["created_at"] == "2024-01-08T14:30:00Z"

    def test_offset_timestamp_is_converted_to_utc(self) -> None:
        tz = timezone(timedelta(hours=2))
        transaction = self.make(datetime(2024, 1, 8, 16, 30, tzinfo=tz))

        assert transaction.created_at.utcoffset() == timedelta(0)
        assert transaction.created_at == datetime(2024, 1, 8, 14, 30, tzinfo=UTC)
