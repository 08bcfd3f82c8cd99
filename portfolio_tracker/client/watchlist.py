"""Watchlist reader backed by the query cache."""
from portfolio_tracker.client.api_client import STOCKS_PATH, PortfolioApiClient
from portfolio_tracker.client.cache import QueryCache
from portfolio_tracker.schemas.stock import StockResponse


class Watchlist:
    """The list of tracked stocks, read through the shared query cache.

    After the stock list is invalidated (e.g. by a successful add-stock
    submission) the next ``stocks()`` call fetches from the server again.
    """

    def __init__(self, api: PortfolioApiClient, cache: QueryCache):
        self.api = api
        self.cache = cache

    async def stocks(self) -> list[StockResponse]:
        return await self.cache.fetch(STOCKS_PATH, self.api.get_stocks)

    @property
    def is_stale(self) -> bool:
        return STOCKS_PATH not in self.cache
