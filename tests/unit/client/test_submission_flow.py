"""Unit tests for the add-stock submission state machine."""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from portfolio_tracker.client.api_client import STOCKS_PATH, PortfolioApiClient
from portfolio_tracker.client.cache import QueryCache
from portfolio_tracker.client.forms import StockForm
from portfolio_tracker.client.submission import (
    FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    AddStockFlow,
    Notification,
    SubmissionState,
)
from portfolio_tracker.core.exceptions import ApiResponseError, NetworkError
from portfolio_tracker.schemas.stock import StockResponse

FORM_VALUES = {
    "symbol": "aapl",
    "name": "Apple Inc.",
    "price": "173.50",
    "change": "4.12",
    "changePercent": "2.4",
    "volume": 45200000,
    "marketCap": "$2.7T",
}


@pytest.fixture
def api() -> AsyncMock:
    api = AsyncMock(spec=PortfolioApiClient)
    api.create_stock.side_effect = lambda record: StockResponse(id=6, **record.model_dump())
    return api


@pytest.fixture
def cache() -> MagicMock:
    return MagicMock(spec=QueryCache)


@pytest.fixture
def flow(api, cache) -> AddStockFlow:
    return AddStockFlow(
        api=api,
        cache=cache,
        notifier=MagicMock(),
        surface=MagicMock(),
        form=StockForm(**FORM_VALUES),
    )


class TestAddStockFlow:
    """Tests for AddStockFlow."""

    def test_starts_idle(self, flow: AddStockFlow) -> None:
        assert flow.state is SubmissionState.IDLE
        assert flow.can_submit

    @pytest.mark.asyncio
    async def test_success_path(self, flow: AddStockFlow, api, cache) -> None:
        stock = await flow.submit()

        assert stock.id == 6
        assert stock.symbol == "AAPL"
        assert flow.state is SubmissionState.SUCCESS
        api.create_stock.assert_awaited_once()
        cache.invalidate.assert_called_once_with(STOCKS_PATH)
        assert flow.form.is_pristine
        flow.surface.close.assert_called_once()
        flow.notifier.notify.assert_called_once_with(
            Notification(title="Success", description=SUCCESS_MESSAGE)
        )

    @pytest.mark.asyncio
    async def test_invalid_form_blocks_network_call(self, flow: AddStockFlow, api, cache) -> None:
        flow.form.set_value("symbol", "")

        result = await flow.submit()

        assert result is None
        assert flow.state is SubmissionState.IDLE
        assert flow.form.errors["symbol"] == "Symbol is required"
        api.create_stock.assert_not_awaited()
        cache.invalidate.assert_not_called()
        flow.notifier.notify.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            ApiResponseError(500, "Failed to create stock"),
            ApiResponseError(400, "Invalid stock data", [{"field": "symbol"}]),
            NetworkError("connection refused"),
        ],
    )
    async def test_failure_path_keeps_values(self, flow: AddStockFlow, api, cache, error) -> None:
        api.create_stock.side_effect = error

        result = await flow.submit()

        assert result is None
        assert flow.state is SubmissionState.FAILURE
        assert flow.last_error is error
        assert flow.form.values["name"] == "Apple Inc."
        assert flow.form.values["symbol"] == "AAPL"
        cache.invalidate.assert_not_called()
        flow.surface.close.assert_not_called()
        flow.notifier.notify.assert_called_once_with(
            Notification(title="Error", description=FAILURE_MESSAGE, variant="destructive")
        )

    @pytest.mark.asyncio
    async def test_no_automatic_retry(self, flow: AddStockFlow, api) -> None:
        api.create_stock.side_effect = NetworkError("timeout")

        await flow.submit()

        api.create_stock.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_manual_resubmit_after_failure(self, flow: AddStockFlow, api) -> None:
        api.create_stock.side_effect = [
            NetworkError("timeout"),
            StockResponse(id=7, **flow.form.validate().record.model_dump()),
        ]

        assert await flow.submit() is None
        stock = await flow.submit()

        assert stock.id == 7
        assert flow.state is SubmissionState.SUCCESS
        assert flow.last_error is None

    @pytest.mark.asyncio
    async def test_submit_disabled_while_in_flight(self, flow: AddStockFlow, api) -> None:
        release = asyncio.Event()

        async def slow_create(record):
            await release.wait()
            return StockResponse(id=8, **record.model_dump())

        api.create_stock.side_effect = slow_create

        first = asyncio.create_task(flow.submit())
        await asyncio.sleep(0)
        assert flow.state is SubmissionState.SUBMITTING
        assert not flow.can_submit

        assert await flow.submit() is None

        release.set()
        stock = await first

        assert stock.id == 8
        api.create_stock.assert_awaited_once()


def redirect_loop(request: httpx.Request) -> httpx.Response:
    raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=request)


class TestAddStockFlowOverHttp:
    """Failures coming from a real client over httpx.MockTransport."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "handler",
        [
            lambda request: httpx.Response(201, text="<html>"),
            lambda request: httpx.Response(201, json={"unexpected": True}),
            redirect_loop,
        ],
        ids=["non-json-body", "unexpected-body", "redirect-loop"],
    )
    async def test_bad_response_ends_in_failure(self, cache, handler) -> None:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
        notifier = MagicMock()
        flow = AddStockFlow(
            api=PortfolioApiClient(http),
            cache=cache,
            notifier=notifier,
            surface=MagicMock(),
            form=StockForm(**FORM_VALUES),
        )

        async with http:
            result = await flow.submit()

        assert result is None
        assert flow.state is SubmissionState.FAILURE
        assert flow.can_submit
        assert isinstance(flow.last_error, (ApiResponseError, NetworkError))
        assert flow.form.values["symbol"] == "AAPL"
        cache.invalidate.assert_not_called()
        notifier.notify.assert_called_once_with(
            Notification(title="Error", description=FAILURE_MESSAGE, variant="destructive")
        )

    @pytest.mark.asyncio
    async def test_unexpected_exception_ends_in_failure(self, flow: AddStockFlow, api) -> None:
        error = RuntimeError("boom")
        api.create_stock.side_effect = error

        assert await flow.submit() is None

        assert flow.state is SubmissionState.FAILURE
        assert flow.can_submit
        assert flow.last_error is error
        flow.notifier.notify.assert_called_once()
