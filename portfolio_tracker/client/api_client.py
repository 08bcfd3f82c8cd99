"""Async HTTP client for the Portfolio Tracker API."""
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from portfolio_tracker.core.exceptions import ApiResponseError, NetworkError
from portfolio_tracker.schemas.portfolio import PortfolioResponse, TransactionResponse
from portfolio_tracker.schemas.stock import StockCreate, StockResponse
from portfolio_tracker.utils.structured_logging import get_logger

logger = get_logger(__name__)

STOCKS_PATH = "/api/stocks"


class PortfolioApiClient:
    """Thin typed wrapper around ``httpx.AsyncClient``.

    Example:
        ```python
        async with httpx.AsyncClient(base_url="http://localhost:8000") as http:
            api = PortfolioApiClient(http)
            stocks = await api.get_stocks()
        ```
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def request(self, method: str, path: str, json: Any = None) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the client's base URL
            json: Optional JSON body

        Returns:
            Decoded response body

        Raises:
            NetworkError: If the request could not be completed
            ApiResponseError: If the server answered with a non-2xx status
                or a body that is not JSON
        """
        response = await self._send(method, path, json)
        return _json_body(response, method, path)

    async def get_stocks(self) -> list[StockResponse]:
        return await self._fetch("GET", STOCKS_PATH, StockResponse, many=True)

    async def get_portfolio(self, user_id: int) -> PortfolioResponse:
        return await self._fetch("GET", f"/api/portfolio/{user_id}", PortfolioResponse)

    async def get_transactions(self, user_id: int) -> list[TransactionResponse]:
        return await self._fetch(
            "GET", f"/api/transactions/{user_id}", TransactionResponse, many=True
        )

    async def create_stock(self, record: StockCreate) -> StockResponse:
        return await self._fetch(
            "POST",
            STOCKS_PATH,
            StockResponse,
            json=record.model_dump(mode="json", by_alias=True),
        )

    async def _send(self, method: str, path: str, json: Any) -> httpx.Response:
        try:
            response = await self.http.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.warning("Request failed", method=method, path=path, error=str(e))
            raise NetworkError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            message, errors = _error_details(response)
            logger.warning(
                "Request rejected",
                method=method,
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise ApiResponseError(response.status_code, message, errors)

        return response

    async def _fetch(
        self,
        method: str,
        path: str,
        model: type[BaseModel],
        *,
        many: bool = False,
        json: Any = None,
    ) -> Any:
        response = await self._send(method, path, json)
        data = _json_body(response, method, path)
        try:
            if many:
                if not isinstance(data, list):
                    raise TypeError(f"expected a list, got {type(data).__name__}")
                return [model.model_validate(item) for item in data]
            return model.model_validate(data)
        except (ValidationError, TypeError) as e:
            logger.warning(
                "Unexpected response body",
                method=method,
                path=path,
                status_code=response.status_code,
                error=str(e),
            )
            raise ApiResponseError(response.status_code, "Unexpected response body") from e


def _json_body(response: httpx.Response, method: str, path: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        logger.warning(
            "Response body is not JSON",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        raise ApiResponseError(response.status_code, "Response body is not JSON") from e


def _error_details(response: httpx.Response) -> tuple[str, list[dict[str, Any]]]:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or "Request failed", []

    if isinstance(body, dict):
        return str(body.get("message", "Request failed")), list(body.get("errors") or [])
    return "Request failed", []
