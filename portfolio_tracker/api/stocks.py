"""API endpoints for watchlist stocks."""
from typing import Any

from fastapi import APIRouter, Body, Request, status

from portfolio_tracker.core.deps import StorageDep
from portfolio_tracker.core.exceptions import StockValidationError, StorageError
from portfolio_tracker.core.rate_limit import create_stock_rate_limit, limiter
from portfolio_tracker.schemas.portfolio import ErrorResponse
from portfolio_tracker.schemas.stock import StockCreate, StockResponse, validate_stock_payload
from portfolio_tracker.utils.structured_logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[StockResponse],
    summary="Get Stocks",
    description="Get every stock on the watchlist in the order it was added.",
    operation_id="get_stocks",
    responses={500: {"model": ErrorResponse, "description": "Storage failure"}},
)
async def get_stocks(storage: StorageDep) -> list[StockResponse]:
    """Get all stocks."""
    try:
        return await storage.get_all_stocks()
    except StorageError as e:
        logger.error("Failed to fetch stocks", error=str(e))
        raise StorageError("Failed to fetch stocks") from e


@router.post(
    "",
    response_model=StockResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Stock",
    description="Validate a stock and add it to the watchlist.",
    operation_id="create_stock",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid stock data"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": StockCreate.model_json_schema()}},
        }
    },
)
@limiter.limit(create_stock_rate_limit)
async def create_stock(
    request: Request,
    storage: StorageDep,
    payload: Any = Body(None),
) -> StockResponse:
    """Create a new stock.

    The body is validated here rather than by FastAPI so the field errors
    come back in the same shape the client produces locally. A missing body
    arrives as None and is reported as a ``body`` error.
    """
    result = validate_stock_payload(payload)
    if not result.is_valid:
        logger.info(
            "Rejected stock payload",
            fields=[error.field for error in result.errors],
        )
        raise StockValidationError([error.to_dict() for error in result.errors])

    try:
        return await storage.create_stock(result.record)
    except StorageError as e:
        logger.error("Failed to create stock", symbol=result.record.symbol, error=str(e))
        raise StorageError("Failed to create stock") from e
