"""API endpoints for user portfolios and transaction history."""
from fastapi import APIRouter

from portfolio_tracker.core.deps import StorageDep
from portfolio_tracker.core.exceptions import NotFoundError, StorageError
from portfolio_tracker.schemas.portfolio import (
    ErrorResponse,
    PortfolioResponse,
    TransactionResponse,
)
from portfolio_tracker.utils.structured_logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/portfolio/{user_id}",
    response_model=PortfolioResponse,
    summary="Get Portfolio",
    description="Get the holdings and valuation summary of a user.",
    operation_id="get_portfolio",
    responses={
        404: {"model": ErrorResponse, "description": "Portfolio not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)
async def get_portfolio(user_id: int, storage: StorageDep) -> PortfolioResponse:
    """Get a user's portfolio."""
    try:
        portfolio = await storage.get_portfolio(user_id)
    except StorageError as e:
        logger.error("Failed to fetch portfolio", user_id=user_id, error=str(e))
        raise StorageError("Failed to fetch portfolio") from e

    if portfolio is None:
        raise NotFoundError("Portfolio not found")

    return portfolio


@router.get(
    "/transactions/{user_id}",
    response_model=list[TransactionResponse],
    summary="Get Transactions",
    description="Get a user's transaction history. Users without history get an empty list.",
    operation_id="get_transactions",
    responses={500: {"model": ErrorResponse, "description": "Storage failure"}},
)
async def get_transactions(user_id: int, storage: StorageDep) -> list[TransactionResponse]:
    """Get a user's transactions."""
    try:
        return await storage.get_transactions(user_id)
    except StorageError as e:
        logger.error("Failed to fetch transactions", user_id=user_id, error=str(e))
        raise StorageError("Failed to fetch transactions") from e
