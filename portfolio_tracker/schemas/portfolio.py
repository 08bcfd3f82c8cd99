"""Schemas for portfolio and transaction records."""
from datetime import UTC, datetime
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, Field

from portfolio_tracker.schemas.base import CamelModel, StrictBaseModel


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive timestamps; they are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class TransactionType(str, Enum):
    """Kind of event recorded in a user's history."""

    BUY = "buy"
    SELL = "sell"
    WATCH = "watch"


class PortfolioResponse(CamelModel):
    """Aggregated holdings and valuation for a user."""

    id: int
    user_id: int
    total_value: str = Field(description="Current value of all holdings as decimal text")
    day_change: str = Field(description="Value change since previous close")
    day_change_percent: str
    total_gain_loss: str = Field(description="Unrealised gain or loss since purchase")
    total_gain_loss_percent: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "userId": 1,
                    "totalValue": "127842.50",
                    "dayChange": "2847.30",
                    "dayChangePercent": "2.28",
                    "totalGainLoss": "18420.75",
                    "totalGainLossPercent": "16.84",
                }
            ]
        }
    }


class TransactionResponse(CamelModel):
    """A historical trade or watchlist event."""

    id: int
    user_id: int
    type: TransactionType
    symbol: str
    shares: int = Field(ge=0)
    price: str
    total: str
    created_at: UtcDatetime


class ErrorResponse(StrictBaseModel):
    """Error body returned by every failing endpoint."""

    message: str
    errors: list[dict] | None = None
