"""Portfolio and transaction models."""
from sqlalchemy import Integer
from sqlalchemy import String
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column

from portfolio_tracker.models.base import Base


class Portfolio(Base):
    """Aggregated holdings and valuation for a single user."""

    __tablename__ = "portfolios"

    user_id: Mapped[int] = mapped_column(
        Integer, nullable=False, unique=True, index=True, doc="User who owns this portfolio"
    )
    total_value: Mapped[str] = mapped_column(String(32), nullable=False)
    day_change: Mapped[str] = mapped_column(String(32), nullable=False)
    day_change_percent: Mapped[str] = mapped_column(String(32), nullable=False)
    total_gain_loss: Mapped[str] = mapped_column(String(32), nullable=False)
    total_gain_loss_percent: Mapped[str] = mapped_column(String(32), nullable=False)


class Transaction(Base):
    """A trade or watchlist event in a user's history."""

    __tablename__ = "transactions"

    user_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True, doc="User who made the transaction"
    )
    type: Mapped[str] = mapped_column(String(10), nullable=False, doc="buy, sell or watch")
    symbol: Mapped[str] = mapped_column(String(5), nullable=False, index=True)
    shares: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    price: Mapped[str] = mapped_column(String(32), nullable=False)
    total: Mapped[str] = mapped_column(String(32), nullable=False)
