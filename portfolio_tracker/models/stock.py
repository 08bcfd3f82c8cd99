"""Stock model for watchlist entries."""
from sqlalchemy import BigInteger
from sqlalchemy import CheckConstraint
from sqlalchemy import String
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column

from portfolio_tracker.models.base import Base


class Stock(Base):
    """A tracked stock quote.

    Decimal quantities are stored as text so the formatted value the user
    entered (e.g. "173.50") is returned unchanged.
    """

    __tablename__ = "stocks"

    symbol: Mapped[str] = mapped_column(
        String(5), nullable=False, index=True, doc="Ticker symbol (e.g., 'AAPL')"
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Company display name")

    price: Mapped[str] = mapped_column(String(32), nullable=False, doc="Last price")

    change: Mapped[str] = mapped_column(String(32), nullable=False, doc="Absolute change")

    change_percent: Mapped[str] = mapped_column(
        String(32), nullable=False, doc="Percent change"
    )

    volume: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0, doc="Trading volume (number of shares)"
    )

    market_cap: Mapped[str] = mapped_column(
        String(32), nullable=False, doc="Formatted market capitalisation (e.g., '$2.7T')"
    )

    __table_args__ = (CheckConstraint("volume >= 0", name="ck_stocks_volume_non_negative"),)
