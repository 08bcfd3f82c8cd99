"""Add-stock submission flow.

State machine: ``idle -> submitting -> success | failure``. A submission
validates the form locally first and only reaches the network when the
form is valid. While a request is in flight further submissions are
refused. On success the stock list query is invalidated, the form reset
and the input surface closed; on failure the form keeps its values so the
user can correct them and submit again.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from portfolio_tracker.client.api_client import STOCKS_PATH, PortfolioApiClient
from portfolio_tracker.client.cache import QueryCache
from portfolio_tracker.client.forms import StockForm
from portfolio_tracker.core.exceptions import ApiResponseError, NetworkError
from portfolio_tracker.schemas.stock import StockResponse
from portfolio_tracker.utils.structured_logging import get_logger

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Stock added to watchlist successfully!"
FAILURE_MESSAGE = "Failed to add stock to watchlist. Please try again."


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Notification:
    """A transient message shown to the user."""

    title: str
    description: str
    variant: str = "default"


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class InputSurface(Protocol):
    """The dialog or panel hosting the form."""

    def close(self) -> None: ...


class AddStockFlow:
    """Drives one add-stock form from input to a stored stock."""

    def __init__(
        self,
        api: PortfolioApiClient,
        cache: QueryCache,
        notifier: Notifier,
        surface: InputSurface,
        form: StockForm | None = None,
    ):
        self.api = api
        self.cache = cache
        self.notifier = notifier
        self.surface = surface
        self.form = form or StockForm()
        self.state = SubmissionState.IDLE
        self.last_error: Exception | None = None

    @property
    def can_submit(self) -> bool:
        """Whether the submit action is enabled."""
        return self.state is not SubmissionState.SUBMITTING

    async def submit(self) -> StockResponse | None:
        """Validate the form and, if valid, create the stock.

        Returns:
            The created stock, or None when validation failed, a request was
            already in flight, or the request failed
        """
        if not self.can_submit:
            logger.debug("Submit ignored while a request is in flight")
            return None

        result = self.form.validate()
        if not result.is_valid:
            logger.debug("Form invalid", fields=sorted(self.form.errors))
            return None

        self.state = SubmissionState.SUBMITTING
        self.last_error = None
        try:
            stock = await self.api.create_stock(result.record)
        except (ApiResponseError, NetworkError) as e:
            self._fail(e)
            return None
        except Exception as e:
            # The flow must not stay in SUBMITTING.
            logger.error("Unexpected error during stock submission", exc_info=e)
            self._fail(e)
            return None

        self._succeed(stock)
        return stock

    def _succeed(self, stock: StockResponse) -> None:
        self.state = SubmissionState.SUCCESS
        self.cache.invalidate(STOCKS_PATH)
        self.form.reset()
        self.surface.close()
        self.notifier.notify(Notification(title="Success", description=SUCCESS_MESSAGE))
        logger.info("Stock added", stock_id=stock.id, symbol=stock.symbol)

    def _fail(self, error: Exception) -> None:
        self.state = SubmissionState.FAILURE
        self.last_error = error
        self.notifier.notify(
            Notification(title="Error", description=FAILURE_MESSAGE, variant="destructive")
        )
        logger.warning("Stock submission failed", error=str(error))
