"""Form state for the add-stock input surface."""
from typing import Any

from portfolio_tracker.schemas.stock import ValidationResult, validate_stock_payload
from portfolio_tracker.utils.validation import normalize_symbol

DEFAULT_VALUES: dict[str, Any] = {
    "symbol": "",
    "name": "",
    "price": "",
    "change": "",
    "changePercent": "",
    "volume": 0,
    "marketCap": "",
}


class StockForm:
    """Values and field errors of the add-stock form.

    Keys are the JSON field names sent to the API. The symbol is upper-cased
    as it is entered.
    """

    def __init__(self, **values: Any):
        self.values: dict[str, Any] = dict(DEFAULT_VALUES)
        self.errors: dict[str, str] = {}
        for field, value in values.items():
            self.set_value(field, value)

    def set_value(self, field: str, value: Any) -> None:
        if field == "symbol" and isinstance(value, str):
            value = normalize_symbol(value)
        self.values[field] = value
        self.errors.pop(field, None)

    def validate(self) -> ValidationResult:
        """Validate current values and record per-field messages."""
        result = validate_stock_payload(self.values)
        self.errors = {}
        for error in result.errors:
            # Keep the first message per field, as a form shows one at a time.
            self.errors.setdefault(error.field, error.message)
        return result

    def reset(self) -> None:
        """Restore the empty default values and clear errors."""
        self.values = dict(DEFAULT_VALUES)
        self.errors = {}

    @property
    def is_pristine(self) -> bool:
        return self.values == DEFAULT_VALUES
