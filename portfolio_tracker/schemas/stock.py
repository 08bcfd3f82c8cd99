"""Schemas and validation rules for stock records.

The rules here are shared by the server (authoritative check before
persisting) and the client submission flow (fast feedback before any
request is sent), so both sides accept and reject the same payloads.
"""
from dataclasses import dataclass, field
from typing import Any

from pydantic import Field, ValidationError

from portfolio_tracker.schemas.base import CamelModel

MAX_SYMBOL_LENGTH = 5

# Field-level messages keyed by JSON key. Anything not listed falls back
# to the validator's own message.
_REQUIRED_MESSAGES = {
    "symbol": "Symbol is required",
    "name": "Company name is required",
    "price": "Price is required",
    "change": "Change is required",
    "changePercent": "Change percent is required",
    "volume": "Volume is required",
    "marketCap": "Market cap is required",
}
_RULE_MESSAGES = {
    ("symbol", "string_too_long"): f"Symbol must be {MAX_SYMBOL_LENGTH} characters or less",
    ("volume", "greater_than_equal"): "Volume must be positive",
}


class StockCreate(CamelModel):
    """Validated payload for creating a stock."""

    symbol: str = Field(
        ...,
        min_length=1,
        max_length=MAX_SYMBOL_LENGTH,
        description="Ticker symbol, upper-cased by the client",
    )
    name: str = Field(..., min_length=1, description="Company display name")
    price: str = Field(..., min_length=1, description="Last price as decimal text")
    change: str = Field(..., min_length=1, description="Absolute change as decimal text")
    change_percent: str = Field(..., min_length=1, description="Percent change as decimal text")
    volume: int = Field(..., ge=0, strict=True, description="Traded volume")
    market_cap: str = Field(..., min_length=1, description="Formatted market capitalisation")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "symbol": "AAPL",
                    "name": "Apple Inc.",
                    "price": "173.50",
                    "change": "4.12",
                    "changePercent": "2.4",
                    "volume": 45200000,
                    "marketCap": "$2.7T",
                }
            ]
        }
    }


class StockResponse(StockCreate):
    """A persisted stock, as returned by the API."""

    id: int = Field(..., description="Server-assigned identifier")


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""

    field: str
    message: str
    code: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code}


@dataclass(frozen=True)
class ValidationResult:
    """Tagged outcome of validating a stock payload.

    Exactly one of ``record`` and ``errors`` is meaningful: ``record`` is set
    when validation passed, ``errors`` is non-empty when it failed.
    """

    record: StockCreate | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.record is not None

    @classmethod
    def ok(cls, record: StockCreate) -> "ValidationResult":
        return cls(record=record)

    @classmethod
    def failed(cls, errors: list[FieldError]) -> "ValidationResult":
        return cls(errors=errors)


def _field_error(error: dict[str, Any]) -> FieldError:
    loc = error.get("loc") or ()
    name = str(loc[0]) if loc else "body"
    code = error["type"]

    if (name, code) in _RULE_MESSAGES:
        message = _RULE_MESSAGES[(name, code)]
    elif code in ("missing", "string_too_short") and name in _REQUIRED_MESSAGES:
        message = _REQUIRED_MESSAGES[name]
    else:
        message = error["msg"]

    return FieldError(field=name, message=message, code=code)


def validate_stock_payload(payload: Any) -> ValidationResult:
    """Validate an untyped stock creation payload.

    Args:
        payload: Decoded JSON body or form values; any type is accepted

    Returns:
        ValidationResult carrying either the validated record or the list
        of field errors (never raises for bad input)
    """
    try:
        record = StockCreate.model_validate(payload)
    except ValidationError as e:
        return ValidationResult.failed([_field_error(err) for err in e.errors()])
    return ValidationResult.ok(record)
