"""FastAPI documentation configuration and metadata."""

API_TITLE = "Portfolio Tracker API"
API_VERSION = "1.0.0"
API_DESCRIPTION = """
## Portfolio Tracker API

Backend for a small portfolio-tracking application: a watchlist of stocks,
a per-user portfolio summary and a per-user transaction history.

### Error format

Every failing request returns a JSON body with a `message`. Validation
failures (400) also carry an `errors` list with one entry per offending field:

```json
{"message": "Invalid stock data",
 "errors": [{"field": "symbol", "message": "Symbol is required", "code": "string_too_short"}]}
```

Decimal quantities (`price`, `change`, `changePercent`, `marketCap`) are
exchanged as strings so their formatting is preserved.
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Liveness and readiness probes"},
    {"name": "stocks", "description": "Watchlist stocks: list and create"},
    {"name": "portfolio", "description": "Per-user portfolio and transaction history"},
]
