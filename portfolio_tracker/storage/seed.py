"""Demo records loaded into a fresh store."""
from datetime import UTC, datetime

DEMO_USER_ID = 1

DEMO_STOCKS = [
    {
        "symbol": "AAPL",
        "name": "Apple Inc.",
        "price": "173.50",
        "change": "4.12",
        "change_percent": "2.43",
        "volume": 45200000,
        "market_cap": "$2.7T",
    },
    {
        "symbol": "MSFT",
        "name": "Microsoft Corporation",
        "price": "378.85",
        "change": "-2.15",
        "change_percent": "-0.56",
        "volume": 22100000,
        "market_cap": "$2.8T",
    },
    {
        "symbol": "GOOGL",
        "name": "Alphabet Inc.",
        "price": "138.21",
        "change": "1.87",
        "change_percent": "1.37",
        "volume": 28700000,
        "market_cap": "$1.7T",
    },
    {
        "symbol": "TSLA",
        "name": "Tesla, Inc.",
        "price": "248.42",
        "change": "-5.33",
        "change_percent": "-2.10",
        "volume": 98400000,
        "market_cap": "$789B",
    },
    {
        "symbol": "NVDA",
        "name": "NVIDIA Corporation",
        "price": "495.22",
        "change": "12.45",
        "change_percent": "2.58",
        "volume": 41300000,
        "market_cap": "$1.2T",
    },
]

DEMO_PORTFOLIO = {
    "user_id": DEMO_USER_ID,
    "total_value": "127842.50",
    "day_change": "2847.30",
    "day_change_percent": "2.28",
    "total_gain_loss": "18420.75",
    "total_gain_loss_percent": "16.84",
}

DEMO_TRANSACTIONS = [
    {
        "user_id": DEMO_USER_ID,
        "type": "buy",
        "symbol": "AAPL",
        "shares": 50,
        "price": "168.20",
        "total": "8410.00",
        "created_at": datetime(2024, 1, 8, 14, 30, tzinfo=UTC),
    },
    {
        "user_id": DEMO_USER_ID,
        "type": "sell",
        "symbol": "TSLA",
        "shares": 10,
        "price": "251.90",
        "total": "2519.00",
        "created_at": datetime(2024, 1, 9, 15, 45, tzinfo=UTC),
    },
    {
        "user_id": DEMO_USER_ID,
        "type": "watch",
        "symbol": "NVDA",
        "shares": 0,
        "price": "482.77",
        "total": "0.00",
        "created_at": datetime(2024, 1, 10, 10, 5, tzinfo=UTC),
    },
]
