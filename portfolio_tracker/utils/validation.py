"""Symbol normalization utilities."""


def normalize_symbol(symbol: str) -> str:
    """
    Normalize a ticker symbol as the user types it.

    Only upper-cases the input; whitespace is kept so length validation
    sees exactly what the user entered.

    Args:
        symbol: The raw symbol

    Returns:
        Uppercase symbol
    """
    return symbol.upper()
