"""Request rate limiting shared by the application and its routers."""
import os

from slowapi import Limiter
from slowapi.util import get_remote_address

from portfolio_tracker.core.config import get_settings

# Disable rate limiting in test environment to avoid test failures
if os.getenv("ENVIRONMENT") == "test":
    limiter = Limiter(key_func=get_remote_address, enabled=False)
else:
    limiter = Limiter(key_func=get_remote_address)


def create_stock_rate_limit() -> str:
    """Rate limit applied to stock creation, read from settings."""
    return get_settings().rate_limit_create_stock
