"""Dependency injection for FastAPI endpoints.

This module provides dependency functions for shared components such as the
storage backend and configuration settings.
"""
from typing import Annotated

from fastapi import Depends
from fastapi import Request

from portfolio_tracker.core.config import Settings, get_settings
from portfolio_tracker.storage.base import Storage

AppSettings = Annotated[Settings, Depends(get_settings)]


def get_storage(request: Request) -> Storage:
    """Get the storage backend attached to the running application.

    The backend is created once by ``create_app`` and shared by all requests.

    Example:
        ```python
        @router.get("/stocks")
        async def list_stocks(storage: StorageDep):
            return await storage.get_all_stocks()
        ```
    """
    return request.app.state.storage


StorageDep = Annotated[Storage, Depends(get_storage)]
