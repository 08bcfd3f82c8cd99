"""Client-side query cache with explicit invalidation signals.

Results are cached per query key (the request path, e.g. ``/api/stocks``).
A mutation that changes server state calls ``invalidate`` with the affected
key; the entry is dropped, subscribers receive a ``CacheInvalidated`` event
and the next ``fetch`` of that key goes back to the server.
"""
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from cachetools import TTLCache

from portfolio_tracker.utils.structured_logging import get_logger

logger = get_logger(__name__)

Loader = Callable[[], Awaitable[Any]]
Listener = Callable[["CacheInvalidated"], None]


@dataclass(frozen=True)
class CacheInvalidated:
    """Signal emitted when a cached query must be re-fetched."""

    key: str


class QueryCache:
    """In-memory cache of query results keyed by query key."""

    def __init__(self, maxsize: int = 128, ttl: float = 300):
        self._entries: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl)
        self._listeners: list[Listener] = []

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Any | None:
        return self._entries.get(key)

    async def fetch(self, key: str, loader: Loader) -> Any:
        """Return the cached value for ``key``, loading it on a miss."""
        if key in self._entries:
            return self._entries[key]

        logger.debug("Cache miss", key=key)
        value = await loader()
        self._entries[key] = value
        return value

    def invalidate(self, key: str) -> None:
        """Drop ``key`` and notify subscribers."""
        self._entries.pop(key, None)
        event = CacheInvalidated(key)
        logger.debug("Cache invalidated", key=key, listeners=len(self._listeners))
        for listener in list(self._listeners):
            listener(event)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for invalidation events.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
