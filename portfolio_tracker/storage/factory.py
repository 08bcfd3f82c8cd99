"""Storage backend selection."""
from portfolio_tracker.core.config import Settings
from portfolio_tracker.storage.base import Storage
from portfolio_tracker.storage.database import DatabaseStorage
from portfolio_tracker.storage.memory import MemoryStorage

STORAGE_BACKENDS = ("memory", "database")


def create_storage(settings: Settings) -> Storage:
    """Create the storage backend named by ``settings.storage_backend``.

    The database backend is returned without its schema; callers create
    tables and seed it during application startup.

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = settings.storage_backend.lower()

    if backend == "memory":
        return MemoryStorage(seed=settings.seed_demo_data)

    if backend == "database":
        from portfolio_tracker.core.database import get_session_factory

        return DatabaseStorage(get_session_factory())

    raise ValueError(
        f"Unknown storage backend '{settings.storage_backend}'. "
        f"Expected one of: {', '.join(STORAGE_BACKENDS)}"
    )
