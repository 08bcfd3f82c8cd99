"""Base repository class providing generic CRUD operations with async support.

This module implements a generic repository pattern that provides common database
operations for all models, with error handling and logging.
"""
import builtins
import logging
from typing import Any
from typing import Generic
from typing import TypeVar

from sqlalchemy import asc
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.models.base import Base

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base exception for repository operations."""

    pass


class DatabaseError(RepositoryError):
    """Raised when a database operation fails."""

    pass


class BaseRepository(Generic[ModelType]):
    """Generic base repository providing common CRUD operations.

    Example:
        ```python
        class StockRepository(BaseRepository[Stock]):
            def __init__(self, session: AsyncSession):
                super().__init__(Stock, session)

        # Usage
        repo = StockRepository(session)
        stocks = await repo.list()
        ```
    """

    def __init__(self, model: type[ModelType], session: AsyncSession):
        """Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}Repository")

    async def create(self, **kwargs) -> ModelType:
        """Create a new entity.

        Args:
            **kwargs: Field values for the new entity

        Returns:
            Created model instance

        Raises:
            DatabaseError: If database operation fails
        """
        try:
            entity = self.model(**kwargs)
            self.session.add(entity)
            await self.session.flush()  # Get the ID without committing
            await self.session.refresh(entity)  # Refresh to get generated fields

            self.logger.info(f"Created {self.model.__name__} with id={entity.id}")
            return entity

        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise DatabaseError(f"Database error creating {self.model.__name__}: {str(e)}")

    async def list(
        self,
        offset: int = 0,
        limit: int | None = None,
        filters: dict[str, Any] | None = None,
    ) -> builtins.list[ModelType]:
        """List entities in insertion (id) order with optional equality filters.

        Args:
            offset: Number of records to skip
            limit: Maximum number of records to return (None for all)
            filters: Dictionary of field filters

        Returns:
            List of model instances

        Raises:
            DatabaseError: If database operation fails
        """
        try:
            query = select(self.model)

            if filters:
                for field, value in filters.items():
                    if hasattr(self.model, field):
                        query = query.where(getattr(self.model, field) == value)

            query = query.order_by(asc(self.model.id)).offset(offset)
            if limit is not None:
                query = query.limit(limit)

            result = await self.session.execute(query)
            entities = result.scalars().all()

            self.logger.debug(
                f"Listed {len(entities)} {self.model.__name__} records "
                f"(offset={offset}, limit={limit})"
            )
            return builtins.list(entities)

        except SQLAlchemyError as e:
            self.logger.error(f"Failed to list {self.model.__name__}: {e}")
            raise DatabaseError(f"Database error listing {self.model.__name__}: {str(e)}")
