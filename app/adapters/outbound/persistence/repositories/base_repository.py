# app/adapters/outbound/persistence/repositories/base_repository.py (async version)

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.future import select
import logging

from app.adapters.outbound.persistence.models.base_model import Base
from app.domain.exceptions import DatabaseOperationException

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class AsyncCRUDBase(Generic[ModelType]):
    """
    Async base class for implementing the Repository pattern.

    Every statement goes through SQLAlchemy, so values are always sent as
    bound parameters. Driver errors are logged with their detail and
    re-raised as DatabaseOperationException.

    Attributes:
        model: SQLAlchemy model class
        logger: Configured logger for the class
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize the repository with an SQLAlchemy model.

        Args:
            model: SQLAlchemy model class associated with this repository
        """
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Get an entity by ID, always reading the current row from the store.

        Args:
            db: Async database session
            id: ID of the entity

        Returns:
            Entity found or None if it doesn't exist
        """
        try:
            query = (
                select(self.model)
                .where(self.model.id == id)
                .execution_options(populate_existing=True)
            )
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__}",
                original_error=e
            )

    async def get_by_field(self, db: AsyncSession, field_name: str, value: Any) -> Optional[ModelType]:
        """
        Get an entity by the value of a specific field.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model).where(getattr(self.model, field_name) == value)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with {field_name}={value}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__} by {field_name}",
                original_error=e
            )

    async def get_all(self, db: AsyncSession) -> List[ModelType]:
        """
        Get every entity, ordered by ID. No pagination.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model).order_by(self.model.id)
            result = await db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error listing {self.model.__name__}s",
                original_error=e
            )

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> ModelType:
        """
        Insert a new entity and commit.

        Args:
            db: Async database session
            obj_in: Column values of the new row

        Returns:
            Newly created entity, with its store-assigned ID

        Raises:
            DatabaseOperationException: If the insert fails for any reason,
                including a uniqueness violation
        """
        try:
            db_obj = self.model(**obj_in)

            db.add(db_obj)
            await db.commit()

            self.logger.info(f"{self.model.__name__} created with ID: {db_obj.id}")
            return db_obj

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error creating {self.model.__name__}",
                original_error=e
            )

    async def remove(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        Delete an entity that was previously loaded and commit.

        Raises:
            DatabaseOperationException: If an error occurs during removal
        """
        try:
            await db.delete(db_obj)
            await db.commit()

            self.logger.info(f"{self.model.__name__} with ID {db_obj.id} removed")
            return db_obj

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error removing {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error removing {self.model.__name__}",
                original_error=e
            )
