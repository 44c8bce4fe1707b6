# app/adapters/outbound/persistence/repositories/base_repository.py (async version)

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy import func, inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
import logging

from app.adapters.outbound.persistence.models.base_model import Base
from app.domain.exceptions import (
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    InvalidReferenceException,
    DatabaseOperationException
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)
# Define generic types for Pydantic DTOs
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

# Configure logger
logger = logging.getLogger(__name__)


class AsyncCRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Async base class for implementing the Repository pattern.

    Provides generic CRUD operations that can be used by any entity,
    keyed on the model's primary key column whatever its name.
    Includes consistent error handling and logging.

    Attributes:
        model: SQLAlchemy model class
        pk: Primary key column of the model
        logger: Configured logger for the class
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize the repository with an SQLAlchemy model.

        Args:
            model: SQLAlchemy model class associated with this repository
        """
        self.model = model
        mapper = sa_inspect(model)
        self.pk = mapper.primary_key[0]
        self.pk_attr = mapper.get_property_by_column(self.pk).key
        self.columns = [attr.key for attr in mapper.column_attrs]
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    def _identity(self, db_obj: ModelType) -> Any:
        return getattr(db_obj, self.pk_attr)

    def _translate_integrity_error(self, e: IntegrityError, action: str):
        """
        Map an IntegrityError to the matching domain exception.

        Foreign key violations mean a referenced row is missing;
        unique violations mean the row already exists.
        """
        error_msg = str(e).lower()
        if 'foreign key' in error_msg:
            self.logger.warning(f"Invalid reference {action} {self.model.__name__}: {str(e)}")
            return InvalidReferenceException(
                detail=f"Could not {action} {self.model.__name__}: referenced resource does not exist",
                original_error=e
            )
        if 'unique' in error_msg or 'duplicate' in error_msg:
            self.logger.warning(f"Uniqueness violation {action} {self.model.__name__}: {str(e)}")
            return ResourceAlreadyExistsException(
                detail=f"{self.model.__name__} with these data already exists"
            )
        self.logger.error(f"Integrity error {action} {self.model.__name__}: {str(e)}")
        return DatabaseOperationException(original_error=e)

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Get an entity by primary key.

        Args:
            db: Async database session
            id: Primary key of the entity

        Returns:
            Entity found or None if it doesn't exist
        """
        try:
            query = select(self.model).where(self.pk == id)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__}",
                original_error=e
            )

    async def exists(self, db: AsyncSession, **filters) -> bool:
        """
        Check if an entity exists with the specified filters.

        Args:
            db: Async database session
            **filters: Filters in the format field=value

        Returns:
            True if it exists, False otherwise

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model)
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

            result = await db.execute(select(query.exists()))
            return bool(result.scalar())
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking existence of {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error checking existence of {self.model.__name__}",
                original_error=e
            )

    async def get_multi(
            self, db: AsyncSession, *, skip: int = 0, limit: int = 100, **filters
    ) -> List[ModelType]:
        """
        Get multiple entities ordered by primary key, with pagination and optional filters.

        Args:
            db: Async database session
            skip: Number of records to skip (for pagination)
            limit: Maximum number of records to return
            **filters: Additional filters in the format field=value

        Returns:
            List of found entities

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model)

            for field, value in filters.items():
                if hasattr(self.model, field) and value is not None:
                    query = query.where(getattr(self.model, field) == value)

            query = query.order_by(self.pk).offset(skip).limit(limit)
            result = await db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error listing {self.model.__name__}s",
                original_error=e
            )

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        Create a new entity.

        Args:
            db: Async database session
            obj_in: Creation schema with entity data

        Returns:
            Newly created entity

        Raises:
            InvalidReferenceException: If a foreign key points to a missing row
            ResourceAlreadyExistsException: If the entity already exists
            DatabaseOperationException: If another database error occurs
        """
        try:
            db_obj = self.model(**obj_in.model_dump())

            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} created with ID: {self._identity(db_obj)}")
            return db_obj

        except IntegrityError as e:
            await db.rollback()
            raise self._translate_integrity_error(e, "create")

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error creating {self.model.__name__}",
                original_error=e
            )

    async def update(
            self, db: AsyncSession, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Update an existing entity.

        Only fields present in ``obj_in`` are written; for a schema that
        means the fields explicitly set by the caller.

        Args:
            db: Async database session
            db_obj: Model instance to update
            obj_in: Update schema or dictionary with data to update

        Returns:
            Updated entity

        Raises:
            InvalidReferenceException: If a foreign key points to a missing row
            ResourceAlreadyExistsException: If the update violates a uniqueness constraint
            DatabaseOperationException: If another database error occurs
        """
        try:
            if isinstance(obj_in, dict):
                update_data = obj_in
            else:
                update_data = obj_in.model_dump(exclude_unset=True)

            for field in self.columns:
                if field in update_data:
                    setattr(db_obj, field, update_data[field])

            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} with ID {self._identity(db_obj)} updated")
            return db_obj

        except IntegrityError as e:
            await db.rollback()
            raise self._translate_integrity_error(e, "update")

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error updating {self.model.__name__}",
                original_error=e
            )

    async def remove(self, db: AsyncSession, *, id: Any) -> ModelType:
        """
        Remove an entity by primary key.

        Args:
            db: Async database session
            id: Primary key of the entity to remove

        Returns:
            Removed entity

        Raises:
            ResourceNotFoundException: If the entity doesn't exist
            DatabaseOperationException: If an error occurs during removal
        """
        try:
            obj = await self.get(db, id)
            if not obj:
                raise ResourceNotFoundException(
                    detail=f"{self.model.__name__} not found",
                    resource_id=id
                )

            await db.delete(obj)
            await db.commit()

            self.logger.info(f"{self.model.__name__} with ID {id} removed")
            return obj

        except IntegrityError as e:
            await db.rollback()
            self.logger.error(f"Integrity error removing {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Cannot remove {self.model.__name__} as it is being used by other entities",
                original_error=e
            )

        except ResourceNotFoundException:
            await db.rollback()
            raise

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error removing {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error removing {self.model.__name__}",
                original_error=e
            )

    async def count(self, db: AsyncSession, **filters) -> int:
        """
        Count the number of entities matching the filters.

        Args:
            db: Async database session
            **filters: Filters in the format field=value

        Returns:
            Number of entities matching the filters

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(func.count()).select_from(self.model)

            for field, value in filters.items():
                if hasattr(self.model, field) and value is not None:
                    query = query.where(getattr(self.model, field) == value)

            result = await db.execute(query)
            return result.scalar_one()

        except SQLAlchemyError as e:
            self.logger.error(f"Error counting {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error counting {self.model.__name__}s",
                original_error=e
            )
