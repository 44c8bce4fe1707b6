# app/adapters/outbound/persistence/repositories/access_repository.py (async version)

"""
Repository for access kinds.
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import Access
from app.application.dtos.access_dto import AccessCreate, AccessUpdate
from app.application.ports.outbound import IAccessRepository
from app.domain.exceptions import DatabaseOperationException


class AsyncAccessCRUD(AsyncCRUDBase[Access, AccessCreate, AccessUpdate], IAccessRepository[Access]):
    """
    Async implementation of CRUD repository for the Access entity.
    """

    async def get_by_name(self, db: AsyncSession, access_name: str) -> Optional[Access]:
        """
        Find the first access kind with the given name.

        Names are not unique at the database level, so the lowest id wins.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(Access).where(Access.access_name == access_name).order_by(Access.id).limit(1)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching access by name '{access_name}': {e}")
            raise DatabaseOperationException(
                detail="Error fetching access by name",
                original_error=e
            )


# Singleton instance
access_repository = AsyncAccessCRUD(Access)
