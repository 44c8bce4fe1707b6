# app/adapters/outbound/persistence/repositories/user_access_repository.py (async version)

"""
Repository for user access grants.

This module implements the repository that performs database operations
on the user_access join table, implementing the IUserAccessRepository interface.
"""

from typing import Optional
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import UserAccess
from app.application.dtos.user_access_dto import UserAccessCreate, UserAccessUpdate
from app.application.ports.outbound import IUserAccessRepository
from app.domain.exceptions import DatabaseOperationException
from app.domain.models.access_domain_model import PERMISSION_LEVEL_NULL, PERMISSION_LEVEL_NOT_NULL


class AsyncUserAccessCRUD(
    AsyncCRUDBase[UserAccess, UserAccessCreate, UserAccessUpdate],
    IUserAccessRepository[UserAccess],
):
    """
    Async implementation of CRUD repository for the UserAccess entity.

    Extends AsyncCRUDBase with grant searches and access checks.
    """

    def search_query(
            self,
            access_id: Optional[int] = None,
            user_id: Optional[int] = None,
            permission_level: Optional[str] = None,
    ) -> Select:
        """
        Build the select statement for a grant search.

        Args:
            access_id: Only grants of this access kind
            user_id: Only grants of this user
            permission_level: "null" for grants without a level, "!null" for
                grants with any level, otherwise an exact match

        Returns:
            Select ordered by permission_id
        """
        query = select(UserAccess)

        if access_id is not None:
            query = query.where(UserAccess.access_id == access_id)
        if user_id is not None:
            query = query.where(UserAccess.user_id == user_id)

        if permission_level == PERMISSION_LEVEL_NULL:
            query = query.where(UserAccess.permission_level.is_(None))
        elif permission_level == PERMISSION_LEVEL_NOT_NULL:
            query = query.where(UserAccess.permission_level.is_not(None))
        elif permission_level is not None:
            query = query.where(UserAccess.permission_level == permission_level)

        return query.order_by(UserAccess.permission_id)

    async def has_access(self, db: AsyncSession, user_id: int, access_id: int) -> bool:
        """
        Check whether any grant gives the user the access kind.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(
                select(UserAccess)
                .where(UserAccess.user_id == user_id, UserAccess.access_id == access_id)
                .exists()
            )
            result = await db.execute(query)
            return bool(result.scalar())
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking access {access_id} for user {user_id}: {e}")
            raise DatabaseOperationException(
                detail="Error checking user access",
                original_error=e
            )


# Singleton instance
user_access_repository = AsyncUserAccessCRUD(UserAccess)
