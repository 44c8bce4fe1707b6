# app/application/use_cases/user_access_use_cases.py (async version)

"""
Service for user access grants.

This module implements the service for granting, checking, updating and
revoking access kinds for users.
"""

import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi_pagination import Page, Params
from fastapi_pagination.ext.sqlalchemy import apaginate

from app.adapters.outbound.persistence.models import UserAccess
from app.adapters.outbound.persistence.repositories.user_access_repository import user_access_repository
from app.application.dtos.user_access_dto import (
    AccessCheckOutput,
    UserAccessCreate,
    UserAccessOutput,
    UserAccessSearch,
    UserAccessUpdate,
)
from app.application.ports.inbound import IUserAccessUseCase
from app.domain.exceptions import ResourceNotFoundException

# Configure logger
logger = logging.getLogger(__name__)


class AsyncUserAccessService(IUserAccessUseCase):
    """
    Service for user access grants.

    Existence of the referenced user and access kind is enforced by the
    foreign keys; a violation surfaces as InvalidReferenceException from
    the repository.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Initialize the service with a database session.

        Args:
            db_session: Active AsyncSession
        """
        self.db = db_session

    async def _get_grant_by_id(self, permission_id: int) -> UserAccess:
        """
        Get a grant by ID or raise an exception if it doesn't exist.

        Raises:
            ResourceNotFoundException: If the grant is not found
        """
        grant = await user_access_repository.get(self.db, id=permission_id)
        if not grant:
            logger.warning(f"User access not found: ID {permission_id}")
            raise ResourceNotFoundException(
                detail="User access not found",
                resource_id=permission_id
            )
        return grant

    async def search_user_access(
            self, filters: UserAccessSearch, params: Optional[Params] = None
    ) -> Page[UserAccessOutput]:
        """
        Paginated search of grants.

        Args:
            filters: access_id / user_id / permission_level filters
            params: Pagination parameters

        Returns:
            Page of grants ordered by permission_id
        """
        query = user_access_repository.search_query(
            access_id=filters.access_id,
            user_id=filters.user_id,
            permission_level=filters.permission_level,
        )
        return await apaginate(
            self.db,
            query,
            params=params or Params(),
            transformer=lambda items: [UserAccessOutput.model_validate(item) for item in items],
        )

    async def check_access(self, user_id: int, access_id: int) -> AccessCheckOutput:
        has_access = await user_access_repository.has_access(self.db, user_id=user_id, access_id=access_id)
        logger.debug(f"Access check: user {user_id}, access {access_id} -> {has_access}")
        return AccessCheckOutput(user_id=user_id, access_id=access_id, has_access=has_access)

    async def grant_access(self, data: UserAccessCreate) -> UserAccessOutput:
        grant = await user_access_repository.create(self.db, obj_in=data)
        logger.info(f"Access {grant.access_id} granted to user {grant.user_id} (ID {grant.permission_id})")
        return UserAccessOutput.model_validate(grant)

    async def update_user_access(self, permission_id: int, data: UserAccessUpdate) -> UserAccessOutput:
        grant = await self._get_grant_by_id(permission_id)
        grant = await user_access_repository.update(self.db, db_obj=grant, obj_in=data)
        return UserAccessOutput.model_validate(grant)

    async def revoke_access(self, permission_id: int) -> None:
        await user_access_repository.remove(self.db, id=permission_id)
        logger.info(f"User access {permission_id} revoked")
