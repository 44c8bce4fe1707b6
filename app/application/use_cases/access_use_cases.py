# app/application/use_cases/access_use_cases.py (async version)

"""
Service for access kind management.
"""

import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import Access
from app.adapters.outbound.persistence.repositories.access_repository import access_repository
from app.application.dtos.access_dto import AccessCreate, AccessOutput, AccessUpdate
from app.application.ports.inbound import IAccessUseCase
from app.domain.exceptions import ResourceNotFoundException

# Configure logger
logger = logging.getLogger(__name__)


class AsyncAccessService(IAccessUseCase):
    """
    Service for the access lookup table.

    Deleting or renumbering an access kind cascades to its grants in the
    database; the service never touches user_access rows itself.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Initialize the service with a database session.

        Args:
            db_session: Active AsyncSession
        """
        self.db = db_session

    async def _get_access_by_id(self, access_id: int) -> Access:
        """
        Get an access kind by ID or raise an exception if it doesn't exist.

        Raises:
            ResourceNotFoundException: If the access kind is not found
        """
        access = await access_repository.get(self.db, id=access_id)
        if not access:
            logger.warning(f"Access not found: ID {access_id}")
            raise ResourceNotFoundException(
                detail="Access not found",
                resource_id=access_id
            )
        return access

    async def list_access(self) -> List[AccessOutput]:
        access_kinds = await access_repository.get_multi(self.db, limit=None)
        return [AccessOutput.model_validate(access) for access in access_kinds]

    async def get_access(self, access_id: int) -> AccessOutput:
        access = await self._get_access_by_id(access_id)
        return AccessOutput.model_validate(access)

    async def create_access(self, data: AccessCreate) -> AccessOutput:
        access = await access_repository.create(self.db, obj_in=data)
        logger.info(f"Access '{access.access_name}' created with ID {access.id}")
        return AccessOutput.model_validate(access)

    async def update_access(self, access_id: int, data: AccessUpdate) -> AccessOutput:
        access = await self._get_access_by_id(access_id)
        access = await access_repository.update(self.db, db_obj=access, obj_in=data)
        return AccessOutput.model_validate(access)

    async def delete_access(self, access_id: int) -> None:
        await access_repository.remove(self.db, id=access_id)
        logger.info(f"Access {access_id} deleted together with its grants")
