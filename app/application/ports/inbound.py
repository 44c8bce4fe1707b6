# app/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List

from app.application.dtos.access_dto import AccessCreate, AccessOutput, AccessUpdate
from app.application.dtos.user_access_dto import (
    AccessCheckOutput,
    UserAccessCreate,
    UserAccessOutput,
    UserAccessSearch,
    UserAccessUpdate,
)


class IAccessUseCase(ABC):
    """Interface for access kind use cases."""

    @abstractmethod
    async def list_access(self) -> List[AccessOutput]:
        """List all access kinds."""
        pass

    @abstractmethod
    async def get_access(self, access_id: int) -> AccessOutput:
        """Get access kind by ID."""
        pass

    @abstractmethod
    async def create_access(self, data: AccessCreate) -> AccessOutput:
        """Create a new access kind."""
        pass

    @abstractmethod
    async def update_access(self, access_id: int, data: AccessUpdate) -> AccessOutput:
        """Rename an access kind."""
        pass

    @abstractmethod
    async def delete_access(self, access_id: int) -> None:
        """Delete an access kind and, by cascade, its grants."""
        pass


class IUserAccessUseCase(ABC):
    """Interface for user access use cases."""

    @abstractmethod
    async def search_user_access(self, filters: UserAccessSearch, params=None):
        """Paginated search of grants."""
        pass

    @abstractmethod
    async def check_access(self, user_id: int, access_id: int) -> AccessCheckOutput:
        """Check whether a user holds an access kind."""
        pass

    @abstractmethod
    async def grant_access(self, data: UserAccessCreate) -> UserAccessOutput:
        """Grant an access kind to a user."""
        pass

    @abstractmethod
    async def update_user_access(self, permission_id: int, data: UserAccessUpdate) -> UserAccessOutput:
        """Update a grant."""
        pass

    @abstractmethod
    async def revoke_access(self, permission_id: int) -> None:
        """Delete a grant."""
        pass
