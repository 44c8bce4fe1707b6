# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

from sqlalchemy import Select

T = TypeVar('T')


class IRepository(Generic[T], ABC):
    """Generic async repository interface."""

    @abstractmethod
    async def get(self, db, id: Any) -> Optional[T]:
        """Get entity by primary key."""
        pass

    @abstractmethod
    async def get_multi(self, db, *, skip: int = 0, limit: int = 100, **filters) -> List[T]:
        """List entities with optional filters."""
        pass

    @abstractmethod
    async def create(self, db, *, obj_in) -> T:
        """Create a new entity."""
        pass

    @abstractmethod
    async def update(self, db, *, db_obj: T, obj_in) -> T:
        """Update an existing entity."""
        pass

    @abstractmethod
    async def remove(self, db, *, id: Any) -> T:
        """Delete an entity by primary key."""
        pass


class IAccessRepository(IRepository[T], ABC):
    """Access repository interface."""

    @abstractmethod
    async def get_by_name(self, db, access_name: str) -> Optional[T]:
        """Get access kind by name."""
        pass


class IUserAccessRepository(IRepository[T], ABC):
    """UserAccess repository interface."""

    @abstractmethod
    def search_query(
            self,
            access_id: Optional[int] = None,
            user_id: Optional[int] = None,
            permission_level: Optional[str] = None,
    ) -> Select:
        """Build the select statement for a grant search."""
        pass

    @abstractmethod
    async def has_access(self, db, user_id: int, access_id: int) -> bool:
        """Check whether the user holds the access kind."""
        pass
