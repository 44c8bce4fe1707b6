# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
CRUD (Create, Read, Update, Delete) module.

This module exports classes and instances of the repositories CRUD
for the access entities, implementing the Repository pattern.
"""

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.repositories.access_repository import (
    AsyncAccessCRUD,
    access_repository,
)
from app.adapters.outbound.persistence.repositories.user_access_repository import (
    AsyncUserAccessCRUD,
    user_access_repository,
)

__all__ = [
    # Classes
    "AsyncCRUDBase",
    "AsyncAccessCRUD",
    "AsyncUserAccessCRUD",

    # Instances
    "access_repository",
    "user_access_repository",
]
