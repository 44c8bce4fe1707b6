# app/application/use_cases/__init__.py (async version)

"""
Application service module.

This package contains the application services that implement the business logic
of the application, organized according to functional domains.
"""

from app.application.use_cases.access_use_cases import AsyncAccessService
from app.application.use_cases.user_access_use_cases import AsyncUserAccessService

__all__ = [
    "AsyncAccessService",
    "AsyncUserAccessService",
]
