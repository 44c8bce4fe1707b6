# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for database access and application services.
"""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.database import get_db
from app.application.use_cases.access_use_cases import AsyncAccessService
from app.application.use_cases.user_access_use_cases import AsyncUserAccessService

########################################################################
# Database Session Management
########################################################################

# Alias kept for endpoint signatures
get_session = get_db


########################################################################
# Services
########################################################################

def get_access_service(db: AsyncSession = Depends(get_session)) -> AsyncAccessService:
    return AsyncAccessService(db)


def get_user_access_service(db: AsyncSession = Depends(get_session)) -> AsyncUserAccessService:
    return AsyncUserAccessService(db)


########################################################################
# Query validation
########################################################################

def allow_query_params(*names: str):
    """
    Builds a dependency that answers 400 for query parameters outside ``names``.
    """
    allowed = set(names)

    def _check(request: Request) -> None:
        unknown = sorted(set(request.query_params.keys()) - allowed)
        if unknown:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown query parameters: {', '.join(unknown)}",
            )

    return _check
