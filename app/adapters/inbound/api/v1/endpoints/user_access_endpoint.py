# app/adapters/inbound/api/v1/endpoints/user_access_endpoint.py (async version)

import logging
from typing import Optional
from fastapi_pagination import Page, Params
from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.adapters.inbound.api.deps import allow_query_params, get_user_access_service
from app.application.use_cases.user_access_use_cases import AsyncUserAccessService
from app.shared.utils.pagination import pagination_params
from app.application.dtos.user_access_dto import (
    AccessCheckOutput,
    UserAccessCreate,
    UserAccessOutput,
    UserAccessSearch,
    UserAccessUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/",
    response_model=Page[UserAccessOutput],
    dependencies=[Depends(allow_query_params("access_id", "user_id", "permission_level", "page", "size"))],
    summary="Search User Access - Search grants",
    description=(
        "Returns a paginated list of grants. `permission_level` accepts `null` "
        "(no level set), `!null` (any level set) or an exact value. Unknown "
        "query parameters are rejected with 400."
    ),
)
async def search_user_access(
        access_id: Optional[int] = Query(None, ge=1, description="Filter by access kind"),
        user_id: Optional[int] = Query(None, ge=1, description="Filter by user"),
        permission_level: Optional[str] = Query(None, max_length=255, description="Filter by permission level"),
        params: Params = Depends(pagination_params),
        service: AsyncUserAccessService = Depends(get_user_access_service),
):
    filters = UserAccessSearch(access_id=access_id, user_id=user_id, permission_level=permission_level)
    return await service.search_user_access(filters, params=params)


@router.get(
    "/{user_id}/{access_id}",
    response_model=AccessCheckOutput,
    summary="Check Access - Check whether a user holds an access kind",
    responses={
        200: {
            "description": "Result of the check",
            "content": {
                "application/json": {"example": {"user_id": 7, "access_id": 3, "has_access": True}}
            },
        }
    },
)
async def check_access(
        user_id: int = Path(..., ge=1, description="User ID"),
        access_id: int = Path(..., ge=1, description="Access ID"),
        service: AsyncUserAccessService = Depends(get_user_access_service),
):
    return await service.check_access(user_id, access_id)


@router.post(
    "/",
    response_model=UserAccessOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Grant Access - Grant an access kind to a user",
    responses={
        409: {
            "description": "The user or the access kind does not exist",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Could not create UserAccess: referenced resource does not exist",
                        "code": "INVALID_REFERENCE",
                    }
                }
            },
        }
    },
)
async def grant_access(
        data: UserAccessCreate,
        service: AsyncUserAccessService = Depends(get_user_access_service),
):
    return await service.grant_access(data)


@router.put(
    "/{permission_id}",
    response_model=UserAccessOutput,
    summary="Update User Access - Update a grant",
)
async def update_user_access(
        data: UserAccessUpdate,
        permission_id: int = Path(..., ge=1, description="Grant ID"),
        service: AsyncUserAccessService = Depends(get_user_access_service),
):
    return await service.update_user_access(permission_id, data)


@router.delete(
    "/{permission_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Revoke Access - Delete a grant",
)
async def revoke_access(
        permission_id: int = Path(..., ge=1, description="Grant ID"),
        service: AsyncUserAccessService = Depends(get_user_access_service),
):
    await service.revoke_access(permission_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
