# app/adapters/inbound/api/v1/endpoints/access_endpoint.py (async version)

import logging
from typing import List
from fastapi import APIRouter, Depends, Path, Response, status

from app.adapters.inbound.api.deps import get_access_service
from app.application.use_cases.access_use_cases import AsyncAccessService
from app.application.dtos.access_dto import AccessCreate, AccessOutput, AccessUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/",
    response_model=List[AccessOutput],
    summary="List Access - List all access kinds",
    description="Returns every access kind ordered by ID.",
)
async def list_access(service: AsyncAccessService = Depends(get_access_service)):
    return await service.list_access()


@router.get(
    "/{access_id}",
    response_model=AccessOutput,
    summary="Get Access - Get an access kind by ID",
    responses={
        200: {
            "description": "Access kind",
            "content": {"application/json": {"example": {"id": 3, "access_name": "CreateUser"}}},
        },
        404: {
            "description": "Access kind not found",
            "content": {
                "application/json": {
                    "example": {"detail": "Access not found (ID: 42)", "code": "RESOURCE_NOT_FOUND"}
                }
            },
        },
    },
)
async def get_access(
        access_id: int = Path(..., ge=1, description="Access ID"),
        service: AsyncAccessService = Depends(get_access_service),
):
    return await service.get_access(access_id)


@router.post(
    "/",
    response_model=AccessOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Access - Create a new access kind",
)
async def create_access(
        data: AccessCreate,
        service: AsyncAccessService = Depends(get_access_service),
):
    return await service.create_access(data)


@router.put(
    "/{access_id}",
    response_model=AccessOutput,
    summary="Update Access - Rename an access kind",
)
async def update_access(
        data: AccessUpdate,
        access_id: int = Path(..., ge=1, description="Access ID"),
        service: AsyncAccessService = Depends(get_access_service),
):
    return await service.update_access(access_id, data)


@router.delete(
    "/{access_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Access - Delete an access kind",
    description="Deletes the access kind. Grants of this access kind are removed by cascade.",
)
async def delete_access(
        access_id: int = Path(..., ge=1, description="Access ID"),
        service: AsyncAccessService = Depends(get_access_service),
):
    await service.delete_access(access_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
