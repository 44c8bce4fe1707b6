# app/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from app.adapters.inbound.api.v1.endpoints import access_endpoint, user_access_endpoint

api_router = APIRouter()

api_router.include_router(access_endpoint.router, prefix="/access", tags=["Access"])
api_router.include_router(user_access_endpoint.router, prefix="/user_access", tags=["User Access"])
