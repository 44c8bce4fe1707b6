# app/application/dtos/access_dto.py

"""
Schemas para tipos de acesso.
"""

from pydantic import Field
from app.application.dtos.base_dto import CustomBaseModel


class AccessCreate(CustomBaseModel):
    """Schema para criação de um tipo de acesso."""
    access_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Name of the permission/action, ex: 'GetUser'.",
    )


class AccessUpdate(CustomBaseModel):
    """Schema para renomear um tipo de acesso."""
    access_name: str = Field(..., min_length=1, max_length=255)


class AccessOutput(CustomBaseModel):
    id: int
    access_name: str
