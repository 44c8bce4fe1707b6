# app/application/dtos/user_access_dto.py

"""
Schemas para concessões de acesso a usuários.

Este módulo define os dtos Pydantic para validação e serialização
das linhas de user_access, incluindo busca e verificação de acesso.
"""

from typing import Optional
from pydantic import Field
from app.application.dtos.base_dto import CustomBaseModel


class UserAccessCreate(CustomBaseModel):
    """
    Schema para concessão de um tipo de acesso a um usuário.
    """
    access_id: int = Field(..., gt=0, description="ID of an existing access kind.")
    user_id: int = Field(..., gt=0, description="ID of an existing user.")
    permission_level: Optional[str] = Field(
        None,
        max_length=255,
        description="Optional qualifier of the grant. Stored as given.",
    )


class UserAccessUpdate(CustomBaseModel):
    """
    Schema para atualização de uma concessão.

    ``access_id`` e ``user_id`` são sempre substituídos. ``permission_level``
    só muda quando presente no payload; um ``null`` explícito o remove.
    """
    access_id: int = Field(..., gt=0)
    user_id: int = Field(..., gt=0)
    permission_level: Optional[str] = Field(None, max_length=255)


class UserAccessOutput(CustomBaseModel):
    permission_id: int
    access_id: int
    user_id: int
    permission_level: Optional[str] = None


class UserAccessSearch(CustomBaseModel):
    """
    Filtros para a listagem de concessões. ``None`` significa "não filtrar".

    permission_level aceita "null" (sem nível), "!null" (qualquer nível)
    ou um valor exato.
    """
    access_id: Optional[int] = None
    user_id: Optional[int] = None
    permission_level: Optional[str] = None


class AccessCheckOutput(CustomBaseModel):
    user_id: int
    access_id: int
    has_access: bool
