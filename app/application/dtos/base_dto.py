# app/application/dtos/base_dto.py

"""
Classe base para dtos personalizados.

Este módulo define a classe base CustomBaseModel que estende
o BaseModel do Pydantic com a configuração comum a todos os dtos.
"""

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    """
    Modelo base personalizado para todos os dtos da aplicação.

    Lê objetos ORM diretamente (``from_attributes``) e remove espaços nas
    extremidades dos campos de texto.
    """
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)
