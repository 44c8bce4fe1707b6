# app/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta todos os modelos SQLAlchemy do sistema,
facilitando a importação e uso em outros módulos.
"""

# Importar Base
from app.adapters.outbound.persistence.models.base_model import Base

# Tabela externa
from app.adapters.outbound.persistence.models.user_model import User

# Modelos de acesso
from app.adapters.outbound.persistence.models.access_model import Access
from app.adapters.outbound.persistence.models.user_access_model import UserAccess

__all__ = [
    "Base",
    "User",
    "Access",
    "UserAccess",
]
