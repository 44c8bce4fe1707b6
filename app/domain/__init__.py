# app/domain/__init__.py

"""
Módulo principal para componentes do domínio da aplicação.

Este módulo exporta as exceções e os modelos do domínio.
"""

# Exportar todas as exceções para facilitar a importação
from app.domain.exceptions import (
    DomainException,               # Exceção base pura do domínio
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    InvalidReferenceException,
    DatabaseOperationException,
)

from app.domain.models.access_domain_model import (
    AccessName,
    DEFAULT_ACCESS_NAMES,
    PERMISSION_LEVEL_NULL,
    PERMISSION_LEVEL_NOT_NULL,
)
