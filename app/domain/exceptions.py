# app/domain/exceptions.py

"""
Exceções de domínio da aplicação.

Pure exceptions with an ``internal_code``; the HTTP layer translates
the code into a status (see AsyncExceptionMiddleware).
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base class for all domain exceptions."""

    internal_code = "DOMAIN_ERROR"

    def __init__(self, detail: str = "Domain error", details: Optional[Dict[str, Any]] = None):
        super().__init__(detail)
        self.detail = detail
        self.details = details or {}


class ResourceNotFoundException(DomainException):
    """Recurso não encontrado."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(f"{detail}{resource_info}")


class ResourceAlreadyExistsException(DomainException):
    """Recurso já existe."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Resource already exists", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(f"{detail}{resource_info}")


class InvalidReferenceException(DomainException):
    """A row references an access kind or user that does not exist."""

    internal_code = "INVALID_REFERENCE"

    def __init__(self, detail: str = "Referenced resource does not exist",
                 original_error: Optional[Exception] = None):
        super().__init__(detail)
        self.original_error = original_error


class DatabaseOperationException(DomainException):
    """Erro na operação de banco de dados."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(f"{detail}{error_info}")
        self.original_error = original_error

