# app/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client.
"""

import re
import time
import logging
import traceback
from typing import Optional, Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.orm.exc import NoResultFound
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.exceptions import DomainException
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# Domain 'internal_code' -> HTTP status
DOMAIN_STATUS_CODES = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVALID_REFERENCE": status.HTTP_409_CONFLICT,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Common patterns for different databases
CONSTRAINT_PATTERNS = [
    r'constraint "(.*?)"',
    r'CONSTRAINT (.*?) FOREIGN KEY',
    r'CONSTRAINT `(.*?)`',
    r'UNIQUE constraint failed: (.*)',
    r'violates unique constraint "(.*?)"',
    r'duplicate key value violates unique constraint "(.*?)"'
]


def _client(request: Request) -> str:
    return request.client.host if request.client else 'N/A'


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            logger.warning(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | Details: {exc.details} | "
                f"Path: {request.url.path}"
            )
            status_code = DOMAIN_STATUS_CODES.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
            if status_code >= 500 and settings.ENVIRONMENT == "production":
                detail = "Internal database error"
            else:
                detail = str(exc)

            return JSONResponse(
                status_code=status_code,
                content={
                    "detail": detail,
                    "code": exc.internal_code,
                }
            )

        except IntegrityError as exc:
            error_info = str(exc)
            constraint_name = self._extract_constraint_name(error_info)

            if settings.ENVIRONMENT == "production":
                error_message = "Database integrity error"
                logger.error(
                    f"Integrity error: Type={type(exc).__name__} | "
                    f"Constraint={constraint_name or 'N/A'} | "
                    f"Path: {request.url.path} | Client: {_client(request)}"
                )
            else:
                error_message = error_info
                logger.error(
                    f"Integrity error: {error_info} | "
                    f"Constraint={constraint_name or 'N/A'} | "
                    f"Path: {request.url.path} | Client: {_client(request)}"
                )

            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={
                    "detail": error_message,
                    "code": f"INTEGRITY_ERROR{f'_{constraint_name}' if constraint_name else ''}"
                }
            )

        except NoResultFound as exc:
            logger.warning(f"Resource not found: {str(exc)} | Path: {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={
                    "detail": "Resource not found",
                    "code": "RESOURCE_NOT_FOUND"
                }
            )

        except SQLAlchemyError as exc:
            if settings.ENVIRONMENT == "production":
                error_message = "Internal database error"
                logger.error(
                    f"Database error: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | Client: {_client(request)}"
                )
            else:
                error_message = str(exc)
                logger.error(
                    f"Database error: {str(exc)} | "
                    f"Path: {request.url.path} | Client: {_client(request)}"
                )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "DATABASE_ERROR"
                }
            )

        except ValueError as exc:
            logger.warning(
                f"Validation error: {str(exc)} | "
                f"Path: {request.url.path} | Client: {_client(request)}"
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "detail": str(exc),
                    "code": "VALIDATION_ERROR"
                }
            )

        except Exception as exc:
            if settings.ENVIRONMENT == "production":
                error_message = "Internal server error"
                logger.exception(
                    f"Unhandled exception: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | Client: {_client(request)}"
                )
            else:
                error_message = str(exc)
                logger.exception(
                    f"Unhandled exception: {str(exc)} | "
                    f"Path: {request.url.path} | Client: {_client(request)}\n"
                    f"Traceback: {traceback.format_exc()}"
                )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )

    def _extract_constraint_name(self, error_message: str) -> Optional[str]:
        """
        Attempts to extract the constraint name from an integrity error message.

        Args:
            error_message: The complete error message

        Returns:
            The constraint name or None if not found
        """
        for pattern in CONSTRAINT_PATTERNS:
            match = re.search(pattern, error_message)
            if match:
                return match.group(1)
        return None
