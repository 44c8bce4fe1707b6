# app/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

One line when the request arrives and one when the response leaves.
Error responses are logged at WARNING (4xx) or ERROR (5xx).
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)


def _response_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.
    Production logs omit query params, client address and timing.
    """

    async def dispatch(self, request: Request, call_next):
        verbose = settings.ENVIRONMENT != "production"
        route = f"{request.method} {request.url.path}"

        if verbose:
            query_params = dict(request.query_params)
            logger.info(
                f"Request: {route} | "
                f"Query: {query_params if query_params else 'N/A'} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
        else:
            logger.info(f"Request: {route}")

        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start_time

        message = f"Response: {response.status_code} for {route}"
        if verbose:
            message += f" | Time: {elapsed:.4f}s"
        logger.log(_response_level(response.status_code), message)

        return response
