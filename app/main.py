# app/main.py (async version)

import logging
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from contextlib import asynccontextmanager

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import engine

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.

    The schema is owned by the Alembic migrations (``alembic upgrade head``);
    the application never creates tables itself.
    """
    logger.info(f"Application starting up ({settings.ENVIRONMENT})...")

    yield

    logger.info("Application shutting down...")
    await engine.dispose()


# Create FastAPI instance
app = FastAPI(
    title="User Access",
    description="Access kinds and user access grants",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Middlewares
from app.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
)

app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_middleware(AsyncExceptionMiddleware)

# Routers
from app.adapters.inbound.api.v1.router import api_router as api_v1_router

app.include_router(api_v1_router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    return RedirectResponse(url="/docs")
