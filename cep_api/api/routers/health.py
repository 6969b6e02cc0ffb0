"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: cep_api.boundary, cep_api.configs
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from cep_api.api.deps.dependencies import get_settings_dependency
from cep_api.boundary.db import get_async_engine
from cep_api.configs import Settings

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(settings: Settings = Depends(get_settings_dependency)):
    """Storage health check: SELECT 1 against the database, or no-op for memory."""
    if settings.storage.backend.lower() == "memory":
        return HealthResponse(status="healthy", message="In-memory store")

    try:
        async with get_async_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error("Database health check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=HealthResponse(status="unhealthy", message="Database unreachable").model_dump(),
        )
    return HealthResponse(status="healthy", message="Database connection OK")
