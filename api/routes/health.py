"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from shared.config import get_settings

from ..dependencies import get_db_engine

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse, responses={503: {"model": ReadinessResponse}})
def readiness_check(engine: Engine = Depends(get_db_engine)):
    """
    Readiness check endpoint.

    Runs a trivial query through the connection pool; 503 if the store is
    unreachable.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Readiness check failed", exc_info=True)
        body = ReadinessResponse(status="not_ready", database="unavailable")
        return JSONResponse(status_code=503, content=body.model_dump())
    return ReadinessResponse(status="ready", database="connected")
