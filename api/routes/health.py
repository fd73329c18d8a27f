"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from shared.database import ping_database

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/healthz", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Liveness check.

    Returns 200 if the API process is serving requests.
    """
    return HealthResponse(status="ok")


@router.get(
    "/readyz",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
def readiness_check():
    """
    Readiness check.

    Pings MongoDB; answers 503 if it is unreachable or not configured.
    """
    try:
        ping_database()
    except (PyMongoError, RuntimeError) as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(status="unavailable", database="disconnected").model_dump(),
        )
    return ReadinessResponse(status="ready", database="connected")
