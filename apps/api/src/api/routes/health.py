"""Health check routes."""

import logging

from api.config import Settings, get_settings
from api.models.health import HealthCheckResponse
from api.services import get_engine
from common.infra.db import ping
from fastapi import APIRouter, Depends
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
def health_check(
    settings: Settings = Depends(get_settings),
    engine: Engine = Depends(get_engine),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and database reachability
    """
    try:
        ping(engine)
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        database = "unavailable"

    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        database=database,
    )
