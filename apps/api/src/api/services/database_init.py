"""Database initialization service."""

import logging

from api.config import Settings
from api.services import get_engine
from common.infra.db import init_db

logger = logging.getLogger(__name__)


async def initialize_database(settings: Settings) -> None:
    """Create the schema during application startup.

    Args:
        settings: Application settings
    """
    try:
        init_db(get_engine(settings))
        logger.info("Database initialization completed successfully")
    except Exception as e:
        logger.error("Failed to initialize database: %s", e)
        if settings.environment == "production":
            raise
        # In development, log warning but allow app to continue
        logger.warning("Continuing without database initialization (development mode)")
