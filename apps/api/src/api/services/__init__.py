"""Service initialization and dependency injection."""

import logging
import threading
from collections.abc import Iterator

from api.config import Settings, get_settings
from common.infra.db import UnitOfWork, create_db_engine, create_session_factory
from common.services.user_service import SqlUserService, UserService
from fastapi import Depends
from sqlalchemy import Engine

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache = {}
_services_lock = threading.Lock()


def get_engine(settings: Settings = Depends(get_settings)) -> Engine:
    """Get the process-wide database engine.

    Args:
        settings: Application settings

    Returns:
        Engine instance
    """
    # Sync dependencies run in a thread pool; build the engine once
    with _services_lock:
        if "engine" not in _services_cache:
            if not settings.database_url:
                raise ValueError("DATABASE_URL is required")

            _services_cache["engine"] = create_db_engine(settings.database_url, echo=settings.database_echo)
            logger.info("Initialized database engine")

    return _services_cache["engine"]


def get_unit_of_work(engine: Engine = Depends(get_engine)) -> Iterator[UnitOfWork]:
    """Open a unit of work scoped to the current request.

    Args:
        engine: Database engine

    Yields:
        Active UnitOfWork, closed once the response is produced
    """
    with UnitOfWork(create_session_factory(engine)) as uow:
        yield uow


def get_user_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> UserService:
    """Get user service bound to the request's unit of work.

    Args:
        uow: Request scoped unit of work

    Returns:
        SqlUserService instance
    """
    return SqlUserService(uow)
