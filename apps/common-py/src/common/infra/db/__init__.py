"""Relational store access."""

from common.infra.db.engine import create_db_engine, create_session_factory, init_db, ping
from common.infra.db.orm import Base, UserRecord
from common.infra.db.unit_of_work import UnitOfWork

__all__ = [
    "Base",
    "UnitOfWork",
    "UserRecord",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "ping",
]
