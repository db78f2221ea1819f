"""Engine and session factory construction for the relational store."""

import logging

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from common.config.database_config import DatabaseConfig
from common.infra.db.orm import Base

logger = logging.getLogger(__name__)


def _is_in_memory_sqlite(database_url: str) -> bool:
    return database_url in {"sqlite://", "sqlite:///:memory:"} or "mode=memory" in database_url


def create_db_engine(
    database_url: str | None = None,
    echo: bool | None = None,
    config: DatabaseConfig | None = None,
) -> Engine:
    """Create a SQLAlchemy engine for the configured database.

    SQLite connections are shared across threads because FastAPI runs sync
    dependencies in a worker pool. In-memory SQLite uses a single static
    connection so every session sees the same database.

    Args:
        database_url: SQLAlchemy database URL. If None, taken from configuration.
        echo: Log emitted SQL. If None, taken from configuration.
        config: Database configuration. If None, will load from environment.

    Returns:
        Engine instance
    """
    if database_url is None or echo is None:
        if config is None:
            from common.config.database_config import get_database_config

            config = get_database_config()
        database_url = database_url or config.database_url
        echo = config.database_echo if echo is None else echo

    kwargs: dict = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_in_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, echo=echo, **kwargs)
    logger.info("Created database engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to an engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables that don't exist yet."""
    Base.metadata.create_all(engine)
    logger.info("Database schema initialized (%s)", ", ".join(Base.metadata.tables))


def ping(engine: Engine) -> bool:
    """Check that the database accepts connections.

    Returns:
        True if a trivial query succeeds
    """
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    return True
