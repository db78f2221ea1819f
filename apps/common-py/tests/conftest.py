"""Pytest configuration for common-py tests."""

from collections.abc import Iterator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from common.infra.db import create_db_engine, create_session_factory, init_db


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Fresh in-memory database with the schema created."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)
