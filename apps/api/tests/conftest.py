"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from api.main import app
from api.services import get_engine
from common.infra.db import UnitOfWork, create_db_engine, create_session_factory, init_db
from fastapi.testclient import TestClient
from sqlalchemy import Engine


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Fresh in-memory database with the schema created."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine: Engine) -> Iterator[TestClient]:
    """Create a FastAPI test client bound to the in-memory database."""
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def uow(engine: Engine) -> Iterator[UnitOfWork]:
    """Unit of work for arranging and inspecting the store directly."""
    with UnitOfWork(create_session_factory(engine)) as uow:
        yield uow
