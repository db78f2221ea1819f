"""Unit of work over a SQLAlchemy session."""

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any, Self

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from common.infra.db.orm import Base

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Scoped handle aggregating pending store operations until committed.

    One instance serves one request. Staged adds only become durable after
    ``save()``; reads may run before or after it. Leaving the ``with`` block
    rolls back anything uncommitted if an exception escaped and always closes
    the session.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None
        self._pending = 0

    def __enter__(self) -> Self:
        self._session = self._session_factory()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
        self.close()

    @property
    def session(self) -> Session:
        """The active session."""
        if self._session is None:
            raise RuntimeError("Unit of work is not active")
        return self._session

    def add(self, entity: Base) -> None:
        """Stage a new row."""
        self.session.add(entity)
        self._pending += 1

    def add_range(self, entities: Iterable[Base]) -> None:
        """Stage several new rows."""
        batch = list(entities)
        self.session.add_all(batch)
        self._pending += len(batch)

    def find[T: Base](self, model: type[T], ident: Any) -> T | None:
        """Look up a row by primary key.

        Returns:
            The row, or None if no row has that key
        """
        return self.session.get(model, ident)

    def query[T: Base](self, model: type[T], *criteria: Any, **filters: Any) -> list[T]:
        """Select rows matching SQL expression criteria and/or column equality filters."""
        stmt = select(model)
        if criteria:
            stmt = stmt.where(*criteria)
        if filters:
            stmt = stmt.filter_by(**filters)
        return list(self.session.scalars(stmt))

    def save(self) -> int:
        """Commit staged work.

        Returns:
            Number of rows staged since the last save
        """
        staged = self._pending
        self.session.commit()
        self._pending = 0
        logger.debug("Committed unit of work (%d staged rows)", staged)
        return staged

    def rollback(self) -> None:
        """Discard uncommitted work."""
        if self._session is not None:
            self._session.rollback()
        self._pending = 0

    def close(self) -> None:
        """Release the session."""
        if self._session is not None:
            self._session.close()
            self._session = None
