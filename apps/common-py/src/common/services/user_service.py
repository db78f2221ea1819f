"""User service with a relational (SQLAlchemy) implementation."""

import logging
from abc import ABC, abstractmethod
from datetime import UTC, datetime

from sqlalchemy import func

from common.infra.db.orm import UserRecord
from common.infra.db.unit_of_work import UnitOfWork
from common.models.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserService(ABC):
    """Abstract interface for user service."""

    @abstractmethod
    def add_user(self, user: UserCreate) -> User:
        """Add a user and return the stored record."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Get a user by ID."""
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users."""
        pass

    @abstractmethod
    def search_users(self, name: str) -> list[User]:
        """Search for users by name (partial match, case-insensitive).

        Args:
            name: Name or partial name to search for

        Returns:
            List of User objects matching the search term
        """
        pass


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_user(record: UserRecord) -> User:
    return User(
        id=record.id,
        name=record.name,
        email=record.email,
        created_at=_as_utc(record.created_at),
    )


class SqlUserService(UserService):
    """Relational implementation of UserService backed by a unit of work."""

    def __init__(self, uow: UnitOfWork) -> None:
        """Initialize the service.

        Args:
            uow: Active unit of work scoped to the current request
        """
        self.uow = uow

    def add_user(self, user: UserCreate) -> User:
        """Insert exactly one row and commit it."""
        record = UserRecord(name=user.name, email=user.email, created_at=_as_utc(user.created_at))
        self.uow.add(record)
        self.uow.save()
        logger.info("Created user %s", record.id)
        return _to_user(record)

    def get_user(self, user_id: int) -> User | None:
        """Get a user by ID."""
        record = self.uow.find(UserRecord, user_id)
        if record is None:
            logger.debug("User %s not found", user_id)
            return None
        return _to_user(record)

    def list_users(self) -> list[User]:
        """List all users."""
        return [_to_user(record) for record in self.uow.query(UserRecord)]

    def search_users(self, name: str) -> list[User]:
        """Search for users by name (partial match, case-insensitive).

        Args:
            name: Name or partial name to search for

        Returns:
            List of User objects matching the search term
        """
        if not name or not name.strip():
            return []

        # % and _ in the search term are matched literally
        term = name.strip().lower()
        records = self.uow.query(UserRecord, func.lower(UserRecord.name).contains(term, autoescape=True))
        return [_to_user(record) for record in records]
