"""Immutable view state for the user list screen."""

from collections.abc import Iterable
from typing import Literal

from pydantic import BaseModel, ConfigDict

from common.models.user import User

Phase = Literal["idle", "loading", "success", "error"]


class UsersState(BaseModel):
    """Snapshot of the user list screen.

    Every transition returns a new state; instances are never mutated.
    """

    phase: Phase = "idle"
    users: tuple[User, ...] = ()
    error: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def loading(self) -> bool:
        return self.phase == "loading"

    def start_loading(self) -> "UsersState":
        return self.model_copy(update={"phase": "loading", "error": None})

    def loaded(self, users: Iterable[User]) -> "UsersState":
        return self.model_copy(update={"phase": "success", "users": tuple(users), "error": None})

    def failed(self, message: str) -> "UsersState":
        return self.model_copy(update={"phase": "error", "error": message})

    def user_added(self, user: User) -> "UsersState":
        return self.model_copy(update={"users": (*self.users, user)})

    def add_failed(self, message: str) -> "UsersState":
        return self.model_copy(update={"phase": "error", "error": message})
