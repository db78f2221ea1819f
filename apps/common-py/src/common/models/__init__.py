"""Common models package."""

from common.models.user import User, UserCreate

__all__ = [
    "User",
    "UserCreate",
]
