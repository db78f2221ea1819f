"""Common services package."""

from common.services.user_service import SqlUserService, UserService

__all__ = [
    "SqlUserService",
    "UserService",
]
