"""Infrastructure layer for external communication."""

from common.infra.db import Base, UnitOfWork, UserRecord

__all__ = [
    "Base",
    "UnitOfWork",
    "UserRecord",
]
