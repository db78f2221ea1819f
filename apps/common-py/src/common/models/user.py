"""User models shared by the API and its clients."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


class UserCreate(BaseModel):
    """Payload accepted when creating a user.

    Any client supplied ``id`` is ignored; the store assigns it.
    """

    name: str = Field(..., min_length=1, description="Full name of the user")
    email: str = Field(..., min_length=1, description="Email address of the user")
    created_at: datetime = Field(
        default_factory=_utcnow,
        alias="createdAt",
        description="Creation timestamp, stamped at construction when omitted",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "createdAt": "2025-01-01T12:00:00Z",
            }
        },
    )


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., description="Store assigned identifier")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "createdAt": "2025-01-01T12:00:00Z",
            }
        },
    )
