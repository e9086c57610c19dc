"""Pydantic schemas for identity API request/response validation."""

from datetime import datetime

from pydantic import Field

from libhub.domain.identity.entities.user import User
from libhub.infrastructure.common.schemas.camel_model import CamelModel


class UserRegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=8, max_length=128)


class UserResponse(CamelModel):
    """Public view of a user; the password hash is never exposed."""

    id: int
    username: str
    email: str
    role: str
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.value,
            username=user.username,
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
        )
