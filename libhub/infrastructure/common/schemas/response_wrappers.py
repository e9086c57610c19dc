"""Common response wrapper schemas for API responses."""

from typing import Generic, TypeVar

from libhub.infrastructure.common.schemas.camel_model import CamelModel

T = TypeVar("T")


class MessageResponse(CamelModel):
    message: str


class PaginatedResponse(CamelModel, Generic[T]):
    """Generic pagination wrapper."""

    items: list[T]
    total: int
    offset: int
    limit: int
