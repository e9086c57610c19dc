"""Pydantic schemas for catalog API request/response validation."""

from datetime import datetime

from pydantic import Field

from libhub.domain.catalog.entities.book import Book
from libhub.domain.catalog.value_objects.stock_level import StockLevel
from libhub.infrastructure.common.schemas.camel_model import CamelModel


class BookDetailsBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255, description="Book title")
    author: str = Field(..., min_length=1, max_length=255, description="Book author")
    genre: str | None = Field(None, max_length=100)
    description: str | None = None


class BookCreate(BookDetailsBase):
    """Schema for adding a title to the catalog."""

    isbn: str = Field(..., min_length=1, max_length=13, description="ISBN-10 or ISBN-13")
    total_copies: int = Field(..., gt=0, description="Copies the library owns")


class BookUpdateRequest(BookDetailsBase):
    """Schema for replacing a book's metadata. Copy counters are not writable here."""


class BookResponse(CamelModel):
    id: int
    isbn: str
    title: str
    author: str
    genre: str | None = None
    description: str | None = None
    total_copies: int
    available_copies: int
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, book: Book) -> "BookResponse":
        return cls(
            id=book.id.value,
            isbn=book.isbn,
            title=book.title,
            author=book.author,
            genre=book.genre,
            description=book.description,
            total_copies=book.total_copies,
            available_copies=book.available_copies,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )


class AvailabilityResponse(CamelModel):
    is_available: bool


class StockUpdateRequest(CamelModel):
    """Signed change to available copies: negative takes, positive releases."""

    change_amount: int


class RestockRequest(CamelModel):
    total_copies: int = Field(..., gt=0)


class StockLevelResponse(CamelModel):
    book_id: int
    available_copies: int
    total_copies: int

    @classmethod
    def from_domain(cls, level: StockLevel) -> "StockLevelResponse":
        return cls(
            book_id=level.book_id.value,
            available_copies=level.available_copies,
            total_copies=level.total_copies,
        )
