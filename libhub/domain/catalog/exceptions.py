"""Catalog domain exceptions."""

from libhub.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)


class BookNotFoundError(EntityNotFoundError):
    """Raised when a book cannot be found."""

    def __init__(self, book_id: int) -> None:
        super().__init__("Book", book_id)
        self.book_id = book_id


class DuplicateIsbnError(BusinessRuleViolationError):
    """Raised when a second book is registered under an existing ISBN."""

    def __init__(self, isbn: str) -> None:
        super().__init__("unique_isbn", f"A book with ISBN {isbn} already exists")
        self.isbn = isbn


class OutOfStockError(DomainError):
    """Raised when a copy is requested but none are available."""

    def __init__(self, book_id: int) -> None:
        super().__init__(
            f"No copies of book {book_id} are available for loan", {"book_id": book_id}
        )
        self.book_id = book_id


class OverCapacityError(DomainError):
    """Raised when a copy is released but every copy is already on the shelf."""

    def __init__(self, book_id: int) -> None:
        super().__init__(
            f"Cannot increment stock of book {book_id} beyond its total copies",
            {"book_id": book_id},
        )
        self.book_id = book_id


class InventoryContentionError(DomainError):
    """Raised when a stock change keeps losing compare-and-swap races."""

    def __init__(self, book_id: int, attempts: int) -> None:
        super().__init__(
            f"Stock of book {book_id} changed concurrently {attempts} times, giving up",
            {"book_id": book_id, "attempts": attempts},
        )
        self.book_id = book_id
        self.attempts = attempts
