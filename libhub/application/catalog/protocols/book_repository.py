from typing import Protocol

from libhub.domain.catalog.entities.book import Book
from libhub.domain.common.value_objects.ids import BookId


class BookRepositoryProtocol(Protocol):
    def find_by_id(self, book_id: BookId) -> Book | None: ...

    def find_by_isbn(self, isbn: str) -> Book | None: ...

    def find_all(self, offset: int = 0, limit: int = 100) -> tuple[list[Book], int]: ...

    def save(self, book: Book) -> Book: ...

    def delete(self, book: Book) -> None: ...
