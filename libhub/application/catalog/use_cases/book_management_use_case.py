"""
Book management use case.

Handles catalog CRUD and restocking. Stock movements caused by loans go
through InventoryUseCase instead.
"""

import logging

from libhub.application.catalog.protocols.book_repository import BookRepositoryProtocol
from libhub.application.catalog.protocols.inventory_ledger import InventoryLedgerProtocol
from libhub.domain.catalog.entities.book import Book
from libhub.domain.catalog.exceptions import BookNotFoundError, DuplicateIsbnError
from libhub.domain.common.value_objects.ids import BookId

logger = logging.getLogger(__name__)


class BookManagementUseCase:
    """Use case for catalog management operations."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        inventory_ledger: InventoryLedgerProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.inventory_ledger = inventory_ledger

    def create_book(
        self,
        isbn: str,
        title: str,
        author: str,
        total_copies: int,
        genre: str | None = None,
        description: str | None = None,
    ) -> Book:
        """
        Add a title to the catalog with every copy on the shelf.

        Raises:
            DuplicateIsbnError: If the ISBN is already catalogued
            ValidationError: If the metadata is invalid
        """
        if self.book_repository.find_by_isbn(isbn.strip()):
            raise DuplicateIsbnError(isbn.strip())

        book = Book.create(
            isbn=isbn,
            title=title,
            author=author,
            total_copies=total_copies,
            genre=genre,
            description=description,
        )
        book = self.book_repository.save(book)
        logger.info(f"Created book {book.title!r} (id={book.id.value}, copies={total_copies})")
        return book

    def get_book(self, book_id: int) -> Book:
        book = self.book_repository.find_by_id(BookId(book_id))
        if not book:
            raise BookNotFoundError(book_id)
        return book

    def list_books(self, offset: int = 0, limit: int = 100) -> tuple[list[Book], int]:
        """Return one page of the catalog and the total number of books."""
        return self.book_repository.find_all(offset=offset, limit=limit)

    def update_book(
        self,
        book_id: int,
        title: str,
        author: str,
        genre: str | None = None,
        description: str | None = None,
    ) -> Book:
        """
        Replace a book's descriptive metadata. Copy counters are not touched.

        Raises:
            BookNotFoundError: If the book does not exist
        """
        book = self.get_book(book_id)
        book.update_details(title=title, author=author, genre=genre, description=description)
        return self.book_repository.save(book)

    def delete_book(self, book_id: int) -> None:
        book = self.get_book(book_id)
        self.book_repository.delete(book)
        logger.info(f"Deleted book id={book_id}")

    def restock(self, book_id: int, total_copies: int) -> Book:
        """
        Change how many copies the library owns, keeping copies on loan.

        Raises:
            BookNotFoundError: If the book does not exist
            ValidationError: If total_copies is not positive
            InvariantViolationError: If fewer copies than are on loan would remain
        """
        self.inventory_ledger.restock(BookId(book_id), total_copies)
        return self.get_book(book_id)
