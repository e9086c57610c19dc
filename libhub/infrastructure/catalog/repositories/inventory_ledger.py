"""
SQL-backed inventory ledger.

Every stock mutation is an optimistic compare-and-swap on books.version:
the row is read, the Book aggregate applies the change (and with it the
0 <= available <= total rule), and the UPDATE only matches if nobody
bumped the version in between. A lost race reloads and tries again.
"""

import logging
from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from libhub.domain.catalog.entities.book import Book
from libhub.domain.catalog.exceptions import BookNotFoundError, InventoryContentionError
from libhub.domain.catalog.value_objects.stock_level import StockLevel
from libhub.domain.common.value_objects.ids import BookId
from libhub.infrastructure.catalog.mappers.book_mapper import BookMapper
from libhub.models import Book as BookORM

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


class InventoryLedger:
    """Sole writer of books.total_copies and books.available_copies."""

    def __init__(self, db: Session, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> None:
        self.db = db
        self.max_attempts = max_attempts
        self.mapper = BookMapper()

    def get_stock_level(self, book_id: BookId) -> StockLevel | None:
        orm_model = self._load(book_id)
        if orm_model is None:
            return None
        return StockLevel(
            book_id=book_id,
            available_copies=orm_model.available_copies,
            total_copies=orm_model.total_copies,
        )

    def decrement(self, book_id: BookId) -> StockLevel:
        return self._mutate(book_id, lambda book: book.decrement_stock())

    def increment(self, book_id: BookId) -> StockLevel:
        return self._mutate(book_id, lambda book: book.increment_stock())

    def adjust(self, book_id: BookId, change_amount: int) -> StockLevel:
        return self._mutate(book_id, lambda book: book.adjust_stock(change_amount))

    def restock(self, book_id: BookId, total_copies: int) -> StockLevel:
        return self._mutate(book_id, lambda book: book.restock(total_copies))

    def _load(self, book_id: BookId) -> BookORM | None:
        # Always read the committed row, never a stale identity-map copy
        stmt = (
            select(BookORM)
            .where(BookORM.id == book_id.value)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def _mutate(self, book_id: BookId, operation: Callable[[Book], None]) -> StockLevel:
        for attempt in range(1, self.max_attempts + 1):
            try:
                return self._attempt(book_id, operation)
            except StaleDataError:
                self.db.rollback()
                logger.debug(
                    f"Stock of book {book_id.value} changed concurrently "
                    f"(attempt {attempt}/{self.max_attempts}), retrying"
                )
            except Exception:
                # The session is shared with the loan store, which still has to
                # record the outcome after a failed stock change
                self.db.rollback()
                raise

        logger.warning(f"Giving up stock change on book {book_id.value} after contention")
        raise InventoryContentionError(book_id.value, self.max_attempts)

    def _attempt(self, book_id: BookId, operation: Callable[[Book], None]) -> StockLevel:
        orm_model = self._load(book_id)
        if orm_model is None:
            raise BookNotFoundError(book_id.value)

        book = self.mapper.to_domain(orm_model)
        operation(book)

        self.mapper.apply_stock(book, orm_model)
        self.db.commit()
        return book.stock_level()
