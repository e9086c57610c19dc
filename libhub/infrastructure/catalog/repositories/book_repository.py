"""Repository for Book domain entities."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from libhub.domain.catalog.entities.book import Book
from libhub.domain.catalog.exceptions import BookNotFoundError, DuplicateIsbnError
from libhub.domain.common.value_objects.ids import BookId
from libhub.infrastructure.catalog.mappers.book_mapper import BookMapper
from libhub.models import Book as BookORM

logger = logging.getLogger(__name__)


class BookRepository:
    """Domain-centric repository for Book persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def find_by_id(self, book_id: BookId) -> Book | None:
        stmt = select(BookORM).where(BookORM.id == book_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_isbn(self, isbn: str) -> Book | None:
        stmt = select(BookORM).where(BookORM.isbn == isbn)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self, offset: int = 0, limit: int = 100) -> tuple[list[Book], int]:
        """
        Get one page of books ordered by title.

        Returns:
            Tuple of (books on the page, total number of books)
        """
        total = self.db.execute(select(func.count()).select_from(BookORM)).scalar_one()
        stmt = select(BookORM).order_by(BookORM.title, BookORM.id).offset(offset).limit(limit)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(m) for m in orm_models], total

    def save(self, book: Book) -> Book:
        """
        Persist a book.

        Raises:
            DuplicateIsbnError: If another book already uses the ISBN
            BookNotFoundError: If an existing book vanished before the update
        """
        if book.id.value == 0:
            try:
                orm_model = self.mapper.to_orm(book)
                self.db.add(orm_model)
                self.db.commit()
                self.db.refresh(orm_model)
            except IntegrityError as e:
                self.db.rollback()
                if "isbn" in str(e.orig).lower():
                    raise DuplicateIsbnError(book.isbn) from e
                raise
            logger.info(f"Created book with isbn: {book.isbn} (id={orm_model.id})")
            return self.mapper.to_domain(orm_model)

        stmt = select(BookORM).where(BookORM.id == book.id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise BookNotFoundError(book.id.value)

        self.mapper.to_orm(book, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Updated book {book.id.value}")
        return self.mapper.to_domain(orm_model)

    def delete(self, book: Book) -> None:
        stmt = select(BookORM).where(BookORM.id == book.id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise BookNotFoundError(book.id.value)
        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted book {book.id.value}")
