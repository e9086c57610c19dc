"""Mapper for Book ORM ↔ Domain conversion."""

from libhub.domain.catalog.entities.book import Book
from libhub.domain.common.value_objects.ids import BookId
from libhub.models import Book as BookORM
from libhub.utils import ensure_utc, ensure_utc_optional


class BookMapper:
    """Mapper for Book ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BookORM) -> Book:
        return Book.create_with_id(
            id=BookId(orm_model.id),
            isbn=orm_model.isbn,
            title=orm_model.title,
            author=orm_model.author,
            total_copies=orm_model.total_copies,
            available_copies=orm_model.available_copies,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc_optional(orm_model.updated_at),
            genre=orm_model.genre,
            description=orm_model.description,
        )

    def to_orm(self, domain_entity: Book, orm_model: BookORM | None = None) -> BookORM:
        """
        Convert domain entity to ORM model.

        Updating an existing row copies metadata only. Copy counters of a
        persisted book are written by the inventory ledger through
        apply_stock.
        """
        if orm_model:
            orm_model.title = domain_entity.title
            orm_model.author = domain_entity.author
            orm_model.genre = domain_entity.genre
            orm_model.description = domain_entity.description
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return BookORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            isbn=domain_entity.isbn,
            title=domain_entity.title,
            author=domain_entity.author,
            genre=domain_entity.genre,
            description=domain_entity.description,
            total_copies=domain_entity.total_copies,
            available_copies=domain_entity.available_copies,
            created_at=domain_entity.created_at,
        )

    def apply_stock(self, domain_entity: Book, orm_model: BookORM) -> BookORM:
        orm_model.total_copies = domain_entity.total_copies
        orm_model.available_copies = domain_entity.available_copies
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
