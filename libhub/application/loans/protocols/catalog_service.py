from typing import Protocol

from libhub.domain.common.value_objects.ids import BookId


class CatalogServiceProtocol(Protocol):
    """
    The loans context's view of the catalog.

    Implementations translate every way the catalog can fail into domain
    errors: BookNotFoundError, OutOfStockError, OverCapacityError, or
    CatalogUnavailableError for anything transport related.
    """

    def is_book_available(self, book_id: BookId) -> bool: ...

    def update_book_stock(self, book_id: BookId, change_amount: int) -> None: ...
