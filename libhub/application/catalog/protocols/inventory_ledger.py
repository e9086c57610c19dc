from typing import Protocol

from libhub.domain.catalog.value_objects.stock_level import StockLevel
from libhub.domain.common.value_objects.ids import BookId


class InventoryLedgerProtocol(Protocol):
    """
    Sole writer of a book's copy counters.

    Every mutation is atomic per book id and either returns the resulting
    StockLevel or raises BookNotFoundError, OutOfStockError, OverCapacityError
    or InventoryContentionError without changing anything.
    """

    def get_stock_level(self, book_id: BookId) -> StockLevel | None: ...

    def decrement(self, book_id: BookId) -> StockLevel: ...

    def increment(self, book_id: BookId) -> StockLevel: ...

    def adjust(self, book_id: BookId, change_amount: int) -> StockLevel: ...

    def restock(self, book_id: BookId, total_copies: int) -> StockLevel: ...
