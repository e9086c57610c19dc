"""Availability checks and stock changes on catalogued books."""

import structlog

from libhub.application.catalog.protocols.inventory_ledger import InventoryLedgerProtocol
from libhub.domain.catalog.exceptions import BookNotFoundError
from libhub.domain.catalog.value_objects.stock_level import StockLevel
from libhub.domain.common.value_objects.ids import BookId

logger = structlog.get_logger(__name__)


class InventoryUseCase:
    """Use case backing the availability oracle and the stock endpoint."""

    def __init__(self, inventory_ledger: InventoryLedgerProtocol) -> None:
        self.inventory_ledger = inventory_ledger

    def check_availability(self, book_id: int) -> bool:
        """
        Report whether a copy is on the shelf right now.

        The answer is advisory: nothing is reserved, so a borrow that
        follows a True answer can still run out of stock.

        Raises:
            BookNotFoundError: If the book does not exist
        """
        return self.get_stock_level(book_id).is_available

    def get_stock_level(self, book_id: int) -> StockLevel:
        level = self.inventory_ledger.get_stock_level(BookId(book_id))
        if level is None:
            raise BookNotFoundError(book_id)
        return level

    def update_stock(self, book_id: int, change_amount: int) -> StockLevel:
        """
        Apply a signed change to a book's available copies, all or nothing.

        A change of zero still fails for an unknown book.

        Raises:
            BookNotFoundError: If the book does not exist
            OutOfStockError: If the change would take more copies than are available
            OverCapacityError: If the change would exceed total copies
            InventoryContentionError: If concurrent writers kept winning the race
        """
        if change_amount == 0:
            return self.get_stock_level(book_id)

        level = self.inventory_ledger.adjust(BookId(book_id), change_amount)
        logger.info(
            "book_stock_updated",
            book_id=book_id,
            change_amount=change_amount,
            available_copies=level.available_copies,
        )
        return level
