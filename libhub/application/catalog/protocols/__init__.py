from .book_repository import BookRepositoryProtocol
from .inventory_ledger import InventoryLedgerProtocol

__all__ = [
    "BookRepositoryProtocol",
    "InventoryLedgerProtocol",
]
