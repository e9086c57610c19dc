from .book_repository import BookRepository
from .inventory_ledger import InventoryLedger

__all__ = [
    "BookRepository",
    "InventoryLedger",
]
