"""Catalog domain layer."""

from libhub.domain.catalog.entities.book import Book
from libhub.domain.catalog.exceptions import (
    BookNotFoundError,
    DuplicateIsbnError,
    InventoryContentionError,
    OutOfStockError,
    OverCapacityError,
)
from libhub.domain.catalog.value_objects.stock_level import StockLevel

__all__ = [
    "Book",
    "BookNotFoundError",
    "DuplicateIsbnError",
    "InventoryContentionError",
    "OutOfStockError",
    "OverCapacityError",
    "StockLevel",
]
