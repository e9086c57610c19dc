from .book_management_use_case import BookManagementUseCase
from .inventory_use_case import InventoryUseCase

__all__ = [
    "BookManagementUseCase",
    "InventoryUseCase",
]
