from .catalog_service import CatalogServiceProtocol
from .loan_repository import LoanRepositoryProtocol

__all__ = [
    "CatalogServiceProtocol",
    "LoanRepositoryProtocol",
]
