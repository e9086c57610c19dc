from .borrow_book_use_case import BorrowBookUseCase
from .loan_query_use_case import LoanQueryUseCase
from .return_book_use_case import ReturnBookUseCase

__all__ = [
    "BorrowBookUseCase",
    "LoanQueryUseCase",
    "ReturnBookUseCase",
]
