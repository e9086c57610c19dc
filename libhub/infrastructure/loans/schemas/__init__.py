from .loan_schemas import BorrowRequest, LoanRecord

__all__ = [
    "BorrowRequest",
    "LoanRecord",
]
