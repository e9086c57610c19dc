from .loan_repository import LoanRepository

__all__ = ["LoanRepository"]
