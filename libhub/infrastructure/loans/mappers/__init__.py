from .loan_mapper import LoanMapper

__all__ = ["LoanMapper"]
