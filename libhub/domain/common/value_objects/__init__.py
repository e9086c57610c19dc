"""Common value objects shared across all domain modules."""

from .ids import BookId, LoanId, UserId

__all__ = [
    "BookId",
    "LoanId",
    "UserId",
]
