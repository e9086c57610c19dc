"""Loans domain layer."""

from libhub.domain.loans.entities.loan import DEFAULT_LOAN_PERIOD, Loan, LoanStatus
from libhub.domain.loans.exceptions import (
    BookUnavailableError,
    BorrowFailedError,
    CatalogUnavailableError,
    InvalidTransitionError,
    LoanNotFoundError,
)

__all__ = [
    "DEFAULT_LOAN_PERIOD",
    "BookUnavailableError",
    "BorrowFailedError",
    "CatalogUnavailableError",
    "InvalidTransitionError",
    "Loan",
    "LoanNotFoundError",
    "LoanStatus",
]
