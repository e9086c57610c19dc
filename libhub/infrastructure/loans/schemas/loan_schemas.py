"""Pydantic schemas for loan API request/response validation."""

from datetime import datetime

from libhub.domain.loans.entities.loan import Loan, LoanStatus
from libhub.infrastructure.common.schemas.camel_model import CamelModel


class BorrowRequest(CamelModel):
    book_id: int


class LoanRecord(CamelModel):
    """Wire form of a loan. returnDate is absent until the loan is returned."""

    loan_id: int
    user_id: int
    book_id: int
    status: LoanStatus
    checkout_date: datetime
    due_date: datetime
    return_date: datetime | None = None

    @classmethod
    def from_domain(cls, loan: Loan) -> "LoanRecord":
        return cls(
            loan_id=loan.id.value,
            user_id=loan.user_id.value,
            book_id=loan.book_id.value,
            status=loan.status,
            checkout_date=loan.checkout_date,
            due_date=loan.due_date,
            return_date=loan.return_date,
        )
