"""
Loan entity and its lifecycle.

    PENDING ──confirm_checkout()──> CheckedOut ──mark_returned()──> Returned
       │
       └──────fail()──────> FAILED

Returned and FAILED are terminal. Loans are never deleted, so a FAILED
row is the permanent record of a borrow attempt that did not get a copy.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import StrEnum

from libhub.domain.common.entity import Entity
from libhub.domain.common.value_objects.ids import BookId, LoanId, UserId
from libhub.domain.loans.exceptions import InvalidTransitionError

DEFAULT_LOAN_PERIOD = timedelta(days=14)


class LoanStatus(StrEnum):
    """Loan lifecycle states, valued as they appear on the wire."""

    PENDING = "PENDING"
    CHECKED_OUT = "CheckedOut"
    FAILED = "FAILED"
    RETURNED = "Returned"

    @property
    def is_terminal(self) -> bool:
        return self in (LoanStatus.FAILED, LoanStatus.RETURNED)


@dataclass(eq=False)
class Loan(Entity[LoanId]):
    """
    Borrowing record for one copy of one book.

    Business Rules:
    - Starts PENDING before any copy is taken
    - Due date is fixed at checkout plus the loan period
    - Status changes only through the transition methods below
    - References book and user by id only
    """

    id: LoanId
    user_id: UserId
    book_id: BookId
    status: LoanStatus
    checkout_date: datetime
    due_date: datetime
    return_date: datetime | None = None

    # Query methods
    def is_active(self) -> bool:
        """A checked out loan holds a physical copy."""
        return self.status == LoanStatus.CHECKED_OUT

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Check if a checked out loan is past its due date."""
        moment = now or datetime.now(UTC)
        return self.is_active() and moment > self.due_date

    # Transitions
    def confirm_checkout(self) -> None:
        """
        Mark the copy as handed out.

        Raises:
            InvalidTransitionError: If the loan is not PENDING
        """
        self._require(LoanStatus.PENDING, "confirm checkout of")
        self.status = LoanStatus.CHECKED_OUT

    def fail(self) -> None:
        """
        Compensate a borrow attempt whose stock update failed.

        Only a PENDING loan can fail. A loan that already holds a copy or
        has finished is never relabelled FAILED, even though the borrow
        workflow itself only ever calls this on a PENDING loan.

        Raises:
            InvalidTransitionError: If the loan is not PENDING
        """
        self._require(LoanStatus.PENDING, "fail")
        self.status = LoanStatus.FAILED

    def mark_returned(self, returned_at: datetime | None = None) -> None:
        """
        Record that the copy came back.

        Raises:
            InvalidTransitionError: If the loan is not checked out
        """
        self._require(LoanStatus.CHECKED_OUT, "return")
        self.status = LoanStatus.RETURNED
        self.return_date = returned_at or datetime.now(UTC)

    def _require(self, expected: LoanStatus, action: str) -> None:
        if self.status != expected:
            raise InvalidTransitionError(self.id.value, self.status.value, action)

    # Factory methods
    @classmethod
    def create(
        cls,
        user_id: UserId,
        book_id: BookId,
        loan_period: timedelta = DEFAULT_LOAN_PERIOD,
    ) -> "Loan":
        """Open a PENDING loan (ID will be 0 until persisted)."""
        now = datetime.now(UTC)
        return cls(
            id=LoanId.generate(),
            user_id=user_id,
            book_id=book_id,
            status=LoanStatus.PENDING,
            checkout_date=now,
            due_date=now + loan_period,
            return_date=None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LoanId,
        user_id: UserId,
        book_id: BookId,
        status: LoanStatus,
        checkout_date: datetime,
        due_date: datetime,
        return_date: datetime | None = None,
    ) -> "Loan":
        """Reconstitute a loan from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            book_id=book_id,
            status=status,
            checkout_date=checkout_date,
            due_date=due_date,
            return_date=return_date,
        )
