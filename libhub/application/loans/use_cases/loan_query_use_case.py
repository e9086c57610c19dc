"""Read-only loan lookups."""

from libhub.application.loans.protocols.loan_repository import LoanRepositoryProtocol
from libhub.domain.common.value_objects.ids import LoanId, UserId
from libhub.domain.loans.entities.loan import Loan
from libhub.domain.loans.exceptions import LoanNotFoundError


class LoanQueryUseCase:
    def __init__(self, loan_repository: LoanRepositoryProtocol) -> None:
        self.loan_repository = loan_repository

    def get_loan(self, loan_id: int, user_id: int | None = None) -> Loan:
        """
        Get a loan by ID.

        Args:
            loan_id: ID of the loan
            user_id: When given, loans owned by other users are reported as missing

        Raises:
            LoanNotFoundError: If the loan does not exist or is not visible to user_id
        """
        loan = self.loan_repository.find_by_id(LoanId(loan_id))
        if not loan or (user_id is not None and loan.user_id.value != user_id):
            raise LoanNotFoundError(loan_id)
        return loan

    def get_loans_for_user(self, user_id: int) -> list[Loan]:
        """All loans of a user in every status, newest first."""
        return self.loan_repository.find_by_user_id(UserId(user_id))
