from typing import Protocol

from libhub.domain.common.value_objects.ids import LoanId, UserId
from libhub.domain.loans.entities.loan import Loan


class LoanRepositoryProtocol(Protocol):
    def find_by_id(self, loan_id: LoanId) -> Loan | None: ...

    def find_by_user_id(self, user_id: UserId) -> list[Loan]: ...

    def save(self, loan: Loan) -> Loan: ...
