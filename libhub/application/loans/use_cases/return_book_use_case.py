"""Borrowing coordinator: the return half of the loan workflow."""

import structlog

from libhub.application.loans.protocols.catalog_service import CatalogServiceProtocol
from libhub.application.loans.protocols.loan_repository import LoanRepositoryProtocol
from libhub.domain.common.value_objects.ids import LoanId
from libhub.domain.loans.entities.loan import Loan
from libhub.domain.loans.exceptions import LoanNotFoundError

logger = structlog.get_logger(__name__)


class ReturnBookUseCase:
    """Close a loan, then give its copy back to the catalog."""

    def __init__(
        self,
        loan_repository: LoanRepositoryProtocol,
        catalog_service: CatalogServiceProtocol,
    ) -> None:
        self.loan_repository = loan_repository
        self.catalog_service = catalog_service

    def return_book(self, loan_id: int, user_id: int | None = None) -> Loan:
        """
        Return a checked out loan.

        The loan is persisted as Returned before the catalog is touched.
        If releasing the copy then fails the error propagates and the loan
        stays Returned; the copy is missing from the shelf until an admin
        restocks.

        Args:
            loan_id: ID of the loan
            user_id: When given, only a loan owned by this user is found

        Raises:
            LoanNotFoundError: If the loan does not exist or belongs to someone else
            InvalidTransitionError: If the loan is not checked out
            OverCapacityError: If the catalog already has every copy on the shelf
            CatalogUnavailableError: If the catalog could not be reached
        """
        loan = self.loan_repository.find_by_id(LoanId(loan_id))
        if not loan or (user_id is not None and loan.user_id.value != user_id):
            raise LoanNotFoundError(loan_id)

        loan.mark_returned()
        loan = self.loan_repository.save(loan)

        try:
            self.catalog_service.update_book_stock(loan.book_id, 1)
        except Exception:
            logger.error(
                "loan_return_stock_release_failed",
                loan_id=loan_id,
                book_id=loan.book_id.value,
                exc_info=True,
            )
            raise

        logger.info("loan_returned", loan_id=loan_id, book_id=loan.book_id.value)
        return loan
