"""
Borrowing coordinator: the borrow half of the loan workflow.

Loans and inventory live in different contexts with no shared
transaction, so the loan is written first as PENDING and compensated to
FAILED when the stock update does not go through.
"""

from datetime import timedelta

import structlog

from libhub.application.loans.protocols.catalog_service import CatalogServiceProtocol
from libhub.application.loans.protocols.loan_repository import LoanRepositoryProtocol
from libhub.config import get_settings
from libhub.domain.common.exceptions import DomainError
from libhub.domain.common.value_objects.ids import BookId, UserId
from libhub.domain.loans.entities.loan import Loan
from libhub.domain.loans.exceptions import BookUnavailableError, BorrowFailedError

logger = structlog.get_logger(__name__)


class BorrowBookUseCase:
    """Check availability, record the loan, take a copy, compensate on failure."""

    def __init__(
        self,
        loan_repository: LoanRepositoryProtocol,
        catalog_service: CatalogServiceProtocol,
    ) -> None:
        self.loan_repository = loan_repository
        self.catalog_service = catalog_service

        settings = get_settings()
        self.loan_period = timedelta(days=settings.LOAN_PERIOD_DAYS)

    def borrow_book(self, user_id: int, book_id: int) -> Loan:
        """
        Borrow one copy of a book.

        Steps:
        1. Ask the catalog whether a copy is free (advisory, nothing reserved)
        2. Persist a PENDING loan
        3. Take one copy from the catalog
        4. Confirm the loan, or mark it FAILED if step 3 raised anything

        Args:
            user_id: ID of the borrowing member
            book_id: ID of the book

        Returns:
            The CheckedOut loan

        Raises:
            BookNotFoundError: If the catalog does not know the book (nothing recorded)
            BookUnavailableError: If no copy was free at step 1 (nothing recorded)
            CatalogUnavailableError: If the availability check could not reach the catalog
            BorrowFailedError: If step 3 failed; the loan is FAILED and the cause is chained
        """
        book_id_vo = BookId(book_id)

        if not self.catalog_service.is_book_available(book_id_vo):
            logger.info("borrow_rejected_unavailable", user_id=user_id, book_id=book_id)
            raise BookUnavailableError(book_id)

        loan = self.loan_repository.save(
            Loan.create(UserId(user_id), book_id_vo, loan_period=self.loan_period)
        )
        logger.debug("loan_pending", loan_id=loan.id.value, user_id=user_id, book_id=book_id)

        try:
            self.catalog_service.update_book_stock(book_id_vo, -1)
        except Exception as e:
            reason = e.message if isinstance(e, DomainError) else str(e)
            loan.fail()
            self.loan_repository.save(loan)
            logger.warning(
                "loan_compensated",
                loan_id=loan.id.value,
                book_id=book_id,
                reason=type(e).__name__,
                error=reason,
            )
            raise BorrowFailedError(loan.id.value, book_id, reason) from e

        loan.confirm_checkout()
        loan = self.loan_repository.save(loan)

        logger.info(
            "loan_checked_out",
            loan_id=loan.id.value,
            user_id=user_id,
            book_id=book_id,
            due_date=loan.due_date.isoformat(),
        )
        return loan
