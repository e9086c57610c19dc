"""Loans domain exceptions."""

from libhub.domain.common.exceptions import DomainError, EntityNotFoundError


class LoanNotFoundError(EntityNotFoundError):
    """Raised when a loan cannot be found."""

    def __init__(self, loan_id: int) -> None:
        super().__init__("Loan", loan_id)
        self.loan_id = loan_id


class InvalidTransitionError(DomainError):
    """Raised when a loan is asked to move along an edge its state machine lacks."""

    def __init__(self, loan_id: int, current_status: str, action: str) -> None:
        super().__init__(
            f"Cannot {action} loan {loan_id} while it is {current_status}",
            {"loan_id": loan_id, "status": current_status, "action": action},
        )
        self.loan_id = loan_id
        self.current_status = current_status
        self.action = action


class BookUnavailableError(DomainError):
    """Raised when the availability check says no copy is free. Nothing was recorded."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book {book_id} is not available", {"book_id": book_id})
        self.book_id = book_id


class BorrowFailedError(DomainError):
    """
    Raised when taking a copy failed after the loan record was created.

    The loan has already been compensated to FAILED when this is raised;
    the underlying failure is chained as __cause__.
    """

    def __init__(self, loan_id: int, book_id: int, reason: str) -> None:
        super().__init__(
            f"Failed to update book stock. Borrowing of book {book_id} failed: {reason}",
            {"loan_id": loan_id, "book_id": book_id},
        )
        self.loan_id = loan_id
        self.book_id = book_id
        self.reason = reason


class CatalogUnavailableError(DomainError):
    """Raised when the catalog collaborator cannot be reached or answers with a server error."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(
            f"Catalog service unavailable during {operation}: {detail}",
            {"operation": operation},
        )
        self.operation = operation
        self.detail = detail
