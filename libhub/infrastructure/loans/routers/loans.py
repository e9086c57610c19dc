import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response
from starlette import status

from libhub.application.loans.use_cases.borrow_book_use_case import BorrowBookUseCase
from libhub.application.loans.use_cases.loan_query_use_case import LoanQueryUseCase
from libhub.application.loans.use_cases.return_book_use_case import ReturnBookUseCase
from libhub.core import container
from libhub.domain.catalog.exceptions import (
    BookNotFoundError,
    InventoryContentionError,
    OverCapacityError,
)
from libhub.domain.common.value_objects.ids import UserId
from libhub.domain.loans.exceptions import (
    BookUnavailableError,
    BorrowFailedError,
    CatalogUnavailableError,
    InvalidTransitionError,
    LoanNotFoundError,
)
from libhub.infrastructure.common.di import inject_use_case
from libhub.infrastructure.identity.dependencies import CurrentUser
from libhub.infrastructure.loans.schemas import BorrowRequest, LoanRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/loans", tags=["loans"])

LoanQuery = Annotated[LoanQueryUseCase, Depends(inject_use_case(container.loan_query_use_case))]


@router.post(
    "",
    response_model=LoanRecord,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def borrow_book(
    body: BorrowRequest,
    current_user: CurrentUser,
    use_case: BorrowBookUseCase = Depends(inject_use_case(container.borrow_book_use_case)),
) -> LoanRecord:
    """
    Borrow one copy of a book for the current user.

    409 means no copy could be taken. If the loan had already been recorded
    when that happened it is kept as FAILED.
    """
    try:
        loan = use_case.borrow_book(current_user.id.value, body.book_id)
        return LoanRecord.from_domain(loan)
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except BookUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except CatalogUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message
        ) from e
    except BorrowFailedError as e:
        if isinstance(e.__cause__, CatalogUnavailableError):
            code = status.HTTP_503_SERVICE_UNAVAILABLE
        elif isinstance(e.__cause__, BookNotFoundError):
            code = status.HTTP_404_NOT_FOUND
        else:
            code = status.HTTP_409_CONFLICT
        raise HTTPException(status_code=code, detail=e.message) from e


@router.put("/{loan_id}/return", status_code=status.HTTP_204_NO_CONTENT)
def return_book(
    loan_id: int,
    current_user: CurrentUser,
    use_case: ReturnBookUseCase = Depends(inject_use_case(container.return_book_use_case)),
) -> Response:
    """
    Return a checked out loan.

    The loan is recorded as Returned before the copy goes back on the
    shelf. A 409 or 503 here means the loan is closed but the copy was
    not released.
    """
    owner_id = None if current_user.is_admin() else current_user.id.value
    try:
        use_case.return_book(loan_id, user_id=owner_id)
    except LoanNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except (OverCapacityError, BookNotFoundError, InventoryContentionError) as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except CatalogUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message
        ) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=list[LoanRecord], response_model_exclude_none=True)
def get_my_loans(current_user: CurrentUser, use_case: LoanQuery) -> list[LoanRecord]:
    loans = use_case.get_loans_for_user(current_user.id.value)
    return [LoanRecord.from_domain(loan) for loan in loans]


@router.get(
    "/users/{user_id}", response_model=list[LoanRecord], response_model_exclude_none=True
)
def get_user_loans(
    user_id: int, current_user: CurrentUser, use_case: LoanQuery
) -> list[LoanRecord]:
    """Loans of any user for admins; members may only list their own."""
    if not current_user.can_access_user_data(UserId(user_id)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to view loans of this user",
        )
    return [LoanRecord.from_domain(loan) for loan in use_case.get_loans_for_user(user_id)]


@router.get("/{loan_id}", response_model=LoanRecord, response_model_exclude_none=True)
def get_loan(loan_id: int, current_user: CurrentUser, use_case: LoanQuery) -> LoanRecord:
    owner_id = None if current_user.is_admin() else current_user.id.value
    try:
        return LoanRecord.from_domain(use_case.get_loan(loan_id, user_id=owner_id))
    except LoanNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
