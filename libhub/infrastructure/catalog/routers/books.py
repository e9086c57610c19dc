import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from starlette import status

from libhub.application.catalog.use_cases.book_management_use_case import BookManagementUseCase
from libhub.application.catalog.use_cases.inventory_use_case import InventoryUseCase
from libhub.core import container
from libhub.domain.catalog.exceptions import (
    BookNotFoundError,
    DuplicateIsbnError,
    InventoryContentionError,
    OutOfStockError,
    OverCapacityError,
)
from libhub.domain.common.exceptions import InvariantViolationError, ValidationError
from libhub.infrastructure.common.di import inject_use_case
from libhub.infrastructure.common.schemas import PaginatedResponse
from libhub.infrastructure.catalog.schemas import (
    AvailabilityResponse,
    BookCreate,
    BookResponse,
    BookUpdateRequest,
    RestockRequest,
    StockLevelResponse,
    StockUpdateRequest,
)
from libhub.infrastructure.identity.dependencies import AdminUser, CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])

BookManagement = Annotated[
    BookManagementUseCase, Depends(inject_use_case(container.book_management_use_case))
]
Inventory = Annotated[InventoryUseCase, Depends(inject_use_case(container.inventory_use_case))]


def _not_found(e: BookNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.get("", response_model=PaginatedResponse[BookResponse])
def list_books(
    use_case: BookManagement,
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
) -> PaginatedResponse[BookResponse]:
    """List the catalog, ordered by title."""
    books, total = use_case.list_books(offset=offset, limit=limit)
    return PaginatedResponse[BookResponse](
        items=[BookResponse.from_domain(b) for b in books],
        total=total,
        offset=offset,
        limit=limit,
    )


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def create_book(
    book_data: BookCreate, _admin: AdminUser, use_case: BookManagement
) -> BookResponse:
    try:
        book = use_case.create_book(
            isbn=book_data.isbn,
            title=book_data.title,
            author=book_data.author,
            total_copies=book_data.total_copies,
            genre=book_data.genre,
            description=book_data.description,
        )
        return BookResponse.from_domain(book)
    except DuplicateIsbnError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: int, use_case: BookManagement) -> BookResponse:
    try:
        return BookResponse.from_domain(use_case.get_book(book_id))
    except BookNotFoundError as e:
        raise _not_found(e) from e


@router.put("/{book_id}", response_model=BookResponse)
def update_book(
    book_id: int, book_data: BookUpdateRequest, _admin: AdminUser, use_case: BookManagement
) -> BookResponse:
    try:
        book = use_case.update_book(
            book_id,
            title=book_data.title,
            author=book_data.author,
            genre=book_data.genre,
            description=book_data.description,
        )
        return BookResponse.from_domain(book)
    except BookNotFoundError as e:
        raise _not_found(e) from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, _admin: AdminUser, use_case: BookManagement) -> Response:
    try:
        use_case.delete_book(book_id)
    except BookNotFoundError as e:
        raise _not_found(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{book_id}/availability", response_model=AvailabilityResponse)
def check_availability(book_id: int, use_case: Inventory) -> AvailabilityResponse:
    """
    Report whether at least one copy is on the shelf.

    A point-in-time answer; nothing is reserved for the caller.
    """
    try:
        return AvailabilityResponse(is_available=use_case.check_availability(book_id))
    except BookNotFoundError as e:
        raise _not_found(e) from e


@router.get("/{book_id}/stock", response_model=StockLevelResponse)
def get_stock(book_id: int, use_case: Inventory) -> StockLevelResponse:
    try:
        return StockLevelResponse.from_domain(use_case.get_stock_level(book_id))
    except BookNotFoundError as e:
        raise _not_found(e) from e


@router.put("/{book_id}/stock", status_code=status.HTTP_204_NO_CONTENT)
def update_stock(
    book_id: int, body: StockUpdateRequest, _user: CurrentUser, use_case: Inventory
) -> Response:
    """
    Apply a signed change to the available copies, all or nothing.

    Responds 409 when the change would leave the counter outside
    0..total_copies, in which case nothing was changed.
    """
    try:
        use_case.update_stock(book_id, body.change_amount)
    except BookNotFoundError as e:
        raise _not_found(e) from e
    except (OutOfStockError, OverCapacityError, InventoryContentionError) as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{book_id}/restock", response_model=BookResponse)
def restock_book(
    book_id: int, body: RestockRequest, _admin: AdminUser, use_case: BookManagement
) -> BookResponse:
    """Set how many copies the library owns. Copies on loan are preserved."""
    try:
        return BookResponse.from_domain(use_case.restock(book_id, body.total_copies))
    except BookNotFoundError as e:
        raise _not_found(e) from e
    except (ValidationError, InvariantViolationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except InventoryContentionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
