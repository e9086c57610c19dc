from .book_schemas import (
    AvailabilityResponse,
    BookCreate,
    BookResponse,
    BookUpdateRequest,
    RestockRequest,
    StockLevelResponse,
    StockUpdateRequest,
)

__all__ = [
    "AvailabilityResponse",
    "BookCreate",
    "BookResponse",
    "BookUpdateRequest",
    "RestockRequest",
    "StockLevelResponse",
    "StockUpdateRequest",
]
