from dataclasses import dataclass

from libhub.domain.common.exceptions import InvariantViolationError
from libhub.domain.common.value_object import ValueObject
from libhub.domain.common.value_objects.ids import BookId


@dataclass(frozen=True)
class StockLevel(ValueObject):
    """
    Snapshot of a book's copy counters.

    Returned by the inventory ledger after every successful mutation and by
    availability reads. A snapshot reserves nothing: by the time the caller
    acts on it another request may already have taken the last copy.
    """

    book_id: BookId
    available_copies: int
    total_copies: int

    def __post_init__(self) -> None:
        if not 0 <= self.available_copies <= self.total_copies:
            raise InvariantViolationError(
                "StockLevel", "available copies must be between 0 and total copies"
            )

    @property
    def is_available(self) -> bool:
        return self.available_copies > 0

    @property
    def copies_on_loan(self) -> int:
        return self.total_copies - self.available_copies
