import pytest

from libhub.domain.catalog.value_objects.stock_level import StockLevel
from libhub.domain.common.exceptions import InvariantViolationError
from libhub.domain.common.value_objects.ids import BookId


def test_stock_level_reports_availability():
    level = StockLevel(book_id=BookId(1), available_copies=1, total_copies=3)
    assert level.is_available
    assert level.copies_on_loan == 2


def test_empty_shelf_is_unavailable():
    assert not StockLevel(book_id=BookId(1), available_copies=0, total_copies=1).is_available


@pytest.mark.parametrize(("available", "total"), [(-1, 1), (2, 1)])
def test_stock_level_outside_bounds_is_rejected(available, total):
    with pytest.raises(InvariantViolationError):
        StockLevel(book_id=BookId(1), available_copies=available, total_copies=total)


def test_stock_levels_compare_by_value():
    assert StockLevel(BookId(1), 1, 2) == StockLevel(BookId(1), 1, 2)
