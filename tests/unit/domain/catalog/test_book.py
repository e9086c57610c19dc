"""Tests for the Book aggregate's stock rules."""

import pytest

from libhub.domain.catalog.entities.book import Book
from libhub.domain.catalog.exceptions import OutOfStockError, OverCapacityError
from libhub.domain.common.exceptions import InvariantViolationError, ValidationError
from libhub.domain.common.value_objects.ids import BookId


def _book(total: int = 2, available: int | None = None) -> Book:
    book = Book.create(
        isbn="9780000000001", title="Dune", author="Frank Herbert", total_copies=total
    )
    if available is not None:
        book.available_copies = available
    return book


class TestBookCreation:
    def test_new_book_has_every_copy_on_the_shelf(self):
        book = _book(total=3)
        assert book.available_copies == 3
        assert book.id == BookId(0)

    def test_strips_metadata(self):
        book = Book.create(isbn=" 123 ", title=" Dune ", author=" Herbert ", total_copies=1)
        assert (book.isbn, book.title, book.author) == ("123", "Dune", "Herbert")

    @pytest.mark.parametrize("total", [0, -1])
    def test_total_copies_must_be_positive(self, total):
        with pytest.raises(ValidationError):
            _book(total=total)

    def test_isbn_longer_than_thirteen_characters_is_rejected(self):
        with pytest.raises(ValidationError):
            Book.create(isbn="97800000000012", title="T", author="A", total_copies=1)

    def test_blank_title_is_rejected(self):
        with pytest.raises(ValidationError):
            Book.create(isbn="1", title="  ", author="A", total_copies=1)

    def test_reconstituting_an_impossible_stock_level_fails(self):
        with pytest.raises(InvariantViolationError):
            Book.create_with_id(
                id=BookId(1),
                isbn="1",
                title="T",
                author="A",
                total_copies=2,
                available_copies=3,
                created_at=_book().created_at,
            )


class TestStockMovements:
    def test_decrement_takes_one_copy(self):
        book = _book(total=2)
        book.decrement_stock()
        assert book.available_copies == 1
        assert book.copies_on_loan == 1
        assert book.updated_at is not None

    def test_decrement_with_nothing_available_raises_and_keeps_state(self):
        book = _book(total=1, available=0)
        with pytest.raises(OutOfStockError):
            book.decrement_stock()
        assert book.available_copies == 0

    def test_increment_beyond_total_raises_and_keeps_state(self):
        book = _book(total=2)
        with pytest.raises(OverCapacityError):
            book.increment_stock()
        assert book.available_copies == 2

    def test_adjust_is_all_or_nothing(self):
        book = _book(total=5, available=2)
        with pytest.raises(OutOfStockError):
            book.adjust_stock(-3)
        assert book.available_copies == 2

    def test_adjust_by_zero_changes_nothing(self):
        book = _book(total=2)
        book.adjust_stock(0)
        assert book.available_copies == 2
        assert book.updated_at is None

    def test_is_available(self):
        assert _book(total=1).is_available()
        assert not _book(total=1, available=0).is_available()


class TestRestock:
    def test_growing_keeps_copies_on_loan(self):
        book = _book(total=3, available=1)
        book.restock(5)
        assert (book.available_copies, book.total_copies) == (3, 5)

    def test_shrinking_to_exactly_the_copies_on_loan(self):
        book = _book(total=3, available=1)
        book.restock(2)
        assert (book.available_copies, book.total_copies) == (0, 2)

    def test_shrinking_below_copies_on_loan_fails(self):
        book = _book(total=3, available=0)
        with pytest.raises(InvariantViolationError):
            book.restock(2)
        assert (book.available_copies, book.total_copies) == (0, 3)

    def test_non_positive_total_fails(self):
        with pytest.raises(ValidationError):
            _book().restock(0)
