"""End-to-end tests for borrowing and returning through the loans API."""

from datetime import datetime

from fastapi.testclient import TestClient
from sqlalchemy import event, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from libhub.domain.catalog.exceptions import OutOfStockError
from libhub.infrastructure.catalog.repositories import InventoryLedger
from libhub.models import Book as BookORM
from libhub.models import Loan as LoanORM

LOANS_URL = "/api/v1/loans"


def _available(db_session: Session, book_id: int) -> int:
    db_session.expire_all()
    row = db_session.get(BookORM, book_id)
    assert row is not None
    return row.available_copies


def _loan_rows(db_session: Session) -> list[LoanORM]:
    db_session.expire_all()
    return list(db_session.execute(select(LoanORM)).scalars())


def _borrow(client: TestClient, headers: dict[str, str], book_id: int):
    return client.post(LOANS_URL, json={"bookId": book_id}, headers=headers)


class TestBorrow:
    def test_borrow_checks_out_and_takes_a_copy(
        self, client, member, member_headers, make_book, db_session
    ):
        book = make_book(total_copies=2)

        response = _borrow(client, member_headers, book.id.value)

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "CheckedOut"
        assert data["userId"] == member.id.value
        assert data["bookId"] == book.id.value
        assert "returnDate" not in data
        assert _available(db_session, book.id.value) == 1

    def test_due_date_is_fourteen_days_after_checkout(self, client, member_headers, make_book):
        book = make_book()

        data = _borrow(client, member_headers, book.id.value).json()

        checkout = datetime.fromisoformat(data["checkoutDate"])
        due = datetime.fromisoformat(data["dueDate"])
        assert (due - checkout).days == 14

    def test_unavailable_book_creates_no_loan(
        self, client, member_headers, make_book, db_session
    ):
        book = make_book(total_copies=1, available_copies=0)

        response = _borrow(client, member_headers, book.id.value)

        assert response.status_code == 409
        assert response.json()["detail"] == f"Book {book.id.value} is not available"
        assert _loan_rows(db_session) == []
        assert _available(db_session, book.id.value) == 0

    def test_unknown_book_returns_404_and_creates_no_loan(
        self, client, member_headers, db_session
    ):
        response = _borrow(client, member_headers, 12345)

        assert response.status_code == 404
        assert _loan_rows(db_session) == []

    def test_borrowing_the_last_copy_then_again(
        self, client, member_headers, make_book, db_session
    ):
        book = make_book(total_copies=1)

        first = _borrow(client, member_headers, book.id.value)
        second = _borrow(client, member_headers, book.id.value)

        assert first.status_code == 201
        assert second.status_code == 409
        assert _available(db_session, book.id.value) == 0
        assert [row.status for row in _loan_rows(db_session)] == ["CheckedOut"]

    def test_copy_taken_after_the_check_fails_the_loan(
        self, client, member_headers, make_book, db_session, monkeypatch
    ):
        book = make_book(total_copies=1)

        def lose_the_race(self, book_id, change_amount):
            raise OutOfStockError(book_id.value)

        monkeypatch.setattr(InventoryLedger, "adjust", lose_the_race)

        response = _borrow(client, member_headers, book.id.value)

        assert response.status_code == 409
        assert response.json()["detail"].startswith("Failed to update book stock")
        assert [row.status for row in _loan_rows(db_session)] == ["FAILED"]
        assert _available(db_session, book.id.value) == 1

    def test_database_error_on_stock_write_fails_the_loan(
        self, client, member_headers, make_book, db_session
    ):
        book = make_book(total_copies=1)
        engine = db_session.get_bind()

        def locked_books_table(conn, cursor, statement, parameters, context, executemany):
            if statement.lstrip().upper().startswith("UPDATE BOOKS"):
                raise OperationalError(statement, parameters, Exception("database is locked"))

        event.listen(engine, "before_cursor_execute", locked_books_table)
        try:
            response = _borrow(client, member_headers, book.id.value)
        finally:
            event.remove(engine, "before_cursor_execute", locked_books_table)

        assert response.status_code == 409
        assert [row.status for row in _loan_rows(db_session)] == ["FAILED"]
        assert _available(db_session, book.id.value) == 1


class TestReturn:
    def test_return_releases_the_copy(self, client, member_headers, make_book, db_session):
        book = make_book(total_copies=1)
        loan_id = _borrow(client, member_headers, book.id.value).json()["loanId"]
        assert _available(db_session, book.id.value) == 0

        response = client.put(f"{LOANS_URL}/{loan_id}/return", headers=member_headers)

        assert response.status_code == 204
        assert _available(db_session, book.id.value) == 1
        loan = client.get(f"{LOANS_URL}/{loan_id}", headers=member_headers).json()
        assert loan["status"] == "Returned"
        assert loan["returnDate"] is not None

    def test_returning_twice_is_an_invalid_transition(
        self, client, member_headers, make_book, db_session
    ):
        book = make_book(total_copies=2)
        loan_id = _borrow(client, member_headers, book.id.value).json()["loanId"]
        client.put(f"{LOANS_URL}/{loan_id}/return", headers=member_headers)

        response = client.put(f"{LOANS_URL}/{loan_id}/return", headers=member_headers)

        assert response.status_code == 400
        assert _available(db_session, book.id.value) == 2

    def test_unknown_loan_returns_404(self, client, member_headers):
        response = client.put(f"{LOANS_URL}/999/return", headers=member_headers)
        assert response.status_code == 404

    def test_other_members_loan_is_not_found(
        self, client, member_headers, other_member, make_book, headers_for
    ):
        book = make_book()
        loan_id = _borrow(client, member_headers, book.id.value).json()["loanId"]

        response = client.put(
            f"{LOANS_URL}/{loan_id}/return", headers=headers_for(other_member)
        )

        assert response.status_code == 404

    def test_admin_can_return_any_loan(self, client, member_headers, admin_headers, make_book):
        book = make_book()
        loan_id = _borrow(client, member_headers, book.id.value).json()["loanId"]

        response = client.put(f"{LOANS_URL}/{loan_id}/return", headers=admin_headers)

        assert response.status_code == 204

    def test_release_failure_leaves_loan_returned(
        self, client, member_headers, admin_headers, make_book, db_session
    ):
        book = make_book(total_copies=1)
        loan_id = _borrow(client, member_headers, book.id.value).json()["loanId"]
        # Stock corrected by hand while the copy was out: the release has nowhere to go
        client.put(
            f"/api/v1/books/{book.id.value}/stock",
            json={"changeAmount": 1},
            headers=admin_headers,
        )

        response = client.put(f"{LOANS_URL}/{loan_id}/return", headers=member_headers)

        assert response.status_code == 409
        loan = client.get(f"{LOANS_URL}/{loan_id}", headers=member_headers).json()
        assert loan["status"] == "Returned"
        assert _available(db_session, book.id.value) == 1


class TestLoanQueries:
    def test_my_loans_include_every_status(
        self, client, member_headers, make_book, db_session
    ):
        available = make_book(total_copies=1)
        returned = make_book(total_copies=1)
        _borrow(client, member_headers, available.id.value)
        loan_id = _borrow(client, member_headers, returned.id.value).json()["loanId"]
        client.put(f"{LOANS_URL}/{loan_id}/return", headers=member_headers)

        response = client.get(f"{LOANS_URL}/me", headers=member_headers)

        assert response.status_code == 200
        assert sorted(loan["status"] for loan in response.json()) == ["CheckedOut", "Returned"]

    def test_member_cannot_list_someone_elses_loans(
        self, client, member_headers, other_member
    ):
        response = client.get(
            f"{LOANS_URL}/users/{other_member.id.value}", headers=member_headers
        )
        assert response.status_code == 403

    def test_admin_lists_any_users_loans(
        self, client, member, member_headers, admin_headers, make_book
    ):
        book = make_book()
        _borrow(client, member_headers, book.id.value)

        response = client.get(f"{LOANS_URL}/users/{member.id.value}", headers=admin_headers)

        assert response.status_code == 200
        assert [loan["bookId"] for loan in response.json()] == [book.id.value]

    def test_other_members_loan_is_hidden(
        self, client, member_headers, other_member, make_book, headers_for
    ):
        book = make_book()
        loan_id = _borrow(client, member_headers, book.id.value).json()["loanId"]

        response = client.get(f"{LOANS_URL}/{loan_id}", headers=headers_for(other_member))

        assert response.status_code == 404
