"""Tests for the catalog endpoints: books, availability and stock."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from libhub.models import Book as BookORM

BOOKS_URL = "/api/v1/books"


def _stock(db_session: Session, book_id: int) -> tuple[int, int]:
    db_session.expire_all()
    row = db_session.get(BookORM, book_id)
    assert row is not None
    return row.available_copies, row.total_copies


class TestCatalogManagement:
    def test_admin_creates_book_with_every_copy_available(self, client, admin_headers):
        response = client.post(
            BOOKS_URL,
            json={
                "isbn": "9780141439518",
                "title": "Pride and Prejudice",
                "author": "Jane Austen",
                "genre": "Classic",
                "totalCopies": 3,
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["isbn"] == "9780141439518"
        assert data["totalCopies"] == 3
        assert data["availableCopies"] == 3
        assert data["genre"] == "Classic"

    def test_member_cannot_create_book(self, client, member_headers):
        response = client.post(
            BOOKS_URL,
            json={"isbn": "9780141439518", "title": "T", "author": "A", "totalCopies": 1},
            headers=member_headers,
        )
        assert response.status_code == 403

    def test_duplicate_isbn_is_rejected(self, client, admin_headers, make_book):
        make_book(isbn="9780141439518")

        response = client.post(
            BOOKS_URL,
            json={"isbn": "9780141439518", "title": "T", "author": "A", "totalCopies": 1},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_zero_copies_is_rejected(self, client, admin_headers):
        response = client.post(
            BOOKS_URL,
            json={"isbn": "9780141439518", "title": "T", "author": "A", "totalCopies": 0},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_list_books_is_paginated(self, client, make_book):
        for title in ("Gamma", "Alpha", "Beta"):
            make_book(title=title)

        response = client.get(BOOKS_URL, params={"offset": 1, "limit": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [b["title"] for b in data["items"]] == ["Beta"]

    def test_get_unknown_book_returns_404(self, client):
        assert client.get(f"{BOOKS_URL}/999").status_code == 404

    def test_update_details_leaves_counters_alone(
        self, client, admin_headers, make_book, db_session
    ):
        book = make_book(total_copies=3, available_copies=1)

        response = client.put(
            f"{BOOKS_URL}/{book.id.value}",
            json={"title": "New Title", "author": "New Author"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["title"] == "New Title"
        assert _stock(db_session, book.id.value) == (1, 3)

    def test_delete_book(self, client, admin_headers, make_book):
        book = make_book()

        response = client.delete(f"{BOOKS_URL}/{book.id.value}", headers=admin_headers)

        assert response.status_code == 204
        assert client.get(f"{BOOKS_URL}/{book.id.value}").status_code == 404


class TestAvailability:
    def test_available_when_a_copy_is_on_the_shelf(self, client, make_book):
        book = make_book(total_copies=2, available_copies=1)

        response = client.get(f"{BOOKS_URL}/{book.id.value}/availability")

        assert response.status_code == 200
        assert response.json() == {"isAvailable": True}

    def test_unavailable_when_every_copy_is_out(self, client, make_book):
        book = make_book(total_copies=2, available_copies=0)

        response = client.get(f"{BOOKS_URL}/{book.id.value}/availability")

        assert response.json() == {"isAvailable": False}

    def test_unknown_book_returns_404(self, client):
        assert client.get(f"{BOOKS_URL}/42/availability").status_code == 404


class TestStockUpdates:
    def test_decrement(self, client, member_headers, make_book, db_session):
        book = make_book(total_copies=2)

        response = client.put(
            f"{BOOKS_URL}/{book.id.value}/stock",
            json={"changeAmount": -1},
            headers=member_headers,
        )

        assert response.status_code == 204
        assert _stock(db_session, book.id.value) == (1, 2)

    def test_decrement_with_nothing_available_conflicts(
        self, client, member_headers, make_book, db_session
    ):
        book = make_book(total_copies=1, available_copies=0)

        response = client.put(
            f"{BOOKS_URL}/{book.id.value}/stock",
            json={"changeAmount": -1},
            headers=member_headers,
        )

        assert response.status_code == 409
        assert _stock(db_session, book.id.value) == (0, 1)

    def test_increment_beyond_total_conflicts(
        self, client, member_headers, make_book, db_session
    ):
        book = make_book(total_copies=2)

        response = client.put(
            f"{BOOKS_URL}/{book.id.value}/stock",
            json={"changeAmount": 1},
            headers=member_headers,
        )

        assert response.status_code == 409
        assert _stock(db_session, book.id.value) == (2, 2)

    def test_large_change_is_all_or_nothing(self, client, member_headers, make_book, db_session):
        book = make_book(total_copies=5, available_copies=2)

        response = client.put(
            f"{BOOKS_URL}/{book.id.value}/stock",
            json={"changeAmount": -3},
            headers=member_headers,
        )

        assert response.status_code == 409
        assert _stock(db_session, book.id.value) == (2, 5)

    def test_zero_change_still_requires_the_book(self, client, member_headers):
        response = client.put(
            f"{BOOKS_URL}/404/stock", json={"changeAmount": 0}, headers=member_headers
        )
        assert response.status_code == 404

    def test_stock_change_requires_authentication(self, client, make_book):
        book = make_book()

        response = client.put(f"{BOOKS_URL}/{book.id.value}/stock", json={"changeAmount": -1})

        assert response.status_code == 401

    def test_get_stock_level(self, client, make_book):
        book = make_book(total_copies=4, available_copies=3)

        response = client.get(f"{BOOKS_URL}/{book.id.value}/stock")

        assert response.json() == {"bookId": book.id.value, "availableCopies": 3, "totalCopies": 4}


class TestRestock:
    def test_restock_preserves_copies_on_loan(
        self, client, admin_headers, make_book, db_session
    ):
        book = make_book(total_copies=3, available_copies=1)

        response = client.put(
            f"{BOOKS_URL}/{book.id.value}/restock",
            json={"totalCopies": 5},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["availableCopies"] == 3
        assert _stock(db_session, book.id.value) == (3, 5)

    def test_restock_below_copies_on_loan_is_rejected(
        self, client, admin_headers, make_book, db_session
    ):
        book = make_book(total_copies=3, available_copies=0)

        response = client.put(
            f"{BOOKS_URL}/{book.id.value}/restock",
            json={"totalCopies": 2},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert _stock(db_session, book.id.value) == (0, 3)

    def test_member_cannot_restock(self, client, member_headers, make_book):
        book = make_book()

        response = client.put(
            f"{BOOKS_URL}/{book.id.value}/restock",
            json={"totalCopies": 10},
            headers=member_headers,
        )

        assert response.status_code == 403
