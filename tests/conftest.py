"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached, so the environment must be in place first
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ALLOW_USER_REGISTRATIONS"] = "true"
os.environ["ADMIN_PASSWORD"] = ""
os.environ.pop("CATALOG_SERVICE_URL", None)

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from libhub.database import Base, get_db  # noqa: E402
from libhub.domain.catalog.entities.book import Book  # noqa: E402
from libhub.domain.identity.entities.user import User, UserRole  # noqa: E402
from libhub.infrastructure.catalog.repositories import BookRepository  # noqa: E402
from libhub.infrastructure.identity.repositories.user_repository import (  # noqa: E402
    UserRepository,
)
from libhub.infrastructure.identity.services.token_service import (  # noqa: E402
    create_access_token,
)
from libhub.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# One shared connection so every session sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(user.id.value, user.role.value)
    return {"Authorization": f"Bearer {token.access_token}"}


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    """Persist a user without a password; tests authenticate with minted tokens."""
    repository = UserRepository(db_session)

    def _make(
        email: str = "member@example.com",
        username: str = "member",
        role: UserRole = UserRole.MEMBER,
    ) -> User:
        return repository.save(User.create(username=username, email=email, role=role))

    return _make


@pytest.fixture
def member(make_user: Callable[..., User]) -> User:
    return make_user()


@pytest.fixture
def other_member(make_user: Callable[..., User]) -> User:
    return make_user(email="other@example.com", username="other")


@pytest.fixture
def admin(make_user: Callable[..., User]) -> User:
    return make_user(email="admin@example.com", username="admin", role=UserRole.ADMIN)


@pytest.fixture
def member_headers(member: User) -> dict[str, str]:
    return auth_headers(member)


@pytest.fixture
def admin_headers(admin: User) -> dict[str, str]:
    return auth_headers(admin)


@pytest.fixture
def make_book(db_session: Session) -> Callable[..., Book]:
    """Persist a book, optionally with some copies already out on loan."""
    repository = BookRepository(db_session)
    counter = {"n": 0}

    def _make(total_copies: int = 2, available_copies: int | None = None, **details: Any) -> Book:
        counter["n"] += 1
        book = Book.create(
            isbn=details.pop("isbn", f"97800000000{counter['n']:02d}"),
            title=details.pop("title", f"Book {counter['n']}"),
            author=details.pop("author", "Jane Author"),
            total_copies=total_copies,
            **details,
        )
        if available_copies is not None:
            book.available_copies = available_copies
        return repository.save(book)

    return _make


@pytest.fixture
def headers_for() -> Callable[[User], dict[str, str]]:
    return auth_headers
