"""
pytest Fixtures for Bookshop API Tests

This file contains shared fixtures used across all test files.

FIXTURE SCOPES:
- session scope for the settings and the engine (expensive to create)
- function scope for sessions and clients (isolation between tests)

Every test gets its own application instance built by create_app() with
explicit test settings, and its get_db dependency is overridden to use a
session wrapped in a transaction that is rolled back afterwards.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set the secret BEFORE importing the app so get_settings() never fails
import os

TEST_SECRET_KEY = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["SECRET_KEY"] = TEST_SECRET_KEY

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import bookshop.models  # noqa: F401 - registers tables on Base.metadata
from bookshop.config import Settings
from bookshop.database import Base, get_db
from bookshop.main import create_app
from bookshop.models import Book, Review, User
from bookshop.services.security import create_access_token, hash_password

# =============================================================================
# SETTINGS AND DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Settings for tests: in-memory SQLite, open review writes."""
    return Settings(
        secret_key=TEST_SECRET_KEY,
        database_url="sqlite://",
        environment="testing",
        create_tables_on_startup=False,
        log_level="WARNING",
    )


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    so commits made by the services never leak between tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


def _make_client(app: FastAPI, db_session: Session) -> Generator[TestClient, None, None]:
    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(test_settings: Settings, db_session: Session) -> Generator[TestClient, None, None]:
    """Test client for an app with open review writes."""
    yield from _make_client(create_app(test_settings), db_session)


@pytest.fixture(scope="function")
def auth_settings(test_settings: Settings) -> Settings:
    """Test settings with the bearer guard enforced on review writes."""
    return test_settings.model_copy(update={"require_auth_for_reviews": True})


@pytest.fixture(scope="function")
def auth_client(auth_settings: Settings, db_session: Session) -> Generator[TestClient, None, None]:
    """Test client for an app that requires a token to write reviews."""
    yield from _make_client(create_app(auth_settings), db_session)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(
        isbn="978-3-16-148410-0",
        title="Example Book 1",
        author="Author 1",
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def catalog_books(db_session: Session) -> list[Book]:
    """Create the five-book sample catalog."""
    books = [
        Book(
            isbn=f"978-3-16-14841{i}-{check}",
            title=f"Example Book {i + 1}",
            author=f"Author {i + 1}",
        )
        for i, check in enumerate(["0", "7", "4", "1", "8"])
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a sample user for testing."""
    user = User(
        username="user1",
        email="user1@example.com",
        hashed_password=hash_password("password1"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_review(db_session: Session, sample_book: Book) -> Review:
    """Create a review linked into the sample book's review list."""
    review = Review(rating=5, comment="Great book!")
    sample_book.reviews.append(review)
    db_session.commit()
    db_session.refresh(review)
    return review


@pytest.fixture
def auth_headers(sample_user: User) -> dict:
    """Authorization header carrying a valid token for the sample user."""
    token = create_access_token(
        {
            "sub": sample_user.username,
            "username": sample_user.username,
            "email": sample_user.email,
        },
        TEST_SECRET_KEY,
    )
    return {"Authorization": f"Bearer {token}"}
