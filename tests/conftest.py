"""
pytest Fixtures for Book Catalog Tests

Database fixtures use SQLite in memory:
- session scope for the engine (tables created once)
- function scope for sessions, wrapped in a transaction that is rolled
  back after each test so tests never see each other's rows

FakeBookGateway is an in-memory BookGateway for service-level tests and
for checking which storage calls a request makes.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app: settings are read
# once and cached.
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from book_catalog.database import Base, get_db
from book_catalog.main import app
from book_catalog.models import Book
from book_catalog.pagination import Page, PageRequest
from book_catalog.repositories import BookGateway

BOOKS_URL = "/api/v1/books"


# =============================================================================
# FAKE GATEWAY
# =============================================================================
class FakeBookGateway(BookGateway):
    """In-memory gateway that records the name of every call."""

    def __init__(self, books: list[Book] | None = None) -> None:
        self.rows: dict[int, Book] = {}
        self.calls: list[str] = []
        self._next_id = 1
        for book in books or []:
            self._insert(book)

    def _insert(self, book: Book) -> Book:
        book.id = self._next_id
        self._next_id += 1
        self.rows[book.id] = book
        return book

    def _page(self, books: list[Book], page_request: PageRequest) -> Page[Book]:
        ordered = sorted(books, key=lambda book: book.id)
        start = page_request.offset
        return Page(
            content=ordered[start:start + page_request.size],
            request=page_request,
            total_items=len(ordered),
        )

    def find_all(self, page_request):
        self.calls.append("find_all")
        return self._page(list(self.rows.values()), page_request)

    def find_all_unpaged(self):
        self.calls.append("find_all_unpaged")
        return sorted(self.rows.values(), key=lambda book: book.id)

    def find_by_id(self, book_id):
        self.calls.append("find_by_id")
        return self.rows.get(book_id)

    def find_by_author(self, author, page_request):
        self.calls.append("find_by_author")
        matches = [book for book in self.rows.values() if book.author == author]
        return self._page(matches, page_request)

    def find_by_title_containing_ignore_case(self, fragment, page_request):
        self.calls.append("find_by_title_containing_ignore_case")
        matches = [
            book for book in self.rows.values()
            if fragment.lower() in book.title.lower()
        ]
        return self._page(matches, page_request)

    def save(self, book):
        self.calls.append("save")
        return self._insert(book)

    def exists_by_id(self, book_id):
        self.calls.append("exists_by_id")
        return book_id in self.rows

    def delete_by_id(self, book_id):
        self.calls.append("delete_by_id")
        self.rows.pop(book_id, None)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    SQLite in-memory engine shared by the whole test session.

    StaticPool keeps the single connection alive; without it the
    in-memory database would disappear between connections.
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
    Fresh session per test inside an outer transaction.

    Commits made by the repository stay inside the outer transaction,
    which is rolled back when the test ends.
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


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Test client whose requests use the test session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_book(db_session: Session) -> Book:
    book = Book(
        title="1984",
        author="George Orwell",
        description="A dystopian novel about surveillance.",
        year=1949,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """
    Twelve books for pagination tests.

    Even-numbered books are by "Frank Herbert", odd-numbered by
    "Isaac Asimov"; every third title contains "Dune".
    """
    books = []
    for i in range(12):
        title = f"Dune Chronicle {i + 1}" if i % 3 == 0 else f"Test Book {i + 1}"
        book = Book(
            title=title,
            author="Frank Herbert" if i % 2 == 0 else "Isaac Asimov",
            description=f"Description for book {i + 1}",
            year=1950 + i,
        )
        books.append(book)
        db_session.add(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books


@pytest.fixture
def fake_gateway() -> FakeBookGateway:
    return FakeBookGateway()
