"""
Book Storage Gateway

BookGateway defines what the book service needs from storage.
BookRepository implements it with SQLAlchemy 2.0 select() statements.

Each public method is one round trip (plus a COUNT for paged reads).
Write methods commit their own transaction; the service never touches
the session.
"""

from abc import ABC, abstractmethod

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from book_catalog.models import Book
from book_catalog.pagination import Page, PageRequest


class BookGateway(ABC):
    """Port for reading and persisting books."""

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page[Book]:
        raise NotImplementedError

    @abstractmethod
    def find_all_unpaged(self) -> list[Book]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, book_id: int) -> Book | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_author(self, author: str, page_request: PageRequest) -> Page[Book]:
        """Exact, case-sensitive match on author."""
        raise NotImplementedError

    @abstractmethod
    def find_by_title_containing_ignore_case(
        self, fragment: str, page_request: PageRequest
    ) -> Page[Book]:
        """Case-insensitive substring match on title."""
        raise NotImplementedError

    @abstractmethod
    def save(self, book: Book) -> Book:
        """Persist a book and return it with its generated id."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, book_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, book_id: int) -> None:
        raise NotImplementedError


class BookRepository(BookGateway):
    """
    SQLAlchemy adapter for the books table.

    Args:
        db: Session for the current request
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _paginate(self, stmt: Select, page_request: PageRequest) -> Page[Book]:
        """Count the filtered rows, then fetch one page ordered by id."""
        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = self.db.execute(count_stmt).scalar() or 0

        page_stmt = (
            stmt
            .order_by(Book.id)
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        books = list(self.db.execute(page_stmt).scalars().all())

        return Page(content=books, request=page_request, total_items=total)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def find_all(self, page_request: PageRequest) -> Page[Book]:
        return self._paginate(select(Book), page_request)

    def find_all_unpaged(self) -> list[Book]:
        return list(self.db.execute(select(Book).order_by(Book.id)).scalars().all())

    def find_by_id(self, book_id: int) -> Book | None:
        return self.db.get(Book, book_id)

    def find_by_author(self, author: str, page_request: PageRequest) -> Page[Book]:
        return self._paginate(select(Book).where(Book.author == author), page_request)

    def find_by_title_containing_ignore_case(
        self, fragment: str, page_request: PageRequest
    ) -> Page[Book]:
        # autoescape treats % and _ in the fragment as literal characters
        stmt = select(Book).where(Book.title.icontains(fragment, autoescape=True))
        return self._paginate(stmt, page_request)

    def exists_by_id(self, book_id: int) -> bool:
        stmt = select(select(Book.id).where(Book.id == book_id).exists())
        return bool(self.db.execute(stmt).scalar())

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def save(self, book: Book) -> Book:
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    def delete_by_id(self, book_id: int) -> None:
        book = self.db.get(Book, book_id)
        if book is not None:
            self.db.delete(book)
            self.db.commit()
