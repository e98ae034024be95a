"""
Book Service

Business rules for the books resource, independent of HTTP.

Every operation makes one storage call and returns a Result:
- Ok(value) on success
- Err(ServiceError) for "not found" and, on the unfiltered list, "page
  out of range"

The service holds no state besides its gateway, so one instance per
request (built by book_catalog.dependencies) is cheap and thread-safe.
"""

import logging

from book_catalog.errors import Err, Ok, Result, not_found, page_out_of_range
from book_catalog.models import Book
from book_catalog.pagination import Page, PageRequest
from book_catalog.repositories import BookGateway
from book_catalog.schemas.book import BookCreate

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found."
NO_BOOKS_FOR_AUTHOR = "No books found for the given author."
NO_BOOKS_FOR_TITLE = "No books found with the given title."


def _check_page(page: Page[Book]) -> Result[Page[Book]]:
    if page.number > page.total_pages:
        logger.info(
            f"Page {page.number} requested but only {page.total_pages} page(s) exist"
        )
        return Err(page_out_of_range())
    return Ok(page)


class BookService:
    """
    Orchestrates storage calls for books.

    Args:
        gateway: Storage gateway (constructor-injected)

    Example:
        service = BookService(BookRepository(db))
        result = service.get_by_id(1)
    """

    def __init__(self, gateway: BookGateway) -> None:
        self.gateway = gateway

    def list_all(
        self, page_request: PageRequest | None = None
    ) -> Result[Page[Book]] | Result[list[Book]]:
        """
        List every book, paged when a PageRequest is given.

        An empty table is not an error: page 1 of an empty table is a
        valid, empty page.
        """
        if page_request is None:
            return Ok(self.gateway.find_all_unpaged())
        return _check_page(self.gateway.find_all(page_request))

    def get_by_id(self, book_id: int) -> Result[Book]:
        book = self.gateway.find_by_id(book_id)
        if book is None:
            logger.info(f"Book with ID: {book_id} not found.")
            return Err(not_found(BOOK_NOT_FOUND))
        return Ok(book)

    def list_by_author(self, author: str, page_request: PageRequest) -> Result[Page[Book]]:
        """
        Books whose author equals ``author`` exactly (case-sensitive).

        An empty slice is NotFound, including a page past the last one
        when the author does have books.
        """
        page = self.gateway.find_by_author(author, page_request)
        if page.is_empty():
            logger.info(f"No books found for author: {author} (page {page.number})")
            return Err(not_found(NO_BOOKS_FOR_AUTHOR))
        return Ok(page)

    def list_by_title(self, fragment: str, page_request: PageRequest) -> Result[Page[Book]]:
        """
        Books whose title contains ``fragment``, ignoring case.

        The router rejects fragments shorter than three characters
        before this is called. Like list_by_author, an empty slice is
        NotFound whatever the page number.
        """
        page = self.gateway.find_by_title_containing_ignore_case(fragment, page_request)
        if page.is_empty():
            logger.info(f"No books found for title: {fragment} (page {page.number})")
            return Err(not_found(NO_BOOKS_FOR_TITLE))
        return Ok(page)

    def create(self, book_data: BookCreate) -> Result[Book]:
        """Persist a validated payload; storage assigns the id."""
        book = Book(
            title=book_data.title,
            author=book_data.author,
            description=book_data.description,
            year=book_data.year,
        )
        return Ok(self.gateway.save(book))

    def delete(self, book_id: int) -> Result[None]:
        if not self.gateway.exists_by_id(book_id):
            logger.info(f"Book with ID: {book_id} not found.")
            return Err(not_found(BOOK_NOT_FOUND))
        self.gateway.delete_by_id(book_id)
        return Ok(None)
