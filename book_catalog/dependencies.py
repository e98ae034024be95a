"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Wiring for the books router:

    get_db (Session) → BookRepository (gateway) → BookService

Each request gets its own session, gateway and service; nothing is looked
up from module-level state. Tests replace get_db through
app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from book_catalog.config import get_settings
from book_catalog.database import get_db
from book_catalog.pagination import PageRequest
from book_catalog.repositories import BookGateway, BookRepository
from book_catalog.schemas.envelope import FieldError
from book_catalog.services.books import BookService
from book_catalog.validation import INT_MAX, INT_MIN, validate_page_request

settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
#
# You can write:
#   def get_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Storage Gateway and Service
# =============================================================================
def get_book_gateway(db: DbSession) -> BookGateway:
    """Build the SQLAlchemy gateway for this request's session."""
    return BookRepository(db)


def get_book_service(
    gateway: Annotated[BookGateway, Depends(get_book_gateway)],
) -> BookService:
    """Build the book service with its gateway injected."""
    return BookService(gateway)


BookServiceDep = Annotated[BookService, Depends(get_book_service)]


# =============================================================================
# Pagination Parameters
# =============================================================================
class PaginationParams:
    """
    Common pagination parameters for list endpoints.

    Query parameters are only parsed here: a non-numeric value, or one
    outside the 32-bit range, is a type mismatch. Range checks happen in
    errors() so they can be reported together with other input problems:

        GET /books?page=2&size=20

    Usage in route:
        @router.get("")
        def list_books(pagination: Pagination, service: BookServiceDep):
            errors = pagination.errors()
            ...
            service.list_all(pagination.to_page_request())
    """

    def __init__(
        self,
        page: int = Query(
            default=1,
            ge=INT_MIN,
            le=INT_MAX,
            description="Page number (1-indexed, minimum 1)",
            examples=[1, 2, 3],
        ),
        size: int = Query(
            default=settings.default_page_size,
            ge=INT_MIN,
            le=INT_MAX,
            description="Number of items per page (minimum 5)",
            examples=[5, 10, 25],
        ),
    ) -> None:
        self.page = page
        self.size = size

    def errors(self) -> list[FieldError]:
        return validate_page_request(self.page, self.size)

    def to_page_request(self) -> PageRequest:
        """Convert the 1-based page number to a 0-based PageRequest."""
        return PageRequest.of(self.page, self.size)


Pagination = Annotated[PaginationParams, Depends()]
