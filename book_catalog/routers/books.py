"""
Books Router

CRUD endpoints for books:

    GET    /books                 paginated list of all books
    GET    /books/{id}            one book
    GET    /books/author/{name}   paginated list, exact author match
    GET    /books/title/{name}    paginated list, title substring (>= 3 chars)
    POST   /books                 create a book
    DELETE /books/{id}            delete a book

Every handler follows the same steps:
1. Validate inputs (book_catalog.validation); stop with 400 on violations
2. Make one BookService call, which returns Ok/Err
3. Hand the result to the envelope builder

Type errors in path/query/body never reach the handler; FastAPI raises
RequestValidationError and the handler in main.py maps it.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Request
from fastapi.responses import JSONResponse

from book_catalog.config import get_settings
from book_catalog.dependencies import BookServiceDep, Pagination
from book_catalog.errors import Err, Ok, validation_failed
from book_catalog.schemas import BookCreate, ResponseEnvelope
from book_catalog.services.envelope import Operation, respond
from book_catalog.services.rate_limiter import limiter
from book_catalog.validation import (
    BIGINT_MAX,
    BIGINT_MIN,
    validate_book,
    validate_title_fragment,
)

logger = logging.getLogger(__name__)
settings = get_settings()

# Ids are 64-bit; anything wider is a type mismatch, not a storage error
BookId = Annotated[
    int,
    Path(ge=BIGINT_MIN, le=BIGINT_MAX, description="Book ID"),
]

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": ResponseEnvelope, "description": "Invalid input"},
        404: {"model": ResponseEnvelope, "description": "Book or page not found"},
    },
)


@router.get(
    "",
    summary="List all books",
    description="Get a paginated list of all books. An empty catalog returns 200.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(
    request: Request,
    pagination: Pagination,
    service: BookServiceDep,
) -> JSONResponse:
    errors = pagination.errors()
    if errors:
        return respond(Err(validation_failed(errors)), Operation.LIST)

    result = service.list_all(pagination.to_page_request())
    if isinstance(result, Ok):
        logger.info(
            f"Books retrieved successfully. Total books: {len(result.value.content)}"
        )
    return respond(result, Operation.LIST)


@router.get(
    "/author/{name}",
    summary="Get books by author",
    description="Paginated list of books whose author matches exactly (case-sensitive).",
)
@limiter.limit(settings.rate_limit_default)
def list_books_by_author(
    request: Request,
    name: str,
    pagination: Pagination,
    service: BookServiceDep,
) -> JSONResponse:
    errors = pagination.errors()
    if errors:
        return respond(Err(validation_failed(errors)), Operation.LIST)

    result = service.list_by_author(name, pagination.to_page_request())
    if isinstance(result, Ok):
        logger.info(f"Books for {name} retrieved successfully.")
    return respond(result, Operation.LIST)


@router.get(
    "/title/{name}",
    summary="Get books by title",
    description=(
        "Paginated list of books whose title contains the given text, "
        "ignoring case. The text must be at least 3 characters long."
    ),
)
@limiter.limit(settings.rate_limit_default)
def list_books_by_title(
    request: Request,
    name: str,
    pagination: Pagination,
    service: BookServiceDep,
) -> JSONResponse:
    errors = validate_title_fragment(name) + pagination.errors()
    if errors:
        return respond(Err(validation_failed(errors)), Operation.LIST)

    result = service.list_by_title(name, pagination.to_page_request())
    if isinstance(result, Ok):
        logger.info(f"Books with title {name} retrieved successfully.")
    return respond(result, Operation.LIST)


@router.get(
    "/{id}",
    summary="Get a book by ID",
    description="Retrieve a single book. The book is returned as a one-element data list.",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    id: BookId,
    service: BookServiceDep,
) -> JSONResponse:
    result = service.get_by_id(id)
    if isinstance(result, Ok):
        logger.info(f"Book with ID: {id} retrieved successfully.")
    return respond(result, Operation.GET)


@router.post(
    "",
    status_code=201,
    summary="Create a book",
    description="Create a new book. Title and author must not be blank; year is required.",
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    service: BookServiceDep,
) -> JSONResponse:
    errors = validate_book(book_data)
    if errors:
        return respond(Err(validation_failed(errors)), Operation.CREATE)

    result = service.create(book_data)
    logger.info(f"Book with ID: {result.value.id} created successfully")
    return respond(result, Operation.CREATE)


@router.delete(
    "/{id}",
    summary="Delete a book",
    description="Permanently delete a book.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    id: BookId,
    service: BookServiceDep,
) -> JSONResponse:
    result = service.delete(id)
    if isinstance(result, Ok):
        logger.info(f"Book with ID: {id} deleted successfully.")
    return respond(result, Operation.DELETE)
