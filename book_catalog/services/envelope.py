"""
Response Envelope Builder

Turns a service Result (or a ServiceError raised anywhere else in the
request) into a ResponseEnvelope and then into a JSONResponse.

Success mapping depends on the operation:
- LIST:   200, data = page content, metadata = PageInfo
- GET:    200, data = [book]
- CREATE: 201, data = [book]
- DELETE: 200, no data

``data`` is always a list, even for one book, so every endpoint returns
the same shape. Failures carry the status of their ErrorKind and, for
validation problems, the list of field errors.

error_response() is the single place where errors become HTTP responses;
routers and exception handlers never build error bodies themselves.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from book_catalog.errors import Err, Result, ServiceError
from book_catalog.pagination import Page
from book_catalog.schemas.book import BookResponse
from book_catalog.schemas.envelope import PageInfo, ResponseEnvelope


class Operation(Enum):
    """Success status and message for each books operation."""

    LIST = (status.HTTP_200_OK, "Books retrieved successfully.")
    GET = (status.HTTP_200_OK, "Book retrieved successfully.")
    CREATE = (status.HTTP_201_CREATED, "Book created successfully.")
    DELETE = (status.HTTP_200_OK, "Book deleted successfully.")

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message


def page_info(page: Page) -> PageInfo:
    return PageInfo(
        page=page.number,
        size=page.size,
        total_pages=page.total_pages,
        total_items=page.total_items,
    )


def error_envelope(error: ServiceError) -> ResponseEnvelope:
    return ResponseEnvelope(
        status=error.status_code,
        message=error.message,
        errors=list(error.errors) or None,
    )


def build_envelope(result: Result[Any], operation: Operation) -> ResponseEnvelope:
    """
    Map a service result to the envelope for ``operation``.

    Args:
        result: Ok(Page | list | model | None) or Err(ServiceError)
        operation: Which endpoint produced the result

    Returns:
        A frozen ResponseEnvelope
    """
    if isinstance(result, Err):
        return error_envelope(result.error)

    value = result.value
    metadata = None

    if isinstance(value, Page):
        items = value.content
        metadata = page_info(value)
    elif value is None:
        items = []
    elif isinstance(value, list):
        items = value
    else:
        items = [value]

    data = [BookResponse.model_validate(item) for item in items]

    return ResponseEnvelope(
        status=operation.status_code,
        message=operation.message,
        data=data or None,
        metadata=metadata,
    )


def to_response(
    envelope: ResponseEnvelope,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=envelope.status,
        content=envelope.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


def respond(result: Result[Any], operation: Operation) -> JSONResponse:
    """Build the envelope for a service result and wrap it in a JSONResponse."""
    return to_response(build_envelope(result, operation))


def error_response(
    error: ServiceError,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON error response for ``error``."""
    return to_response(error_envelope(error), headers=headers)
