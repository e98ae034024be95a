"""
Input Validation

Explicit checks run by the router before it calls the book service.
Each function returns the ordered list of violations (empty when the input
is valid) instead of stopping at the first problem.

Body checks name the offending field. Path and query checks produce
message-only errors, the message itself says which input was wrong.
"""

from book_catalog.pagination import MIN_PAGE, MIN_PAGE_SIZE
from book_catalog.schemas.book import BookCreate
from book_catalog.schemas.envelope import FieldError

DESCRIPTION_MAX_LENGTH = 100
MIN_YEAR = 0
MIN_TITLE_FRAGMENT_LENGTH = 3

# Widest values the storage columns and paging arithmetic accept. Path and
# query values outside these bounds are rejected as type mismatches.
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
BIGINT_MAX = 2**63 - 1
BIGINT_MIN = -(2**63)

MAX_YEAR = INT_MAX


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_book(book: BookCreate) -> list[FieldError]:
    """Check a create payload; fields are reported in declaration order."""
    errors: list[FieldError] = []

    if _is_blank(book.title):
        errors.append(FieldError(field="title", message="must not be blank"))

    if _is_blank(book.author):
        errors.append(FieldError(field="author", message="must not be blank"))

    if book.description is not None and len(book.description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            FieldError(
                field="description",
                message=f"size must be between 0 and {DESCRIPTION_MAX_LENGTH}",
            )
        )

    if book.year is None:
        errors.append(FieldError(field="year", message="must not be null"))
    elif book.year < MIN_YEAR:
        errors.append(
            FieldError(
                field="year",
                message=f"must be greater than or equal to {MIN_YEAR}",
            )
        )
    elif book.year > MAX_YEAR:
        errors.append(
            FieldError(
                field="year",
                message=f"must be less than or equal to {MAX_YEAR}",
            )
        )

    return errors


def validate_page_request(page: int, size: int) -> list[FieldError]:
    errors: list[FieldError] = []
    if page < MIN_PAGE:
        errors.append(
            FieldError(message=f"Page must be greater than or equal to {MIN_PAGE}.")
        )
    if size < MIN_PAGE_SIZE:
        errors.append(
            FieldError(message=f"Size must be greater than or equal to {MIN_PAGE_SIZE}.")
        )
    return errors


def validate_title_fragment(fragment: str) -> list[FieldError]:
    if len(fragment) < MIN_TITLE_FRAGMENT_LENGTH:
        return [
            FieldError(
                message=(
                    f"Title must be at least {MIN_TITLE_FRAGMENT_LENGTH} "
                    "characters long."
                )
            )
        ]
    return []
