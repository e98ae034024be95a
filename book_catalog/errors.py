"""
Error Taxonomy and Result Type

Service operations return a Result instead of raising:

    Ok(value)  - the operation succeeded
    Err(error) - the operation failed with a tagged ServiceError

ErrorKind fixes the HTTP status for every failure. The envelope builder
(book_catalog.services.envelope) is the only place a ServiceError becomes
an HTTP response; exception handlers in main.py convert framework errors
into ServiceError values and pass them there as well.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, Union

from fastapi import status

from book_catalog.schemas.envelope import FieldError

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories and the HTTP status each one maps to."""

    NOT_FOUND = "not_found"
    PAGE_OUT_OF_RANGE = "page_out_of_range"
    VALIDATION_FAILED = "validation_failed"
    TYPE_MISMATCH = "type_mismatch"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    RATE_LIMITED = "rate_limited"
    INTERNAL_ERROR = "internal_error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PAGE_OUT_OF_RANGE: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.TYPE_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorKind.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
    ErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

VALIDATION_FAILED_MESSAGE = "Validation failed."
TYPE_MISMATCH_MESSAGE = "Invalid parameter type"
PAGE_OUT_OF_RANGE_MESSAGE = "Page does not exist."
RATE_LIMITED_MESSAGE = "Too many requests. Please slow down."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


@dataclass(frozen=True)
class ServiceError:
    """A failure with its kind, a client-facing message and field errors."""

    kind: ErrorKind
    message: str
    errors: tuple[FieldError, ...] = field(default=())

    @property
    def status_code(self) -> int:
        return self.kind.status_code


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: ServiceError


Result = Union[Ok[T], Err]


# =============================================================================
# Constructors
# =============================================================================
def not_found(message: str) -> ServiceError:
    return ServiceError(ErrorKind.NOT_FOUND, message)


def page_out_of_range() -> ServiceError:
    return ServiceError(ErrorKind.PAGE_OUT_OF_RANGE, PAGE_OUT_OF_RANGE_MESSAGE)


def validation_failed(errors: list[FieldError]) -> ServiceError:
    return ServiceError(
        ErrorKind.VALIDATION_FAILED, VALIDATION_FAILED_MESSAGE, tuple(errors)
    )


def type_mismatch(fields: list[str]) -> ServiceError:
    return ServiceError(
        ErrorKind.TYPE_MISMATCH,
        TYPE_MISMATCH_MESSAGE,
        tuple(FieldError(field=name) for name in fields),
    )


def method_not_allowed(method: str) -> ServiceError:
    return ServiceError(
        ErrorKind.METHOD_NOT_ALLOWED,
        f"Request method '{method}' is not supported",
    )


def rate_limited() -> ServiceError:
    return ServiceError(ErrorKind.RATE_LIMITED, RATE_LIMITED_MESSAGE)


def internal_error() -> ServiceError:
    """The message is fixed so internal details never reach the client."""
    return ServiceError(ErrorKind.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)
