"""
Response Envelope Schemas

Every response from the books router, success or failure, has the shape:

    {
        "timestamp": "2024-05-01T10:15:30.123",
        "status": 200,
        "message": "Books retrieved successfully.",
        "errors": [{"field": "title", "message": "must not be blank"}],
        "data": [{"id": 1, "title": "Dune", ...}],
        "metadata": {"page": 1, "size": 10, "totalPages": 1, "totalItems": 1}
    }

Members that are empty or absent are omitted from the JSON rather than
emitted as null or [].
"""

from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_serializer,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from book_catalog.schemas.book import BookResponse


def _omit_empty(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None and value != []}


def now_millis() -> datetime:
    """Current local time truncated to millisecond precision."""
    now = datetime.now()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class FieldError(BaseModel):
    """A single validation failure, optionally tied to a named input."""

    field: str | None = None
    message: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return _omit_empty(handler(self))


class PageInfo(BaseModel):
    """Pagination metadata for list responses (camelCase on the wire)."""

    page: int = Field(..., ge=1, description="Current page number (1-based)")
    size: int = Field(..., ge=1, description="Requested page size")
    total_pages: int = Field(..., ge=1, description="Total number of pages")
    total_items: int = Field(..., ge=0, description="Total matching rows")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ResponseEnvelope(BaseModel):
    """
    Uniform response wrapper.

    Constructed once per request by book_catalog.services.envelope and
    serialized immediately; frozen so it cannot change in between.
    """

    timestamp: datetime = Field(default_factory=now_millis)
    status: int
    message: str
    errors: list[FieldError] | None = None
    data: list[BookResponse] | None = None
    metadata: PageInfo | None = None

    model_config = ConfigDict(frozen=True)

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> str:
        return value.isoformat(timespec="milliseconds")

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return _omit_empty(handler(self))
