"""
Pydantic Schemas Package

Pydantic models for request parsing and response serialization.

Schema Naming Convention:
- XxxCreate: Fields accepted when creating a new record
- XxxResponse: Fields returned in API responses
- ResponseEnvelope: The wrapper around every books response
"""

from book_catalog.schemas.book import BookCreate, BookResponse
from book_catalog.schemas.envelope import (
    FieldError,
    PageInfo,
    ResponseEnvelope,
)

__all__ = [
    # Book schemas
    "BookCreate",
    "BookResponse",
    # Envelope schemas
    "FieldError",
    "PageInfo",
    "ResponseEnvelope",
]
