"""
Book Pydantic Schemas

BookCreate only parses JSON types; the field rules (non-blank title and
author, description length, non-negative year) are checked by
book_catalog.validation.validate_book so that every violated field is
reported in one response.
"""

from pydantic import BaseModel, ConfigDict, Field


class BookCreate(BaseModel):
    """
    Request body for POST /books.

    All fields are optional at the parsing stage. A missing title or year
    is a validation failure reported alongside any other violations, not a
    parse error. Any client-supplied ``id`` is ignored.

    Example request body:
    {
        "title": "Dune",
        "author": "Herbert",
        "description": "Desert planet, spice and politics.",
        "year": 1965
    }
    """

    title: str | None = Field(
        default=None,
        description="Book title (required, non-blank)",
        examples=["Dune"],
    )

    author: str | None = Field(
        default=None,
        description="Author name (required, non-blank)",
        examples=["Herbert"],
    )

    description: str | None = Field(
        default=None,
        description="Short description, at most 100 characters",
        examples=["Desert planet, spice and politics."],
    )

    year: int | None = Field(
        default=None,
        description="Publication year (required, >= 0)",
        examples=[1965],
    )


class BookResponse(BaseModel):
    """Book as returned inside the envelope's ``data`` list."""

    id: int = Field(..., description="Unique identifier")
    title: str
    author: str
    description: str | None = None
    year: int

    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Dune",
                "author": "Herbert",
                "description": "Desert planet, spice and politics.",
                "year": 1965,
            }
        },
    )
