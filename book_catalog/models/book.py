"""
Book Model

The single resource of the catalog, stored in the ``books`` table.

Column constraints mirror the field rules enforced by
book_catalog.validation, so a row that reaches the database always
satisfies them.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from book_catalog.database import Base


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - id: Server-generated primary key, never changed once assigned
    - title: Book title (required, non-blank)
    - author: Author name (required, non-blank, exact-match lookups)
    - description: Short summary, at most 100 characters
    - year: Publication year (required, >= 0)

    Example:
        book = Book(title="Dune", author="Herbert", year=1965)
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Book title"
    )

    # Indexed because /books/author/{name} filters on exact equality
    author: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author name"
    )

    description: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Short description (max 100 characters)"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Publication year"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
