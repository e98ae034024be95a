"""
SQLAlchemy Models Package

Models are SQLAlchemy ORM classes that map to database tables.

Import all models here to:
1. Make them available as: from book_catalog.models import Book
2. Ensure Alembic discovers them for migrations
"""

from book_catalog.models.book import Book

__all__ = [
    "Book",
]
