"""
Storage Gateway Package

BookGateway is the port the book service depends on; BookRepository is
its SQLAlchemy implementation, built per request from the request's
Session.
"""

from book_catalog.repositories.book_repository import BookGateway, BookRepository

__all__ = [
    "BookGateway",
    "BookRepository",
]
